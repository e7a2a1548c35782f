import logging
from logging.config import dictConfig

from lexdraft.settings import settings

dictConfig({
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "std": {
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "std",
        }
    },
    "root": {
        "level": settings.log_level.upper(),
        "handlers": ["console"],
    },
})

logger = logging.getLogger("lexdraft")
