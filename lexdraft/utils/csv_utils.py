import pandas as pd
from pathlib import Path
from .async_utils import run_sync
from lexdraft.logconf import logger

def read_csv(path: str | Path) -> pd.DataFrame:
    """
    Every cell is read as text; blank cells stay "" instead of NaN.
    """
    opts = dict(dtype=str, keep_default_na=False, skipinitialspace=True)
    try:
        return pd.read_csv(path, encoding="utf-8", **opts)
    except UnicodeDecodeError:
        return pd.read_csv(path, encoding="latin-1", **opts)
    except Exception as exc:
        logger.error("CSV read failed: %s", exc, exc_info=False)
        raise

@run_sync
def write_csv(df: pd.DataFrame, path: str | Path) -> None:
    """
    Write DataFrame to CSV on a thread pool so it doesn't block the event loop.
    """
    df.to_csv(path, index=False, encoding="utf-8")
