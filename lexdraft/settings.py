from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()  # load .env

class _Settings(BaseSettings):
    # Text rules
    default_target_language: str = "tamil"
    suggestion_batch_size: int = 4      # kinds run by "suggest all"

    # Validation / templates
    default_document_type: str = "default"
    missing_value_text: str    = "[Not provided]"

    # CSV register defaults
    # Default column names, can be overridden at runtime
    title_col: str    = "title"
    content_col: str  = "content"
    doc_type_col: str = "document_type"

    # Runtime
    max_concurrency: int = 5          # parallel tasks
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = False

settings = _Settings()           # singleton
