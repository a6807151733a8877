import os
import logging
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load environment variables only for local development
if os.path.exists(".env"):
    load_dotenv()
    logger.info("Loading from .env file (local development)")

DEFAULT_DATA_FILE = "data.json"
DEFAULT_DATABASE_URL = "sqlite:///./strings.db"


@dataclass(frozen=True)
class Settings:
    store_backend: str = "json"
    data_file: str = DEFAULT_DATA_FILE
    database_url: str = DEFAULT_DATABASE_URL
    log_level: str = "INFO"
    port: int = 8000


def normalize_database_url(database_url: str) -> str:
    """SQLAlchemy expects an explicit driver for MySQL URLs."""
    if database_url.startswith("mysql://"):
        return database_url.replace("mysql://", "mysql+pymysql://", 1)
    return database_url


@lru_cache()
def get_settings() -> Settings:
    """Read settings from the environment (cached for the process)."""
    database_url = os.getenv("DATABASE_URL")
    if not database_url:
        database_url = DEFAULT_DATABASE_URL

    return Settings(
        store_backend=os.getenv("STORE_BACKEND", "json").strip().lower(),
        data_file=os.getenv("DATA_FILE", DEFAULT_DATA_FILE),
        database_url=normalize_database_url(database_url),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        port=int(os.getenv("PORT", 8000)),
    )
