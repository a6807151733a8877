from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base
import logging

logger = logging.getLogger(__name__)

Base = declarative_base()


# ------------------------------------------------------------------------------
# DATABASE ENGINE
# ------------------------------------------------------------------------------
def make_engine(database_url: str) -> Engine:
    """Create an SQLAlchemy engine for database_url."""
    if database_url.startswith("sqlite"):
        # The connection may be used from another thread than the one that opened it
        return create_engine(database_url, connect_args={"check_same_thread": False})

    return create_engine(
        database_url,
        pool_pre_ping=True,   # prevents "server has gone away" issues
        pool_recycle=280,     # helps with idle connection timeouts
    )


# ------------------------------------------------------------------------------
# INITIALIZATION
# ------------------------------------------------------------------------------
def init_db(engine: Engine):
    """Create the tables if they do not exist yet."""
    from string_analyzer import models  # noqa: F401  ensure models are imported
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created successfully.")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise
