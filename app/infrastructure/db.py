"""Database infrastructure setup."""

from sqlalchemy import MetaData, create_engine, text
from sqlalchemy.orm import sessionmaker

from app.infrastructure.config.settings import settings
from app.infrastructure.logging.logger import logger

# Engine creation is deferred until needed to avoid errors when using in-memory mode
_engine = None
_SessionLocal = None


def _get_engine():
    """Get or create the database engine."""
    global _engine
    if _engine is None:
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required for database operations")
        _engine = create_engine(
            settings.database_url,
            pool_pre_ping=True,  # Verify connections before using
            echo=settings.debug_mode,  # Log SQL queries in debug mode
        )
    return _engine


def get_db_session():
    """
    Get a database session.

    Returns:
        SQLAlchemy session instance
    """
    global _SessionLocal
    if _SessionLocal is None:
        engine = _get_engine()
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    return _SessionLocal()


def init_database(metadata: MetaData) -> None:
    """
    Connect to the database once at startup and create missing tables.

    Any failure propagates so the process refuses to start.

    Args:
        metadata: Metadata of the ORM models to create
    """
    engine = _get_engine()
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
    metadata.create_all(bind=engine)
    logger.info(f"Database ready | dialect={engine.dialect.name!r}")
