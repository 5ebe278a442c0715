"""Database engine, session factory, and table creation."""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from pagecompose.core.config import settings
from pagecompose.db.base import Base

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    echo=settings.DEBUG,
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def create_tables(bind=None) -> None:
    """Create every table known to the models package."""
    import pagecompose.models  # noqa: F401  registers the mappers

    Base.metadata.create_all(bind=bind or engine)
