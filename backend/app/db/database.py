"""
Database engine, session factory and declarative base.
"""

import logging

from pydantic_settings import BaseSettings
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

logger = logging.getLogger(__name__)


class DatabaseSettings(BaseSettings):
    """Database configuration settings."""

    database_url: str = "sqlite:///./workout_tracker.db"
    database_echo: bool = False

    class Config:
        env_file = ".env"
        extra = "ignore"


db_settings = DatabaseSettings()

connect_args = {}
if db_settings.database_url.startswith("sqlite"):
    # FastAPI may hand the session to a different thread than the one that created it
    connect_args = {"check_same_thread": False}

engine = create_engine(
    db_settings.database_url,
    echo=db_settings.database_echo,
    pool_pre_ping=True,
    connect_args=connect_args,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_database() -> None:
    """Create all tables that do not exist yet."""
    # Import models to register with Base.metadata
    from app import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified")


def get_db():
    """FastAPI dependency yielding a request-scoped database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
