"""
Application-level settings.

Database and JWT settings live next to the code that uses them
(``app.db.database`` and ``app.utils.jwt``).
"""

from typing import List
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """Application configuration settings."""

    app_name: str = "Workout Tracker API"
    log_level: str = "INFO"
    cors_origins: List[str] = ["*"]
    create_tables_on_startup: bool = True

    class Config:
        env_file = ".env"
        extra = "ignore"


app_settings = AppSettings()
