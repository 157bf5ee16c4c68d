"""
Application configuration using environment variables.
"""
from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings
from typing import List

DEFAULT_MONGODB_URI = "mongodb://localhost:27017"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Admin Portal API"
    debug: bool = False
    environment: str = "development"

    # Database
    mongodb_uri: str = DEFAULT_MONGODB_URI
    mongodb_db: str = "cc_admin_portal"
    mongodb_timeout_ms: int = 5000  # server selection timeout

    # Requests listing
    pagination_page_size: int = Field(default=10, gt=0)

    # CORS
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]

    # Rate limiting
    write_rate_limit: str = "30/minute"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Validate database settings on startup
settings = get_settings()
if settings.environment == "production" and settings.mongodb_uri == DEFAULT_MONGODB_URI:
    raise ValueError(
        "MONGODB_URI must be set in production! "
        "Point it at the portal cluster, e.g. mongodb+srv://<user>:<password>@<host>/"
    )
if not settings.mongodb_db:
    raise ValueError("MONGODB_DB must not be empty")
