"""
Configuration management for Roster backend
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ROSTER_",
        case_sensitive=False,
        extra="ignore",
    )

    # Persistence
    store_backend: str = "mongodb"  # 'mongodb', 'memory'
    mongodb_uri: str = Field(
        default="mongodb://localhost:27017/roster",
        validation_alias=AliasChoices("ROSTER_MONGODB_URI", "MONGODB_URI"),
    )
    mongodb_database: str = "roster"  # Used when the URI names no database
    mongodb_timeout_ms: int = 5000

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = Field(
        default=4000,
        validation_alias=AliasChoices("ROSTER_API_PORT", "PORT"),
    )
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]
    graphiql: bool = True

    # Password hashing (bcrypt cost factor)
    password_hash_rounds: int = 12

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"


# Global settings instance
settings = Settings()

# Debug: Log settings initialization (only in debug mode)
if settings.debug:
    from .logging import get_logger

    _logger = get_logger(__name__)
    _logger.debug(
        "Settings initialized",
        store_backend=settings.store_backend,
        environment=settings.environment,
    )
