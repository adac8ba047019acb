"""Application configuration with structured settings groups."""
from functools import lru_cache

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict


# =============================================================================
# Nested Settings Models
# =============================================================================


class LoggingSettings(BaseModel):
    """Root log level and record format applied by configure_logging()."""

    level: str = "INFO"
    format: str = "%(levelname)s - %(asctime)s - %(name)s - %(message)s"


class DatabaseOptions(BaseModel):
    """
    Database behaviour that is not part of the connection URL.

    create_tables_on_startup: Create missing tables in the app lifespan.
        There are no migrations; disable this when the schema is managed elsewhere.
    echo: Log every SQL statement emitted by SQLAlchemy.
    """

    create_tables_on_startup: bool = True
    echo: bool = False


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """
    Application settings with nested configuration groups.

    Environment variables use double underscore as delimiter for nested values.
    Example: LOGGING__LEVEL=DEBUG, DATABASE__ECHO=true
    """

    # Application metadata
    app_name: str = "Users API"
    app_version: str = "1.0.0"

    # Database
    database_url: str = "postgresql+asyncpg://localhost/users"

    # Nested settings groups
    logging: LoggingSettings = LoggingSettings()
    database: DatabaseOptions = DatabaseOptions()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
