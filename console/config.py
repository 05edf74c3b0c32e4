"""Configuration management using pydantic-settings."""
import os
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: str = Field(
        default_factory=lambda: os.getenv("ENVIRONMENT", "development"),
        description="Environment: development, staging, production"
    )

    # Database
    database_url: str = Field(
        "sqlite+aiosqlite:///./vaccine_scheduler.db",
        description="SQLAlchemy async connection URL (sqlite+aiosqlite or postgresql+asyncpg)"
    )
    database_pool_size: int = Field(5, description="Connection pool size (PostgreSQL only)")
    database_max_overflow: int = Field(10, description="Max overflow connections (PostgreSQL only)")
    database_isolation_level: str = Field(
        "SERIALIZABLE",
        description="Transaction isolation level for server databases"
    )
    sqlite_busy_timeout: float = Field(
        5.0,
        description="Seconds a SQLite connection waits for a competing writer"
    )

    # Application
    debug: bool = Field(False, description="Debug mode (echo SQL)")
    log_level: str = Field("INFO", description="Logging level")
    log_dir: str = Field("logs", description="Directory for rotating log files")

    # Accounts
    password_min_length: int = Field(8, ge=1, description="Minimum password length")
    password_bcrypt_rounds: int = Field(
        12,
        ge=4,
        le=31,
        description="bcrypt cost factor for new password hashes"
    )

    @field_validator("database_isolation_level", mode="before")
    @classmethod
    def normalize_isolation_level(cls, v: str) -> str:
        """Accept 'serializable', 'repeatable read' etc. in any case."""
        return str(v).strip().upper().replace("-", " ").replace("_", " ")

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


# Global settings instance
settings = Settings()
