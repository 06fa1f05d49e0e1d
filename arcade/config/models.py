"""
Pydantic-based configuration models for the arcade asset server.

Configuration is read from environment variables (and a .env file when
present) using pydantic-settings.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..structured_logging.enhanced_logging_config import get_logger

logger = get_logger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS = ("key_value", "json")


class ServerConfig(BaseSettings):
    """Server network configuration."""

    host: str = Field(default="127.0.0.1", description="Server bind address")
    port: int = Field(default=4201, description="Server port")

    @field_validator("port")
    @classmethod
    def validate_port(cls, v: int) -> int:
        """Validate port is in valid range."""
        if not 1024 <= v <= 65535:
            logger.error("Invalid server port", port=v, valid_range="1024-65535")
            raise ValueError("Port must be between 1024 and 65535")
        return v

    model_config = SettingsConfigDict(env_prefix="SERVER_", case_sensitive=False, extra="ignore")


class DatabaseConfig(BaseSettings):
    """Database configuration."""

    url: str = Field(..., description="PostgreSQL database URL (required)")

    # Connection pool configuration (SQLAlchemy AsyncAdaptedQueuePool)
    pool_size: int = Field(default=20, description="Number of connections to maintain in pool")
    max_overflow: int = Field(default=0, description="Additional connections that can be created beyond pool_size")
    pool_timeout: int = Field(default=30, description="Seconds to wait for connection from pool")
    pool_recycle: int = Field(default=180, description="Maximum connection lifetime in seconds")
    echo: bool = Field(default=False, description="Log emitted SQL statements")

    @field_validator("url")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        """Validate database URL format - PostgreSQL only."""
        if not v:
            logger.error("Database URL validation failed - empty URL")
            raise ValueError("Database URL cannot be empty")
        if not v.startswith("postgresql"):
            logger.error(
                "Database URL validation failed - invalid protocol",
                url=v[:50],
                expected_protocol="postgresql",
            )
            raise ValueError("Database URL must start with 'postgresql'")
        return v

    @field_validator("pool_size", "pool_timeout", "pool_recycle")
    @classmethod
    def validate_pool_config(cls, v: int) -> int:
        """Validate pool configuration values are positive."""
        if v < 1:
            raise ValueError("Pool configuration values must be at least 1")
        return v

    @field_validator("max_overflow")
    @classmethod
    def validate_max_overflow(cls, v: int) -> int:
        """max_overflow may be zero (hard cap at pool_size) but never negative."""
        if v < 0:
            raise ValueError("max_overflow must not be negative")
        return v

    @property
    def async_url(self) -> str:
        """The URL with the asyncpg driver selected."""
        if self.url.startswith("postgresql+asyncpg"):
            return self.url
        if self.url.startswith("postgresql://"):
            return self.url.replace("postgresql://", "postgresql+asyncpg://", 1)
        scheme, _, rest = self.url.partition("://")
        return f"postgresql+asyncpg://{rest}" if scheme.startswith("postgresql+") else self.url

    model_config = SettingsConfigDict(env_prefix="DATABASE_", case_sensitive=False, extra="ignore")


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    environment: str = Field(default="local", description="Environment name added to log entries")
    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="key_value", description="Log renderer: key_value or json")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(VALID_LOG_LEVELS)}")
        return level

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        fmt = v.lower()
        if fmt not in VALID_LOG_FORMATS:
            raise ValueError(f"Log format must be one of {', '.join(VALID_LOG_FORMATS)}")
        return fmt

    model_config = SettingsConfigDict(env_prefix="LOGGING_", case_sensitive=False, extra="ignore")


class AppConfig(BaseSettings):
    """
    Application configuration composed of the section configs.

    Each section reads its own environment prefix; AppConfig only wires them
    together.
    """

    server: ServerConfig = Field(default_factory=ServerConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)  # type: ignore[arg-type]
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")
