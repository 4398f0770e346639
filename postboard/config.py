"""
postboard/config.py
-------------------
Process configuration. Values come from the environment, optionally
populated from a .env file in the working directory.
"""

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from postboard.errors import ConfigError


class Settings(BaseSettings):
    """Configuration options for the postboard service"""

    database_url: str = Field(min_length=1, description="PostgreSQL connection string")
    host: str = Field(default="0.0.0.0", description="Address the server binds to")
    port: int = Field(default=5000, description="Port the server listens on")
    pool_min_size: int = Field(
        default=1,
        ge=0,
        validation_alias=AliasChoices("DB_POOL_MIN_SIZE", "pool_min_size"),
        description="Minimum pooled connections",
    )
    pool_max_size: int = Field(
        default=10,
        ge=1,
        validation_alias=AliasChoices("DB_POOL_MAX_SIZE", "pool_max_size"),
        description="Maximum pooled connections",
    )
    log_level: str = Field(default="INFO", description="Root logger level")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()


def load_settings(**overrides) -> Settings:
    """Build settings from the environment and .env, translating validation failures.

    Raises:
        ConfigError: DATABASE_URL is unset or empty, or a value does not validate.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigError(_describe(e)) from e


def _describe(error: ValidationError) -> str:
    problems = []
    for detail in error.errors():
        location = ".".join(str(part) for part in detail["loc"])
        if location == "database_url":
            return "DATABASE_URL must be set"
        problems.append(f"{location.upper()}: {detail['msg']}")
    return "Invalid configuration: " + "; ".join(problems)
