"""Application settings, sourced from the environment and an optional .env file."""
from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Database
    DATABASE_URL: str = "sqlite:///data/people.db"
    DB_POOL_SIZE: int = Field(5, ge=1)
    DB_MAX_OVERFLOW: int = Field(10, ge=0)
    DB_ECHO: bool = False

    # HTTP server
    SERVER_HOST: str = "localhost"
    SERVER_PORT: int = Field(8080, ge=1, le=65535)
    SERVER_IDLE_TIMEOUT_SECONDS: int = Field(60, ge=1)
    SHUTDOWN_TIMEOUT_SECONDS: float = Field(10.0, gt=0)
    HEALTHCHECK_TIMEOUT_SECONDS: float = Field(2.0, gt=0)

    # Prediction providers
    PROVIDER_TIMEOUT_SECONDS: float = Field(5.0, gt=0)
    AGIFY_URL: str = "https://api.agify.io"
    GENDERIZE_URL: str = "https://api.genderize.io"
    NATIONALIZE_URL: str = "https://api.nationalize.io"

    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v!r}")
        return level


settings = Settings()
