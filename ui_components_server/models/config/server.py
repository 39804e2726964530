"""Server configuration models."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerConfig(BaseSettings):
    """Runtime settings read from ``UI_LIB_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="UI_LIB_",
        env_file=".env",
        extra="ignore",
    )

    # No default: callers that scrape the documentation site must supply it
    base_url: str | None = None
    index_path: str = "/index.json"
    tokens_path: str = "/design-tokens"
    request_timeout: float = Field(default=30.0, gt=0)
    cache_ttl: float = Field(default=300.0, ge=0)
    search_fetch_details: bool = False
    selectors_file: Path | None = None
    log_level: str = "INFO"

    @field_validator("base_url")
    @classmethod
    def normalize_base_url(cls, v: str | None) -> str | None:
        """Strip whitespace and the trailing slash; treat blank as unset."""
        if v is None:
            return None
        v = v.strip().rstrip("/")
        return v or None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level


__all__ = ["ServerConfig"]
