"""
Runtime settings for the claim document generator.

Values come from CLAIMDOCS_* environment variables, with a local .env file
as a fallback for development.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings shared by the generation service and the Streamlit page."""

    model_config = SettingsConfigDict(
        env_prefix="CLAIMDOCS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    download_delay_seconds: float = Field(
        default=0.5,
        ge=0,
        description="Pause between successive downloads in the all-documents batch"
    )
    log_level: str = Field(
        default="INFO",
        description="Minimum log level"
    )
    log_json: bool = Field(
        default=True,
        description="Emit JSON log lines instead of console output"
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Store log level names upper-cased."""
        return v.strip().upper() or "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once."""
    return Settings()
