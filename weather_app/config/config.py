from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """
    Application settings loaded from environment variables and .env files.

    This class handles all configuration for the weather app including the
    Geoapify API key, provider endpoints, the HTTP request policy and logging.
    """

    # API Keys
    geoapify_api_key: Optional[str] = Field(
        default=None, description="Geoapify API key for geocoding requests"
    )

    # Provider Configuration
    geoapify_base_url: str = Field(
        default="https://api.geoapify.com", description="Geoapify API base URL"
    )
    open_meteo_base_url: str = Field(
        default="https://api.open-meteo.com", description="Open-Meteo API base URL"
    )

    # HTTP Configuration
    http_timeout_seconds: float = Field(
        default=10.0, gt=0, description="Absolute timeout for a single request"
    )
    user_agent: str = Field(
        default="weather_app/1.0", description="Client identification sent with every request"
    )

    # Logging Configuration
    log_level: str = Field(default="CRITICAL", description="Logging level")
    log_format: str = Field(default="text", description="Log format (json/text)")
    log_file: Optional[str] = Field(default=None, description="Optional log file path")

    @field_validator("geoapify_api_key")
    def normalize_geoapify_api_key(cls, v):
        # An empty key is treated the same as a missing one
        if v is None or not v.strip():
            return None
        return v.strip()

    @field_validator("geoapify_base_url", "open_meteo_base_url")
    def strip_trailing_slash(cls, v):
        return v.rstrip("/")

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    def validate_log_format(cls, v):
        if v.lower() not in ("json", "text"):
            raise ValueError(f"Invalid log format: {v}. Must be 'json' or 'text'")
        return v.lower()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_config() -> Config:
    """
    Load settings on first use.

    Raises:
        ValidationError: If the environment holds invalid settings
    """
    return Config()
