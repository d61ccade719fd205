"""Application configuration and settings management."""

from typing import Any, Optional

import json
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="ECOROUTE_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    app_name: str = "EcoRoute Logistics API"
    api_prefix: str = "/api"
    log_level: str = Field(default="INFO", description="Log level for the ecoroute logger.")
    seed_sample_data: bool = Field(
        default=True,
        description="Load the demonstration routes, savings and predictions at startup.",
    )

    # Google Maps Directions provider
    google_maps_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("ECOROUTE_GOOGLE_MAPS_API_KEY", "GOOGLE_MAPS_API_KEY"),
        description="Directions API key. When unset every optimization uses the simulated estimator.",
    )
    directions_base_url: str = Field(
        default="https://maps.googleapis.com/maps/api/directions/json",
        description="Endpoint of the Google Directions web service.",
    )
    provider_timeout_seconds: float = Field(default=10.0, gt=0.0)
    provider_connect_timeout_seconds: float = Field(default=5.0, gt=0.0)
    provider_max_retries: int = Field(default=2, ge=0)
    provider_backoff_seconds: float = Field(default=0.5, ge=0.0)

    frontend_allowed_origins: tuple[str, ...] = Field(
        default=(
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:5000",
        ),
        description="Permitted web origins for browser clients (CORS).",
    )

    @field_validator("google_maps_api_key", mode="before")
    @classmethod
    def _blank_key_is_missing(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        value = str(value).strip()
        return value or None

    @field_validator("frontend_allowed_origins", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()

    @property
    def provider_configured(self) -> bool:
        return self.google_maps_api_key is not None


settings = Settings()
