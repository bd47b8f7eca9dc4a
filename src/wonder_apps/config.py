"""Runtime configuration for Wonder Apps."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="WONDER_", env_file=".env", extra="ignore")

    app_name: str = "wonder-apps"
    log_level: str = "WARNING"
    http_timeout_seconds: float = 6.0
    joke_api_base_url: str = Field(
        default="https://official-joke-api.appspot.com",
        description="Base URL of an official-joke-api compatible service.",
    )
    geocoding_enabled: bool = True
    nominatim_base_url: str = "https://nominatim.openstreetmap.org"
    geocoding_user_agent: str = "wonder-apps/0.1 (terminal)"
    location_backend: str = Field(
        default="ip",
        description="Where the current location comes from: 'ip' or 'static'.",
    )
    ip_location_url: str = "https://ipapi.co/json/"
    static_latitude: float | None = None
    static_longitude: float | None = None


settings = Settings()
