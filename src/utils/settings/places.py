"""Google Places web service settings configuration."""

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class PlacesSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    GOOGLE_MAPS_API_KEY: SecretStr | None = None
    PLACES_BASE_URL: str = "https://maps.googleapis.com/maps/api/place"
    PLACES_TIMEOUT: float = 10.0  # seconds
    PLACES_USER_AGENT: str = "places-autocomplete-python/0.1.0"
    PLACES_ACCEPT_ENCODING: str = "gzip"


places_settings = PlacesSettings()


__all__ = ["PlacesSettings", "places_settings"]
