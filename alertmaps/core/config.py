# alertmaps/core/config.py
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables (.env file).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Alert Maps API"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Browser client origin, added to the local dev origins for CORS
    CLIENT_URL: str = "http://localhost:5173"

    # Google Maps Platform
    GOOGLE_MAPS_API_KEY: Optional[str] = None
    GOOGLE_MAPS_BASE_URL: str = "https://maps.googleapis.com/maps/api"
    GOOGLE_MAPS_MAP_ID: str = "526d8b272b9c6bc936f68256"
    GOOGLE_MAPS_LIBRARIES: List[str] = ["marker", "places", "geometry"]
    GOOGLE_MAPS_VERSION: str = "weekly"

    # Outbound HTTP timeout (seconds)
    HTTP_TIMEOUT_S: float = 10.0

    DEFAULT_SAFE_ZONE_RADIUS_M: int = 5000

    @property
    def cors_origins(self) -> List[str]:
        origins = [
            "http://localhost:3000",
            "http://localhost:5173",  # Vite dev server
            "http://localhost:8000",
        ]
        if self.CLIENT_URL not in origins:
            origins.append(self.CLIENT_URL)
        return origins


settings = Settings()
