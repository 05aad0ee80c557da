# alertmaps/api/dependencies.py
from functools import lru_cache

from alertmaps.core.config import settings
from alertmaps.services.alert_service import AlertService
from alertmaps.services.google_maps import GoogleMapsService


@lru_cache
def get_maps_service() -> GoogleMapsService:
    """
    Shared Google Maps client.

    Raises MapsNotConfiguredError (503) while GOOGLE_MAPS_API_KEY is unset.
    Settings are read once at import, so a new key needs a restart.
    """
    return GoogleMapsService(
        api_key=settings.GOOGLE_MAPS_API_KEY,
        base_url=settings.GOOGLE_MAPS_BASE_URL,
        timeout_s=settings.HTTP_TIMEOUT_S,
    )


@lru_cache
def get_alert_service() -> AlertService:
    return AlertService()
