# alertmaps/api/v1/routes_health.py
from fastapi import APIRouter

from alertmaps.core.config import settings
from alertmaps.models.maps import utc_now

router = APIRouter(
    prefix="/health",
    tags=["health"],
)


@router.get("", summary="Health check")
async def health_check():
    """
    Simple health check endpoint to verify that the API is running.
    """
    return {
        "status": "OK",
        "message": "Google Maps API service is running",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "mapsConfigured": bool(settings.GOOGLE_MAPS_API_KEY),
        "timestamp": utc_now().isoformat(),
    }
