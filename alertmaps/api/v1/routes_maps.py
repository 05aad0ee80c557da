# alertmaps/api/v1/routes_maps.py
from typing import Optional

from fastapi import APIRouter, Depends, Query

from alertmaps.api.dependencies import get_maps_service
from alertmaps.api.params import parse_point, parse_radius, require
from alertmaps.core.config import settings
from alertmaps.models.maps import ApiResponse, ErrorResponse, MapsConfig, RouteResult, SafeZonesResult
from alertmaps.services.google_maps import GoogleMapsService

# Error bodies produced by the exception handlers in alertmaps.main
GOOGLE_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing or invalid parameters"},
    502: {"model": ErrorResponse, "description": "Google returned an error or an unusable payload"},
    503: {"model": ErrorResponse, "description": "Google unreachable or API key not configured"},
}

router = APIRouter(tags=["maps"], responses=GOOGLE_ERROR_RESPONSES)

config_router = APIRouter(
    prefix="/api/maps",
    tags=["maps"],
)


@router.get(
    "/getRoute",
    response_model=ApiResponse[RouteResult],
    summary="Driving routes with alternatives between two points",
)
async def get_route(
    origin: Optional[str] = Query(None, description='Origin as "lat,lng"'),
    dest: Optional[str] = Query(None, description='Destination as "lat,lng"'),
    maps_service: GoogleMapsService = Depends(get_maps_service),
) -> ApiResponse[RouteResult]:
    """
    Proxy the Google Directions API.

    Every route carries its encoded overview polyline and the decoded `path`.
    """
    require(
        "Both origin and dest parameters are required, "
        "e.g. /getRoute?origin=37.7749,-122.4194&dest=37.7849,-122.4094",
        origin=origin,
        dest=dest,
    )
    result = await maps_service.get_route(origin, dest)
    return ApiResponse[RouteResult](data=result)


@router.get(
    "/getSafeZones",
    response_model=ApiResponse[SafeZonesResult],
    summary="Nearby hospitals, nearest first",
)
async def get_safe_zones(
    lat: Optional[str] = Query(None),
    lng: Optional[str] = Query(None),
    radius: Optional[str] = Query(None, description="Search radius in metres (1-50000)"),
    maps_service: GoogleMapsService = Depends(get_maps_service),
) -> ApiResponse[SafeZonesResult]:
    require(
        "Both lat and lng parameters are required, e.g. /getSafeZones?lat=37.7749&lng=-122.4194",
        lat=lat,
        lng=lng,
    )
    center = parse_point(lat, lng)
    search_radius = parse_radius(radius, settings.DEFAULT_SAFE_ZONE_RADIUS_M)

    result = await maps_service.get_safe_zones(center.lat, center.lng, search_radius)
    return ApiResponse[SafeZonesResult](data=result)


@config_router.get(
    "/config",
    response_model=MapsConfig,
    summary="Google Maps JavaScript API configuration",
)
async def get_maps_config() -> MapsConfig:
    return MapsConfig(
        api_key=settings.GOOGLE_MAPS_API_KEY,
        map_id=settings.GOOGLE_MAPS_MAP_ID,
        libraries=settings.GOOGLE_MAPS_LIBRARIES,
        version=settings.GOOGLE_MAPS_VERSION,
    )
