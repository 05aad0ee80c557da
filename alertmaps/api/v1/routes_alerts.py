# alertmaps/api/v1/routes_alerts.py
from typing import Optional

from fastapi import APIRouter, Depends, Query

from alertmaps.api.dependencies import get_alert_service
from alertmaps.api.params import parse_point, parse_radius, require
from alertmaps.core.errors import InvalidRadiusError, MissingParameterError
from alertmaps.models.alerts import AlertListResponse
from alertmaps.models.maps import ErrorResponse
from alertmaps.services.alert_service import AlertService

router = APIRouter(
    tags=["alerts"],
    responses={400: {"model": ErrorResponse, "description": "Missing or invalid parameters"}},
)


@router.get(
    "/getalerts",
    response_model=AlertListResponse,
    summary="List disaster alerts",
)
async def get_alerts(
    lat: Optional[str] = Query(None),
    lng: Optional[str] = Query(None),
    radius: Optional[str] = Query(None, description="Only alerts within this many metres of lat/lng"),
    active: bool = Query(False, description="Only active alerts"),
    alert_service: AlertService = Depends(get_alert_service),
) -> AlertListResponse:
    """
    All alerts, or only those near a point when lat, lng and radius are given.
    """
    center = None
    radius_m = None

    if lat is not None or lng is not None:
        require("Both lat and lng parameters are required together", lat=lat, lng=lng)
        center = parse_point(lat, lng)

    if radius is not None:
        if center is None:
            raise MissingParameterError("radius requires lat and lng")
        radius_m = parse_radius(radius, default=0)
        if radius_m < 0:
            raise InvalidRadiusError(f"Radius must not be negative, received {radius!r}")

    alerts = alert_service.list_alerts(center=center, radius_m=radius_m, active_only=active)
    return AlertListResponse(data=alerts, count=len(alerts))
