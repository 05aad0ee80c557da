# alertmaps/models/maps.py

from datetime import datetime, timezone
from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from alertmaps.models.geo import GeoPoint

T = TypeVar("T")


class CamelModel(BaseModel):
    """
    Base for response bodies: snake_case in Python, camelCase on the wire,
    which is what the browser client reads.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ApiResponse(CamelModel, Generic[T]):
    """
    Envelope used by every successful data endpoint:
    {"success": true, "data": ..., "timestamp": "..."}
    """
    success: bool = True
    data: T
    timestamp: datetime = Field(default_factory=utc_now)


class TextValue(CamelModel):
    """
    Google's human-readable text plus raw value
    (metres for distances, seconds for durations).
    """
    text: str
    value: int


class RouteStep(CamelModel):
    instruction: str
    distance: TextValue
    duration: TextValue
    polyline: str  # encoded


class RouteOption(CamelModel):
    """
    One alternative returned by the Directions API, reduced to its first leg.

    `path` is the decoded overview polyline, ready to draw.
    """
    route_index: int
    distance: TextValue
    duration: TextValue
    summary: str = ""
    encoded_polyline: str
    path: List[GeoPoint]
    start_address: Optional[str] = None
    end_address: Optional[str] = None
    steps: List[RouteStep] = []


class RouteResult(CamelModel):
    status: str = "success"
    routes: List[RouteOption]
    # passed through unchanged from Google
    geocoded_waypoints: List[Dict[str, Any]] = []


class SafeZone(CamelModel):
    """
    A nearby hospital returned by the Places API.
    `distance` is the great-circle distance from the search point, in metres.
    """
    id: str
    name: str
    location: GeoPoint
    address: Optional[str] = None
    rating: Optional[float] = None
    user_ratings_total: int = 0
    business_status: Optional[str] = None
    open_now: Optional[bool] = None
    price_level: Optional[int] = None
    types: List[str] = []
    distance: float


class SafeZonesResult(CamelModel):
    status: str = "success"
    safe_zones: List[SafeZone]
    search_location: GeoPoint
    radius: int
    total_found: int


class MapsConfig(CamelModel):
    """
    Settings the browser needs to load the Maps JavaScript API.
    """
    api_key: Optional[str] = None
    map_id: str
    libraries: List[str]
    version: str


class ErrorResponse(BaseModel):
    """Body of every error response: {"error": <title>, "message": <detail>}."""
    error: str
    message: str
