# alertmaps/api/params.py
"""
Query-string parsing shared by the routers.

Query values arrive as raw strings so that bad input produces the 400
envelope ("Invalid coordinates", "Invalid radius") instead of a generic
validation error.
"""

from typing import Optional

from alertmaps.core.errors import InvalidCoordinateError, InvalidRadiusError, MissingParameterError
from alertmaps.geo.distance import validate_coordinates
from alertmaps.models.geo import GeoPoint


def require(message: str, **values: Optional[str]) -> None:
    """Raise MissingParameterError if any of the named values is missing or blank."""
    if any(v is None or v.strip() == "" for v in values.values()):
        raise MissingParameterError(message)


def parse_point(lat: str, lng: str) -> GeoPoint:
    try:
        point = GeoPoint(lat=float(lat), lng=float(lng))
    except ValueError as exc:
        raise InvalidCoordinateError(
            f"Latitude and longitude must be valid numbers, received lat={lat!r}, lng={lng!r}"
        ) from exc

    validate_coordinates(point.lat, point.lng)
    return point


def parse_radius(radius: Optional[str], default: int) -> int:
    if radius is None:
        return default
    try:
        # accept "5000" and "5000.0"
        return int(float(radius))
    except (ValueError, OverflowError) as exc:
        raise InvalidRadiusError(
            f"Radius must be a valid number, received {radius!r}"
        ) from exc
