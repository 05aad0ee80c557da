# alertmaps/geo/distance.py
"""
Great-circle distance on a spherical Earth (Haversine formula).

All distances in this project are in metres. The spherical model is accurate
to about 0.5%, which is fine for proximity filtering and display.
"""

import math
from typing import Callable, Iterable, List, Optional, TypeVar

from alertmaps.core.errors import InvalidCoordinateError
from alertmaps.models.geo import GeoPoint

EARTH_RADIUS_M = 6_371_000.0

T = TypeVar("T")


def validate_coordinates(lat: float, lng: float) -> None:
    """
    Raise InvalidCoordinateError unless lat is in [-90, 90] and lng in [-180, 180].
    """
    try:
        lat_f = float(lat)
        lng_f = float(lng)
    except (TypeError, ValueError) as exc:
        raise InvalidCoordinateError(
            f"Latitude and longitude must be numbers, got ({lat!r}, {lng!r})"
        ) from exc

    if not (math.isfinite(lat_f) and math.isfinite(lng_f)):
        raise InvalidCoordinateError(
            f"Latitude and longitude must be finite, got ({lat_f}, {lng_f})"
        )
    if not -90.0 <= lat_f <= 90.0:
        raise InvalidCoordinateError(f"Invalid latitude {lat_f}: must be within [-90, 90]")
    if not -180.0 <= lng_f <= 180.0:
        raise InvalidCoordinateError(f"Invalid longitude {lng_f}: must be within [-180, 180]")


def parse_lat_lng(text: str) -> GeoPoint:
    """
    Parse a "lat,lng" string such as "37.7749,-122.4194".
    """
    if not isinstance(text, str):
        raise InvalidCoordinateError('Invalid coordinates format. Use "lat,lng" format.')

    parts = text.split(",")
    if len(parts) != 2:
        raise InvalidCoordinateError(
            f'Invalid coordinates format {text!r}. Use "lat,lng" format.'
        )

    try:
        lat = float(parts[0])
        lng = float(parts[1])
    except ValueError as exc:
        raise InvalidCoordinateError(
            f'Invalid coordinates format {text!r}. Use "lat,lng" format.'
        ) from exc

    validate_coordinates(lat, lng)
    return GeoPoint(lat=lat, lng=lng)


def haversine_distance_m(a: GeoPoint, b: GeoPoint) -> float:
    """
    Compute great-circle distance between two points (lat/lng in degrees), in metres.
    """
    validate_coordinates(a.lat, a.lng)
    validate_coordinates(b.lat, b.lng)

    phi1 = math.radians(a.lat)
    phi2 = math.radians(b.lat)
    dphi = math.radians(b.lat - a.lat)
    dlambda = math.radians(b.lng - a.lng)

    h = (
        math.sin(dphi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    )
    # rounding can push h just past 1 for antipodal points
    h = min(h, 1.0)
    return EARTH_RADIUS_M * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def within_radius(
    center: GeoPoint,
    items: Iterable[T],
    radius_m: float,
    key: Optional[Callable[[T], GeoPoint]] = None,
) -> List[T]:
    """
    Keep the items whose point lies at most `radius_m` metres from `center`.

    Input order is preserved. `key` extracts the point from each item;
    without it the items must be GeoPoints themselves.
    """
    if radius_m < 0:
        raise ValueError(f"radius_m must be non-negative, got {radius_m}")

    return [
        item for item in items
        if haversine_distance_m(center, key(item) if key else item) <= radius_m  # type: ignore[arg-type]
    ]
