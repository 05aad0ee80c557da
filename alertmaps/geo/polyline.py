# alertmaps/geo/polyline.py
"""
Google encoded polyline format (precision 1e5).

Each coordinate is stored as the delta from the previous point, scaled to an
integer, zigzag-encoded and written as 5-bit chunks offset by 63. A set 0x20
bit means another chunk follows.
"""

import math
from typing import Iterable, List, Optional, Tuple

from alertmaps.core.errors import DecodeError
from alertmaps.models.geo import GeoPoint

PRECISION = 1e5

_MIN_CHAR = 63   # '?'
_MAX_CHAR = 126  # '~'
_CONTINUATION = 0x20
_CHUNK_MASK = 0x1F
# 32-bit values need at most 7 chunks of 5 bits
_MAX_CHUNKS = 7


def decode_polyline(encoded: Optional[str]) -> List[GeoPoint]:
    """
    Decode an encoded polyline into an ordered list of points.

    Empty or None input gives an empty list. Malformed input (truncated
    stream, foreign characters, over-long values) raises DecodeError rather
    than returning a partial path.
    """
    if not encoded:
        return []

    points: List[GeoPoint] = []
    index = 0
    lat = 0
    lng = 0
    length = len(encoded)

    while index < length:
        dlat, index = _decode_value(encoded, index)
        if index >= length:
            raise DecodeError(
                f"Polyline truncated: latitude without longitude at position {index}",
                position=index,
            )
        dlng, index = _decode_value(encoded, index)

        lat += dlat
        lng += dlng
        points.append(GeoPoint(lat=lat / PRECISION, lng=lng / PRECISION))

    return points


def encode_polyline(points: Iterable[GeoPoint]) -> str:
    """
    Encode points into the polyline format, rounding to 1e-5 degrees.
    """
    chunks: List[str] = []
    prev_lat = 0
    prev_lng = 0

    for point in points:
        lat = _to_units(point.lat)
        lng = _to_units(point.lng)
        chunks.append(_encode_value(lat - prev_lat))
        chunks.append(_encode_value(lng - prev_lng))
        prev_lat, prev_lng = lat, lng

    return "".join(chunks)


def _to_units(degrees: float) -> int:
    """
    Scale degrees to 1e-5 units, rounding halves away from zero like
    Google's reference encoder (round() would round them to even).
    """
    units = math.floor(abs(degrees) * PRECISION + 0.5)
    return -units if degrees < 0 else units


def _decode_value(encoded: str, index: int) -> Tuple[int, int]:
    """
    Read one zigzag varint starting at `index`.

    Returns (value, index of the next unread character).
    """
    start = index
    result = 0
    shift = 0
    chunks = 0

    while True:
        if index >= len(encoded):
            raise DecodeError(
                f"Polyline truncated: value starting at position {start} is incomplete",
                position=start,
            )

        code = ord(encoded[index])
        if code < _MIN_CHAR or code > _MAX_CHAR:
            raise DecodeError(
                f"Invalid polyline character {encoded[index]!r} at position {index}",
                position=index,
            )

        chunks += 1
        if chunks > _MAX_CHUNKS:
            raise DecodeError(
                f"Polyline value starting at position {start} is too long",
                position=start,
            )

        b = code - _MIN_CHAR
        index += 1
        result |= (b & _CHUNK_MASK) << shift
        shift += 5

        if b < _CONTINUATION:
            break

    value = ~(result >> 1) if result & 1 else result >> 1
    return value, index


def _encode_value(value: int) -> str:
    value = ~(value << 1) if value < 0 else value << 1
    out = []
    while value >= _CONTINUATION:
        out.append(chr((_CONTINUATION | (value & _CHUNK_MASK)) + _MIN_CHAR))
        value >>= 5
    out.append(chr(value + _MIN_CHAR))
    return "".join(out)
