# alertmaps/core/errors.py
from typing import Optional


class AlertMapsError(Exception):
    """
    Base class for errors that map onto an HTTP error response.

    `title` becomes the "error" field of the JSON body, the exception message
    becomes the "message" field.
    """

    status_code: int = 500
    title: str = "Internal server error"


class InvalidCoordinateError(AlertMapsError, ValueError):
    """Latitude/longitude missing, not a number, or out of range."""

    status_code = 400
    title = "Invalid coordinates"


class InvalidRadiusError(AlertMapsError, ValueError):
    status_code = 400
    title = "Invalid radius"


class MissingParameterError(AlertMapsError):
    status_code = 400
    title = "Missing required parameters"


class DecodeError(AlertMapsError, ValueError):
    """
    Raised when an encoded polyline is truncated or contains characters
    outside the polyline alphabet.
    """

    status_code = 400
    title = "Invalid polyline"

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        super().__init__(message)
        self.position = position


class MapsApiError(AlertMapsError):
    """Google Maps returned an error status or an unusable payload."""

    status_code = 502
    title = "Google Maps API error"


class UpstreamUnavailableError(AlertMapsError):
    status_code = 503
    title = "Service unavailable"


class MapsNotConfiguredError(AlertMapsError):
    status_code = 503
    title = "Maps service not configured"
