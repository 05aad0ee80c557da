# alertmaps/models/geo.py

from pydantic import BaseModel, ConfigDict


class GeoPoint(BaseModel):
    """
    Latitude/longitude pair in degrees.

    Points compare and hash by value. Ranges are not enforced here: decoded
    polylines are returned as encoded, and range checks happen where
    distances are computed (see alertmaps.geo.distance).
    """

    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float

    def as_query(self) -> str:
        """Format as the "lat,lng" string Google's web services expect."""
        return f"{self.lat},{self.lng}"
