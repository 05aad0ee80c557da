# alertmaps/models/alerts.py

from datetime import datetime
from enum import Enum
from typing import List

from pydantic import Field, computed_field

from alertmaps.models.geo import GeoPoint
from alertmaps.models.maps import CamelModel, utc_now


class AlertType(str, Enum):
    EARTHQUAKE = "earthquake"
    FLOOD = "flood"
    FIRE = "fire"
    STORM = "storm"
    TSUNAMI = "tsunami"
    HURRICANE = "hurricane"
    TORNADO = "tornado"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class AlertSource(str, Enum):
    TWITTER = "twitter"
    METEOROLOGICAL = "meteorological"
    MANUAL = "manual"


class AlertLocation(CamelModel):
    lat: float
    lng: float
    address: str
    radius_m: float  # affected area around the point

    @computed_field  # type: ignore[prop-decorator]
    @property
    def radius(self) -> float:
        """Affected radius in kilometres, the unit the map client draws with."""
        return self.radius_m / 1000.0

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(lat=self.lat, lng=self.lng)


class Alert(CamelModel):
    id: str
    type: AlertType
    severity: Severity
    title: str
    description: str
    location: AlertLocation
    timestamp: datetime
    source: AlertSource
    is_active: bool
    status: str


class AlertListResponse(CamelModel):
    success: bool = True
    data: List[Alert]
    count: int
    timestamp: datetime = Field(default_factory=utc_now)
