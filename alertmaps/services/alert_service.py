# alertmaps/services/alert_service.py

from datetime import datetime, timedelta, timezone
from typing import Callable, List, Optional

from alertmaps.core.logger import logger
from alertmaps.geo.distance import validate_coordinates, within_radius
from alertmaps.models.alerts import (
    Alert,
    AlertLocation,
    AlertSource,
    AlertType,
    Severity,
)
from alertmaps.models.geo import GeoPoint


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AlertService:
    """
    Serves the disaster alerts shown on the map.

    Alert storage lives in a separate service; this one holds a fixed set of
    development alerts around San Francisco whose timestamps are computed
    relative to `clock()` at request time.
    """

    def __init__(self, clock: Callable[[], datetime] = _utc_now) -> None:
        self.clock = clock

    def list_alerts(
        self,
        center: Optional[GeoPoint] = None,
        radius_m: Optional[float] = None,
        active_only: bool = False,
    ) -> List[Alert]:
        """
        Return alerts, optionally only those within `radius_m` metres of `center`
        and/or only active ones.
        """
        alerts = self._fixture_alerts()

        if center is not None and radius_m is not None:
            validate_coordinates(center.lat, center.lng)
            alerts = within_radius(center, alerts, radius_m, key=lambda a: a.location.point)

        if active_only:
            alerts = [a for a in alerts if a.is_active]

        logger.info(
            "Listing {} alert(s) (center={}, radius_m={}, active_only={})",
            len(alerts),
            center.as_query() if center else None,
            radius_m,
            active_only,
        )
        return alerts

    def _fixture_alerts(self) -> List[Alert]:
        now = self.clock()

        def alert(
            id: str,
            type: AlertType,
            severity: Severity,
            title: str,
            description: str,
            lat: float,
            lng: float,
            address: str,
            radius_km: float,
            age: timedelta,
            source: AlertSource,
            is_active: bool,
        ) -> Alert:
            return Alert(
                id=id,
                type=type,
                severity=severity,
                title=title,
                description=description,
                location=AlertLocation(
                    lat=lat, lng=lng, address=address, radius_m=radius_km * 1000.0
                ),
                timestamp=now - age,
                source=source,
                is_active=is_active,
                status="active" if is_active else "resolved",
            )

        return [
            alert(
                "1", AlertType.EARTHQUAKE, Severity.HIGH,
                "Magnitude 6.2 Earthquake",
                "Strong earthquake detected near downtown area. Buildings may be affected.",
                37.7749, -122.4194, "San Francisco, CA", 25,
                timedelta(0), AlertSource.METEOROLOGICAL, True,
            ),
            alert(
                "2", AlertType.FLOOD, Severity.CRITICAL,
                "Flash Flood Warning",
                "Severe flooding expected in low-lying areas due to heavy rainfall.",
                37.7849, -122.4094, "Mission District, SF", 15,
                timedelta(hours=1), AlertSource.TWITTER, True,
            ),
            alert(
                "3", AlertType.FIRE, Severity.MEDIUM,
                "Wildfire Alert",
                "Wildfire spreading in rural areas. Evacuation may be necessary.",
                37.7649, -122.4294, "Golden Gate Park, SF", 10,
                timedelta(hours=2), AlertSource.METEOROLOGICAL, False,
            ),
            alert(
                "4", AlertType.STORM, Severity.HIGH,
                "Severe Thunderstorm Warning",
                "Severe thunderstorm with high winds and hail approaching the area.",
                37.7549, -122.4394, "Richmond District, SF", 20,
                timedelta(minutes=30), AlertSource.METEOROLOGICAL, True,
            ),
            alert(
                "5", AlertType.TSUNAMI, Severity.CRITICAL,
                "Tsunami Watch",
                "Tsunami watch issued for coastal areas following offshore earthquake.",
                37.8049, -122.4194, "Fisherman's Wharf, SF", 30,
                timedelta(minutes=15), AlertSource.METEOROLOGICAL, True,
            ),
        ]
