# alertmaps/services/google_maps.py

import re
from time import perf_counter
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from alertmaps.core.errors import (
    DecodeError,
    InvalidCoordinateError,
    InvalidRadiusError,
    MapsApiError,
    MapsNotConfiguredError,
    UpstreamUnavailableError,
)
from alertmaps.core.logger import logger
from alertmaps.geo.distance import haversine_distance_m, parse_lat_lng, validate_coordinates
from alertmaps.geo.polyline import decode_polyline
from alertmaps.models.geo import GeoPoint
from alertmaps.models.maps import (
    RouteOption,
    RouteResult,
    RouteStep,
    SafeZone,
    SafeZonesResult,
    TextValue,
)

_HTML_TAG = re.compile(r"<[^>]*>")


class GoogleMapsService:
    """
    Thin client for the Google Directions and Places web services.

    - validates coordinates before calling out
    - maps Google's status codes onto our exceptions
    - reshapes responses into the models the browser client consumes
    """

    MIN_RADIUS_M: int = 1
    MAX_RADIUS_M: int = 50_000

    def __init__(
        self,
        api_key: Optional[str],
        base_url: str = "https://maps.googleapis.com/maps/api",
        timeout_s: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not api_key:
            raise MapsNotConfiguredError(
                "GOOGLE_MAPS_API_KEY environment variable is required"
            )
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        # Injected in tests (httpx.MockTransport); None means real network
        self._transport = transport

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    async def get_route(self, origin: str, destination: str) -> RouteResult:
        """
        Fetch driving routes (with alternatives) between two "lat,lng" strings.
        """
        origin_pt = parse_lat_lng(origin)
        destination_pt = parse_lat_lng(destination)

        logger.info(
            "Directions request ({:.6f}, {:.6f}) -> ({:.6f}, {:.6f})",
            origin_pt.lat,
            origin_pt.lng,
            destination_pt.lat,
            destination_pt.lng,
        )

        data = await self._get_json(
            "directions/json",
            {
                "origin": origin_pt.as_query(),
                "destination": destination_pt.as_query(),
                "alternatives": "true",
                "mode": "driving",
                "units": "metric",
            },
            api_name="Google Maps API",
        )

        if data.get("status") != "OK":
            raise MapsApiError(
                f"Google Maps API error: {data.get('status')} - "
                f"{data.get('error_message') or 'Unknown error'}"
            )

        routes = [
            self._build_route_option(index, route)
            for index, route in enumerate(data.get("routes", []))
        ]
        logger.info("Directions returned {} route(s)", len(routes))

        return RouteResult(
            routes=routes,
            geocoded_waypoints=data.get("geocoded_waypoints", []),
        )

    async def get_safe_zones(self, lat: float, lng: float, radius: int = 5000) -> SafeZonesResult:
        """
        Find hospitals within `radius` metres, nearest first.
        """
        validate_coordinates(lat, lng)
        if not self.MIN_RADIUS_M <= radius <= self.MAX_RADIUS_M:
            raise InvalidRadiusError(
                f"Radius must be between {self.MIN_RADIUS_M} and {self.MAX_RADIUS_M} meters"
            )

        center = GeoPoint(lat=lat, lng=lng)
        logger.info(
            "Places nearby search around ({:.6f}, {:.6f}), radius={} m", lat, lng, radius
        )

        data = await self._get_json(
            "place/nearbysearch/json",
            {
                "location": center.as_query(),
                "radius": radius,
                "type": "hospital",
            },
            api_name="Google Places API",
        )

        status = data.get("status")
        if status not in ("OK", "ZERO_RESULTS"):
            raise MapsApiError(
                f"Google Places API error: {status} - "
                f"{data.get('error_message') or 'Unknown error'}"
            )

        safe_zones = [self._build_safe_zone(center, place) for place in data.get("results", [])]
        safe_zones.sort(key=lambda zone: zone.distance)

        logger.info("Places returned {} safe zone(s)", len(safe_zones))

        return SafeZonesResult(
            safe_zones=safe_zones,
            search_location=center,
            radius=radius,
            total_found=len(safe_zones),
        )

    # ------------------------------------------------------------------ #
    # Internal helpers
    # ------------------------------------------------------------------ #

    async def _get_json(self, path: str, params: Dict[str, Any], api_name: str) -> Dict[str, Any]:
        """
        GET {base_url}/{path} with the API key attached and return the JSON body.
        """
        url = f"{self.base_url}/{path}"
        t0 = perf_counter()

        try:
            async with httpx.AsyncClient(timeout=self.timeout_s, transport=self._transport) as client:
                response = await client.get(url, params={**params, "key": self.api_key})
        except httpx.TransportError as exc:
            logger.error("Unable to reach {} at {}: {}", api_name, url, exc)
            raise UpstreamUnavailableError(f"Unable to connect to {api_name}") from exc

        logger.info(
            "{} {} -> HTTP {} in {:.2f} ms",
            api_name,
            path,
            response.status_code,
            (perf_counter() - t0) * 1000.0,
        )

        if response.status_code != 200:
            raise MapsApiError(
                f"{api_name} error: HTTP {response.status_code} - {response.text[:200]}"
            )

        try:
            data = response.json()
        except ValueError as exc:
            raise MapsApiError(f"{api_name} error: response is not valid JSON") from exc

        if not isinstance(data, dict):
            raise MapsApiError(
                f"{api_name} error: expected a JSON object, got {type(data).__name__}"
            )
        return data

    def _build_route_option(self, index: int, route: Dict[str, Any]) -> RouteOption:
        """
        Reduce a Directions route to its first leg (single-leg journeys only).
        """
        try:
            leg = route["legs"][0]
            encoded = route["overview_polyline"]["points"]
            path = decode_polyline(encoded)
            return RouteOption(
                route_index=index,
                distance=TextValue(**leg["distance"]),
                duration=TextValue(**leg["duration"]),
                summary=route.get("summary") or "",
                encoded_polyline=encoded,
                path=path,
                start_address=leg.get("start_address"),
                end_address=leg.get("end_address"),
                steps=[
                    RouteStep(
                        instruction=_HTML_TAG.sub("", step.get("html_instructions") or ""),
                        distance=TextValue(**step["distance"]),
                        duration=TextValue(**step["duration"]),
                        polyline=step["polyline"]["points"],
                    )
                    for step in leg.get("steps") or []
                ],
            )
        except DecodeError as exc:
            logger.warning("Route {} has an undecodable overview polyline: {}", index, exc)
            raise MapsApiError(f"Google Maps API error: malformed polyline in route {index}") from exc
        except (KeyError, IndexError, TypeError, AttributeError, ValidationError) as exc:
            logger.warning("Route {} does not match the Directions schema: {}", index, exc)
            raise MapsApiError(f"Google Maps API error: malformed route {index}") from exc

    def _build_safe_zone(self, center: GeoPoint, place: Dict[str, Any]) -> SafeZone:
        try:
            loc = place["geometry"]["location"]
            location = GeoPoint(lat=loc["lat"], lng=loc["lng"])
            opening_hours = place.get("opening_hours") or {}

            return SafeZone(
                id=place.get("place_id", ""),
                name=place.get("name", ""),
                location=location,
                address=place.get("vicinity"),
                rating=place.get("rating"),
                user_ratings_total=place.get("user_ratings_total") or 0,
                business_status=place.get("business_status"),
                open_now=opening_hours.get("open_now"),
                price_level=place.get("price_level"),
                types=place.get("types") or [],
                distance=haversine_distance_m(center, location),
            )
        except (KeyError, TypeError, AttributeError, ValidationError, InvalidCoordinateError) as exc:
            logger.warning("Place does not match the Places schema: {}", exc)
            raise MapsApiError("Google Places API error: malformed place in results") from exc
