# tests/payloads.py
"""Canned Google Maps responses and a MockTransport helper."""
from typing import Any, Dict, List, Optional

import httpx

BASE_URL = "https://maps.test/maps/api"
API_KEY = "test-key"

# Canonical example from Google's polyline documentation
CANONICAL_POLYLINE = "_p~iF~ps|U_ulLnnqC_mqNvxq`@"


def directions_payload(status: str = "OK", polyline: str = CANONICAL_POLYLINE) -> Dict[str, Any]:
    return {
        "status": status,
        "geocoded_waypoints": [
            {"geocoder_status": "OK", "place_id": "origin-place"},
            {"geocoder_status": "OK", "place_id": "dest-place"},
        ],
        "routes": [
            {
                "summary": "US-101 S",
                "overview_polyline": {"points": polyline},
                "legs": [
                    {
                        "distance": {"text": "1.5 km", "value": 1512},
                        "duration": {"text": "6 mins", "value": 356},
                        "start_address": "Market St, San Francisco, CA",
                        "end_address": "Mission St, San Francisco, CA",
                        "steps": [
                            {
                                "html_instructions": "Head <b>south</b> on <b>Market St</b>",
                                "distance": {"text": "0.4 km", "value": 402},
                                "duration": {"text": "1 min", "value": 75},
                                "polyline": {"points": "_p~iF~ps|U"},
                            },
                            {
                                "html_instructions": "Turn <b>left</b> onto Mission St"
                                                     "<div style=\"font-size:0.9em\">Destination will be on the right</div>",
                                "distance": {"text": "1.1 km", "value": 1110},
                                "duration": {"text": "5 mins", "value": 281},
                                "polyline": {"points": "_ulLnnqC"},
                            },
                        ],
                    }
                ],
            },
            {
                "summary": "I-280 S",
                "overview_polyline": {"points": "_p~iF~ps|U"},
                "legs": [
                    {
                        "distance": {"text": "2.0 km", "value": 2010},
                        "duration": {"text": "8 mins", "value": 480},
                        "start_address": "Market St, San Francisco, CA",
                        "end_address": "Mission St, San Francisco, CA",
                        "steps": [],
                    }
                ],
            },
        ],
    }


def places_payload(status: str = "OK") -> Dict[str, Any]:
    # Deliberately out of distance order around (37.7749, -122.4194)
    results: List[Dict[str, Any]] = [
        {
            "place_id": "far",
            "name": "Far Hospital",
            "geometry": {"location": {"lat": 37.80, "lng": -122.45}},
            "vicinity": "3 Far Rd",
            "rating": 3.9,
            "user_ratings_total": 120,
            "business_status": "OPERATIONAL",
            "opening_hours": {"open_now": False},
            "types": ["hospital", "health"],
        },
        {
            "place_id": "near",
            "name": "Near Clinic",
            "geometry": {"location": {"lat": 37.7755, "lng": -122.4190}},
            "vicinity": "1 Near St",
            "business_status": "OPERATIONAL",
            "opening_hours": {"open_now": True},
            "types": ["hospital"],
        },
        {
            "place_id": "mid",
            "name": "Mid Medical Center",
            "geometry": {"location": {"lat": 37.7800, "lng": -122.4300}},
            "vicinity": "2 Mid Ave",
            "rating": 4.5,
            "user_ratings_total": 800,
            "price_level": 2,
            "types": ["hospital"],
        },
    ]
    if status != "OK":
        results = []
    return {"status": status, "results": results}


def json_transport(
    payload: Any,
    status_code: int = 200,
    seen: Optional[List[httpx.Request]] = None,
) -> httpx.MockTransport:
    """
    MockTransport answering every request with `payload`.
    Requests are appended to `seen` when given.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=payload)

    return httpx.MockTransport(handler)
