# tests/conftest.py
import os
import sys
from typing import Callable

import httpx
import pytest

# Add the project root directory to sys.path so that "import alertmaps" works
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from alertmaps.services.google_maps import GoogleMapsService  # noqa: E402
from tests.payloads import API_KEY, BASE_URL  # noqa: E402


@pytest.fixture
def make_service() -> Callable[[httpx.AsyncBaseTransport], GoogleMapsService]:
    def _make(transport: httpx.AsyncBaseTransport) -> GoogleMapsService:
        return GoogleMapsService(api_key=API_KEY, base_url=BASE_URL, transport=transport)

    return _make
