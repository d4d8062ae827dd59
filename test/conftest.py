from __future__ import annotations

import copy
from typing import *

import pytest

OK_PAYLOAD: dict[str, Any] = {
    "status": "OK",
    "results": [
        {
            "address_components": [
                {
                    "long_name": "77",
                    "short_name": "77",
                    "types": ["street_number"],
                },
                {
                    "long_name": "Battery Street",
                    "short_name": "Battery St",
                    "types": ["route"],
                },
                {
                    "long_name": "San Francisco",
                    "short_name": "SF",
                    "types": ["locality", "political"],
                },
                {
                    "long_name": "United States",
                    "short_name": "US",
                    "types": ["country", "political"],
                },
                {
                    "types": ["postal_code", "some_future_type"],
                },
            ],
            "formatted_address": "77 Battery St, San Francisco, CA 94111, USA",
            "geometry": {
                "location": {"lat": 37.7954252, "lng": -122.3999173},
                "location_type": "ROOFTOP",
                "viewport": {
                    "northeast": {"lat": 37.7967741802915, "lng": -122.3985683197085},
                    "southwest": {"lat": 37.7940762197085, "lng": -122.4012662802915},
                },
            },
            "place_id": "ChIJ8xR8ZmKAhYARLhhQW2Lf1Kk",
            "types": ["street_address"],
        }
    ],
}


@pytest.fixture(scope="session")
def api_key() -> str:
    return "ABCD"


@pytest.fixture
def ok_payload() -> dict[str, Any]:
    return copy.deepcopy(OK_PAYLOAD)
