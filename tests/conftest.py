"""Test configuration and fixtures."""

import pytest

from mbta_subway.core.models import MbtaConfig

TEST_BASE_URL = "https://api-v3.mbta.test"


@pytest.fixture
def test_config():
    """Client configuration pointing at a stubbed API host."""
    return MbtaConfig(base_url=TEST_BASE_URL, api_key="test-key-1234")


@pytest.fixture
def sample_routes_payload():
    """Sample /routes JSON:API response."""
    return {
        "data": [
            {"id": "Red", "type": "route", "attributes": {"long_name": "Red Line"}},
            {
                "id": "Orange",
                "type": "route",
                "attributes": {"long_name": "Orange Line"},
            },
            {"id": "Blue", "type": "route", "attributes": {"long_name": "Blue Line"}},
        ]
    }


@pytest.fixture
def sample_stops_payloads():
    """Sample /stops JSON:API responses keyed by route ID."""

    def stops(*names):
        return {
            "data": [
                {
                    "id": f"place-{name.lower().replace(' ', '')}",
                    "type": "stop",
                    "attributes": {"name": name},
                }
                for name in names
            ]
        }

    return {
        "Red": stops("Alewife", "Park Street", "Downtown Crossing", "Ashmont"),
        "Orange": stops("Oak Grove", "State", "Downtown Crossing", "Forest Hills"),
        "Blue": stops("Wonderland", "State", "Bowdoin"),
    }


@pytest.fixture
def sample_route_stops():
    """Route names paired with their stop names, in API order."""
    return [
        ("Red Line", ["Alewife", "Park Street", "Downtown Crossing", "Ashmont"]),
        ("Orange Line", ["Oak Grove", "State", "Downtown Crossing", "Forest Hills"]),
        ("Blue Line", ["Wonderland", "State", "Bowdoin"]),
    ]
