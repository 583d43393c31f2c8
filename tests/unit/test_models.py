"""Unit tests for data models."""

import pytest
from pydantic import ValidationError

from mbta_subway.core.models import (
    Connection,
    MbtaConfig,
    RoutesResponse,
    RouteStopCount,
    Stop,
    StopsResponse,
    SubwayRoute,
    TransferStation,
)


class TestMbtaConfig:
    """Test MbtaConfig model."""

    def test_defaults(self):
        """Test default configuration."""
        config = MbtaConfig()
        assert config.base_url == "https://api-v3.mbta.com"
        assert config.api_key is None
        assert config.timeout == 30
        assert config.max_attempts == 1

    def test_invalid_values(self):
        """Test that non-positive timeouts and attempts are rejected."""
        with pytest.raises(ValidationError):
            MbtaConfig(timeout=0)
        with pytest.raises(ValidationError):
            MbtaConfig(max_attempts=0)

    def test_masked_api_key(self):
        """Test API key masking."""
        assert MbtaConfig().masked_api_key() == "(not set)"
        assert MbtaConfig(api_key="abc").masked_api_key() == "***"
        assert MbtaConfig(api_key="a65ddb1213ca").masked_api_key() == "********13ca"


class TestApiResponses:
    """Test JSON:API response decoding."""

    def test_routes_response(self, sample_routes_payload):
        """Test decoding a routes document."""
        routes = RoutesResponse.model_validate(sample_routes_payload).to_routes()

        assert routes[0] == SubwayRoute(id="Red", long_name="Red Line")
        assert len(routes) == 3

    def test_stops_response(self, sample_stops_payloads):
        """Test decoding a stops document."""
        stops = StopsResponse.model_validate(sample_stops_payloads["Red"]).to_stops()

        assert stops[0] == Stop(id="place-alewife", name="Alewife")
        assert str(stops[1]) == "Park Street"

    def test_stops_response_without_ids(self):
        """Test that stop IDs are optional."""
        payload = {"data": [{"attributes": {"name": "stop1"}}]}
        stops = StopsResponse.model_validate(payload).to_stops()

        assert stops == [Stop(name="stop1")]

    def test_empty_document(self):
        """Test a document without data."""
        assert RoutesResponse.model_validate({}).to_routes() == []

    def test_missing_name(self):
        """Test that a stop without a name is rejected."""
        with pytest.raises(ValidationError):
            StopsResponse.model_validate({"data": [{"attributes": {}}]})


class TestResultModels:
    """Test query result models."""

    def test_route_stop_count(self):
        """Test RouteStopCount."""
        count = RouteStopCount(route="Red Line", stop_count=22)
        assert str(count) == "Red Line (22 stops)"

    def test_transfer_station(self):
        """Test TransferStation."""
        station = TransferStation(name="State", routes=["Orange Line", "Blue Line"])
        assert str(station) == "State: Orange Line, Blue Line"

    def test_connection(self):
        """Test a found connection."""
        connection = Connection(
            from_stop="Davis",
            to_stop="Wonderland",
            routes=["Red Line", "Orange Line", "Blue Line"],
        )

        assert connection.found is True
        assert connection.transfer_count == 2
        assert str(connection) == (
            "Davis → Wonderland: Red Line → Orange Line → Blue Line"
        )
        dumped = connection.model_dump()
        assert dumped["transfer_count"] == 2
        assert dumped["found"] is True

    def test_empty_connection(self):
        """Test a connection that was not found."""
        connection = Connection(from_stop="Davis", to_stop="Nowhere")

        assert connection.found is False
        assert connection.transfer_count == 0
        assert str(connection) == "Davis → Nowhere (no connection)"
