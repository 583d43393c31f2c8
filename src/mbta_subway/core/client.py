"""MBTA v3 API client for subway routes and stops."""

import logging
from collections.abc import Iterable, Iterator
from typing import Any

import requests
from pydantic import ValidationError as PayloadValidationError
from tenacity import (
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from .exceptions import FetchError
from .models import MbtaConfig, RoutesResponse, Stop, StopsResponse, SubwayRoute

logger = logging.getLogger(__name__)

# Light rail (0) and heavy rail (1)
SUBWAY_ROUTE_TYPES = "0,1"


class MbtaClient:
    """Client for fetching subway route and stop data from the MBTA API."""

    def __init__(self, config: MbtaConfig | None = None):
        """Initialize the client.

        Args:
            config: API connection settings, defaults to the public endpoint
                without an API key
        """
        self.config = config or MbtaConfig()
        self.session = requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/vnd.api+json",
                "User-Agent": "mbta-subway/0.1.0",
            }
        )

    def fetch_routes(self) -> list[SubwayRoute]:
        """Fetch all subway routes.

        Returns:
            Routes in the order returned by the API

        Raises:
            FetchError: If the request fails or the payload cannot be decoded
        """
        payload = self._get_json(
            "routes",
            {"filter[type]": SUBWAY_ROUTE_TYPES, "fields[route]": "long_name"},
        )
        try:
            routes = RoutesResponse.model_validate(payload).to_routes()
        except PayloadValidationError as e:
            raise FetchError(f"Failed to decode routes response: {e}") from e

        logger.info(f"Fetched {len(routes)} subway routes")
        return routes

    def fetch_stops(self, route_id: str) -> list[Stop]:
        """Fetch the stops served by a route.

        Args:
            route_id: MBTA route ID (not the long name)

        Returns:
            Stops in the order returned by the API

        Raises:
            FetchError: If the request fails or the payload cannot be decoded
        """
        payload = self._get_json(
            "stops", {"filter[route]": route_id, "fields[stop]": "name"}
        )
        try:
            stops = StopsResponse.model_validate(payload).to_stops()
        except PayloadValidationError as e:
            raise FetchError(
                f"Failed to decode stops response for route {route_id}: {e}"
            ) from e

        logger.info(f"Fetched {len(stops)} stops for route {route_id}")
        return stops

    def iter_route_stops(
        self, routes: Iterable[SubwayRoute]
    ) -> Iterator[tuple[SubwayRoute, list[Stop]]]:
        """Fetch stops for each route one at a time, in route order."""
        for route in routes:
            yield route, self.fetch_stops(route.id)

    def _get_json(self, path: str, params: dict[str, str]) -> Any:
        """GET an API resource and decode its JSON body.

        Connection errors and timeouts are retried up to
        ``config.max_attempts`` times; everything else fails immediately.
        """
        url = f"{self.config.base_url.rstrip('/')}/{path}"
        query = dict(params)
        if self.config.api_key:
            query["api_key"] = self.config.api_key

        logger.debug(f"GET {url} params={params}")
        try:
            for attempt in Retrying(
                stop=stop_after_attempt(self.config.max_attempts),
                wait=wait_exponential(multiplier=0.5, max=4),
                retry=retry_if_exception_type(
                    (requests.exceptions.ConnectionError, requests.exceptions.Timeout)
                ),
                reraise=True,
            ):
                with attempt:
                    response = self.session.get(
                        url, params=query, timeout=self.config.timeout
                    )
            response.raise_for_status()
            return response.json()

        except requests.exceptions.RequestException as e:
            raise FetchError(f"Failed to fetch {path}: {str(e)}") from e
        except ValueError as e:
            raise FetchError(f"Invalid JSON in {path} response: {str(e)}") from e
