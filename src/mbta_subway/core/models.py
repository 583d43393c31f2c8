"""Data models for MBTA subway queries."""

from pydantic import BaseModel, Field, computed_field

DEFAULT_BASE_URL = "https://api-v3.mbta.com"


class MbtaConfig(BaseModel):
    """Connection settings for the MBTA v3 API."""

    base_url: str = Field(DEFAULT_BASE_URL, description="API root URL")
    api_key: str | None = Field(None, description="Static MBTA API key")
    timeout: int = Field(30, gt=0, description="Request timeout in seconds")
    max_attempts: int = Field(
        1, ge=1, description="Attempts per request on connection errors"
    )

    def masked_api_key(self) -> str:
        """Get the API key with all but the last four characters hidden."""
        if not self.api_key:
            return "(not set)"
        if len(self.api_key) <= 4:
            return "*" * len(self.api_key)
        return "*" * (len(self.api_key) - 4) + self.api_key[-4:]


class SubwayRoute(BaseModel):
    """Represents a subway route (light or heavy rail line)."""

    id: str = Field(..., description="MBTA route ID, used to query stops")
    long_name: str = Field(..., description="Display name, e.g. 'Red Line'")

    def __str__(self) -> str:
        return self.long_name


class Stop(BaseModel):
    """Represents a subway stop on a route."""

    id: str | None = Field(None, description="MBTA stop ID")
    name: str = Field(..., description="Stop name")

    def __str__(self) -> str:
        return self.name


class _RouteAttributes(BaseModel):
    long_name: str


class _RouteResource(BaseModel):
    id: str
    attributes: _RouteAttributes


class RoutesResponse(BaseModel):
    """JSON:API document returned by the /routes endpoint."""

    data: list[_RouteResource] = Field(default_factory=list)

    def to_routes(self) -> list[SubwayRoute]:
        return [
            SubwayRoute(id=item.id, long_name=item.attributes.long_name)
            for item in self.data
        ]


class _StopAttributes(BaseModel):
    name: str


class _StopResource(BaseModel):
    id: str | None = None
    attributes: _StopAttributes


class StopsResponse(BaseModel):
    """JSON:API document returned by the /stops endpoint."""

    data: list[_StopResource] = Field(default_factory=list)

    def to_stops(self) -> list[Stop]:
        return [Stop(id=item.id, name=item.attributes.name) for item in self.data]


class RouteStopCount(BaseModel):
    """Number of stops served by a route."""

    route: str = Field(..., description="Route long name")
    stop_count: int = Field(..., ge=0, description="Number of stops")

    def __str__(self) -> str:
        return f"{self.route} ({self.stop_count} stops)"


class TransferStation(BaseModel):
    """A stop served by more than one route."""

    name: str = Field(..., description="Stop name")
    routes: list[str] = Field(..., description="Routes serving the stop")

    def __str__(self) -> str:
        return f"{self.name}: {', '.join(self.routes)}"


class Connection(BaseModel):
    """Sequence of routes linking two stops."""

    from_stop: str = Field(..., description="Starting stop")
    to_stop: str = Field(..., description="Destination stop")
    routes: list[str] = Field(
        default_factory=list, description="Routes to ride, in order"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def found(self) -> bool:
        return bool(self.routes)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def transfer_count(self) -> int:
        return max(len(self.routes) - 1, 0)

    def __str__(self) -> str:
        if not self.routes:
            return f"{self.from_stop} → {self.to_stop} (no connection)"
        return f"{self.from_stop} → {self.to_stop}: {' → '.join(self.routes)}"
