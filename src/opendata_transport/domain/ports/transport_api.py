"""Transport API port."""

from typing import Protocol

from opendata_transport.domain.models.connection import Connections
from opendata_transport.domain.models.location import Locations
from opendata_transport.domain.models.query import (
    ConnectionsQuery,
    QueryType,
    StationboardQuery,
)
from opendata_transport.domain.models.stationboard import Stationboard


class TransportApi(Protocol):
    """Port for querying locations, connections and station boards."""

    async def locations(self, query: str, query_type: QueryType = QueryType.ALL) -> Locations:
        """Search locations by name."""
        ...

    async def locations_by_coordinate(self, x: float, y: float) -> Locations:
        """Search locations near a coordinate."""
        ...

    async def connections(self, query: ConnectionsQuery) -> Connections:
        """Search connections between two locations."""
        ...

    async def stationboard(self, query: StationboardQuery) -> Stationboard:
        """Get the departure board of a station."""
        ...
