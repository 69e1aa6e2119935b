"""transport.opendata.ch API client adapter.

Each call builds the endpoint, performs one GET and decodes the body. A call
either returns the decoded result or raises a TransportApiError subclass;
nothing is retried.
"""

import logging
from types import TracebackType
from typing import TYPE_CHECKING, Self

import aiohttp

from opendata_transport.adapters.transport_api.constants import (
    DEFAULT_TIMEOUT_SECONDS,
    PRODUCTION_BACKEND,
)
from opendata_transport.adapters.transport_api.endpoints import (
    build_connections_endpoint,
    build_locations_by_coordinate_endpoint,
    build_locations_endpoint,
    build_stationboard_endpoint,
)
from opendata_transport.adapters.transport_api.http_client import TransportHttpClient
from opendata_transport.adapters.transport_api.response_mapper import ResponseT, decode
from opendata_transport.domain.models.backend import ApiBackend
from opendata_transport.domain.models.connection import Connections
from opendata_transport.domain.models.location import Locations
from opendata_transport.domain.models.query import (
    ConnectionsQuery,
    QueryType,
    StationboardQuery,
)
from opendata_transport.domain.models.stationboard import Stationboard
from opendata_transport.domain.ports.transport_api import TransportApi

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from opendata_transport.adapters.config import AppConfig


class OpendataTransportClient(TransportApi):
    """Adapter for the transport.opendata.ch REST API.

    Pass an existing aiohttp session, or use the client as an async context
    manager to have it open and close its own session.
    """

    def __init__(
        self,
        session: "ClientSession | None" = None,
        backend: ApiBackend = PRODUCTION_BACKEND,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize with optional aiohttp session and target backend."""
        self._session = session
        self._owns_session = False
        self._backend = backend
        self._timeout_seconds = timeout_seconds

    @classmethod
    def from_config(
        cls, config: "AppConfig", session: "ClientSession | None" = None
    ) -> "OpendataTransportClient":
        """Create a client for the backend described by the configuration."""
        return cls(
            session=session,
            backend=config.to_backend(),
            timeout_seconds=config.transport_api_timeout,
        )

    @property
    def backend(self) -> ApiBackend:
        return self._backend

    async def __aenter__(self) -> Self:
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self._timeout_seconds),
            )
            self._owns_session = True
            logger.debug(f"Opened session for {self._backend.name} backend")
        return self

    async def __aexit__(
        self,
        _exc_type: type[BaseException] | None,
        _exc_val: BaseException | None,
        _exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the session if this client created it."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None
            self._owns_session = False

    async def _call(self, endpoint: str, shape: type[ResponseT]) -> ResponseT:
        """GET an endpoint and decode the body into the given shape."""
        if self._session is None:
            raise RuntimeError("OpendataTransportClient requires an aiohttp session")

        payload = await TransportHttpClient(self._session).get(endpoint)
        return decode(payload, shape)

    async def locations(self, query: str, query_type: QueryType = QueryType.ALL) -> Locations:
        """Search locations by name.

        Args:
            query: Free-text search, e.g. "Zürich HB".
            query_type: Kind of location to look for.

        Returns:
            Matching locations in relevance order.
        """
        endpoint = build_locations_endpoint(query, query_type, backend=self._backend)
        return await self._call(endpoint, Locations)

    async def locations_by_coordinate(self, x: float, y: float) -> Locations:
        """Search locations near a coordinate."""
        endpoint = build_locations_by_coordinate_endpoint(x, y, backend=self._backend)
        return await self._call(endpoint, Locations)

    async def connections(self, query: ConnectionsQuery) -> Connections:
        """Search connections.

        Raises:
            InvalidParameterError: Before any request, if origin and
                destination are both missing.
        """
        endpoint = build_connections_endpoint(query, backend=self._backend)
        return await self._call(endpoint, Connections)

    async def stationboard(self, query: StationboardQuery) -> Stationboard:
        """Get the departure board of a station.

        Raises:
            InvalidParameterError: Before any request, if neither station
                name nor id is given.
        """
        endpoint = build_stationboard_endpoint(query, backend=self._backend)
        return await self._call(endpoint, Stationboard)
