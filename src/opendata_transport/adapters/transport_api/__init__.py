"""transport.opendata.ch API adapter."""

from opendata_transport.adapters.transport_api.client import OpendataTransportClient
from opendata_transport.adapters.transport_api.endpoints import (
    build_connections_endpoint,
    build_locations_by_coordinate_endpoint,
    build_locations_endpoint,
    build_stationboard_endpoint,
)
from opendata_transport.adapters.transport_api.response_mapper import decode

__all__ = [
    "OpendataTransportClient",
    "build_connections_endpoint",
    "build_locations_by_coordinate_endpoint",
    "build_locations_endpoint",
    "build_stationboard_endpoint",
    "decode",
]
