"""Domain models for the transport API."""

from opendata_transport.domain.models.backend import ApiBackend, Capability
from opendata_transport.domain.models.checkpoint import Checkpoint, Prognosis
from opendata_transport.domain.models.connection import (
    Connection,
    Connections,
    Section,
    Service,
    Walk,
)
from opendata_transport.domain.models.error_details import ErrorDetails
from opendata_transport.domain.models.journey import Journey
from opendata_transport.domain.models.location import Coordinates, Location, Locations
from opendata_transport.domain.models.query import (
    AccessibilityType,
    ConnectionOption,
    ConnectionsQuery,
    QueryType,
    StationboardQuery,
    TimeType,
    TransportationType,
)
from opendata_transport.domain.models.stationboard import Stationboard

__all__ = [
    "AccessibilityType",
    "ApiBackend",
    "Capability",
    "Checkpoint",
    "ConnectionOption",
    "Connection",
    "Connections",
    "ConnectionsQuery",
    "Coordinates",
    "ErrorDetails",
    "Journey",
    "Location",
    "Locations",
    "Prognosis",
    "QueryType",
    "Section",
    "Service",
    "Stationboard",
    "StationboardQuery",
    "TimeType",
    "TransportationType",
    "Walk",
]
