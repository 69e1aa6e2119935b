"""Domain layer - models, errors and ports."""

from opendata_transport.domain.exceptions import (
    DateParsingError,
    InvalidParameterError,
    ObjectSerializationError,
    TransportApiError,
    TransportError,
    UrlConstructionError,
)
from opendata_transport.domain.models import (
    Checkpoint,
    Connection,
    Connections,
    Journey,
    Location,
    Locations,
    Section,
    Stationboard,
)
from opendata_transport.domain.ports import TransportApi

__all__ = [
    "Checkpoint",
    "Connection",
    "Connections",
    "DateParsingError",
    "InvalidParameterError",
    "Journey",
    "Location",
    "Locations",
    "ObjectSerializationError",
    "Section",
    "Stationboard",
    "TransportApi",
    "TransportApiError",
    "TransportError",
    "UrlConstructionError",
]
