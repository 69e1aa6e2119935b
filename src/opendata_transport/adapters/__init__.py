"""Adapters layer - external system integrations."""

from opendata_transport.adapters.config import AppConfig
from opendata_transport.adapters.transport_api import OpendataTransportClient

__all__ = [
    "AppConfig",
    "OpendataTransportClient",
]
