"""Ports (interfaces) for the ports-and-adapters architecture."""

from opendata_transport.domain.ports.transport_api import TransportApi

__all__ = ["TransportApi"]
