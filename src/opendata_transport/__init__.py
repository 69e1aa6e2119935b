"""Client for the transport.opendata.ch public transport API."""

__version__ = "0.1.0"
