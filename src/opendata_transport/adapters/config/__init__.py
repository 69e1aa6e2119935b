"""Configuration adapters."""

from opendata_transport.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
