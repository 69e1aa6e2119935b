"""Tests for configuration adapter."""

import pytest

from opendata_transport.adapters.config import AppConfig
from opendata_transport.domain.models import Capability


def test_config_loads_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    monkeypatch.delenv("TRANSPORT_API_BASE_URL", raising=False)
    monkeypatch.delenv("TRANSPORT_API_TIMEOUT", raising=False)
    monkeypatch.delenv("TRANSPORT_API_DISABLED_CAPABILITIES", raising=False)

    config = AppConfig()

    assert config.transport_api_base_url == "https://transport.opendata.ch/v1"
    assert config.transport_api_timeout == 10.0
    assert config.transport_api_disabled_capabilities == []


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("TRANSPORT_API_BASE_URL", "https://test.example.com/v1/")
    monkeypatch.setenv("TRANSPORT_API_TIMEOUT", "2.5")
    monkeypatch.setenv("TRANSPORT_API_DISABLED_CAPABILITIES", '["Accessibility", "arrival_time"]')

    config = AppConfig()

    assert config.transport_api_base_url == "https://test.example.com/v1"
    assert config.transport_api_timeout == 2.5
    assert config.transport_api_disabled_capabilities == ["accessibility", "arrival_time"]


def test_config_validates_base_url(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given a base URL without scheme, when loading config, then validation error is raised."""
    monkeypatch.setenv("TRANSPORT_API_BASE_URL", "transport.opendata.ch/v1")

    with pytest.raises(ValueError, match="must start with http"):
        AppConfig()


def test_config_validates_timeout() -> None:
    """Given a non-positive timeout, when loading config, then validation error is raised."""
    with pytest.raises(ValueError, match="transport_api_timeout must be positive"):
        AppConfig(transport_api_timeout=0)


def test_config_validates_capabilities() -> None:
    """Given an unknown capability, when loading config, then validation error is raised."""
    with pytest.raises(ValueError, match="Unknown capabilities: wifi"):
        AppConfig(transport_api_disabled_capabilities=["wifi"])


def test_config_default_backend_is_production() -> None:
    """Given the default base URL, when building the backend, then it is the production backend."""
    config = AppConfig(transport_api_base_url="https://transport.opendata.ch/v1")

    backend = config.to_backend()

    assert backend.name == "production"
    assert backend.capabilities == frozenset(Capability)


def test_config_backend_drops_disabled_capabilities() -> None:
    """Given disabled capabilities, when building the backend, then they are not supported."""
    config = AppConfig(
        transport_api_base_url="http://localhost:8080/v1",
        transport_api_disabled_capabilities=["connection_options"],
    )

    backend = config.to_backend()

    assert backend.name == "custom"
    assert backend.base_url == "http://localhost:8080/v1"
    assert not backend.supports(Capability.CONNECTION_OPTIONS)
    assert backend.supports(Capability.TRANSPORTATIONS)
