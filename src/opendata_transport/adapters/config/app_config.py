"""12-factor configuration adapter using environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from opendata_transport.adapters.transport_api.constants import (
    DEFAULT_TIMEOUT_SECONDS,
    PRODUCTION_BACKEND,
    TRANSPORT_API_BASE_URL,
)
from opendata_transport.domain.models.backend import ApiBackend, Capability


class AppConfig(BaseSettings):
    """Client configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    transport_api_base_url: str = Field(
        default=TRANSPORT_API_BASE_URL,
        description="Base URL of the transport API (test and beta hosts use the same protocol)",
    )
    transport_api_timeout: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        description="Total timeout in seconds for sessions created by the client",
    )
    transport_api_disabled_capabilities: list[str] = Field(
        default_factory=list,
        description=(
            "Optional parameter groups the backend does not accept "
            "(transportations, accessibility, connection_options, arrival_time)"
        ),
    )

    @field_validator("transport_api_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate the base URL is an http(s) URL."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("transport_api_base_url must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("transport_api_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate timeout is positive."""
        if v <= 0:
            raise ValueError("transport_api_timeout must be positive")
        return v

    @field_validator("transport_api_disabled_capabilities")
    @classmethod
    def validate_capabilities(cls, v: list[str]) -> list[str]:
        """Validate every disabled capability is a known one."""
        known = {capability.value for capability in Capability}
        normalized = [name.strip().lower() for name in v]
        unknown = [name for name in normalized if name not in known]
        if unknown:
            raise ValueError(
                f"Unknown capabilities: {', '.join(unknown)}. "
                f"Expected any of: {', '.join(sorted(known))}"
            )
        return normalized

    def to_backend(self) -> ApiBackend:
        """Describe the configured API backend."""
        disabled = {Capability(name) for name in self.transport_api_disabled_capabilities}
        name = (
            PRODUCTION_BACKEND.name
            if self.transport_api_base_url == PRODUCTION_BACKEND.base_url
            else "custom"
        )
        return ApiBackend(
            name=name,
            base_url=self.transport_api_base_url,
            capabilities=frozenset(Capability) - disabled,
        )
