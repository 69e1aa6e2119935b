"""API backend description."""

from dataclasses import dataclass, field
from enum import Enum


class Capability(str, Enum):
    """Optional parameter groups a backend may accept."""

    TRANSPORTATIONS = "transportations"
    ACCESSIBILITY = "accessibility"
    CONNECTION_OPTIONS = "connection_options"
    ARRIVAL_TIME = "arrival_time"


@dataclass(frozen=True)
class ApiBackend:
    """A deployment of the transport API.

    Hosts differ only in base URL and in which optional parameters they
    accept; parameters a backend does not support are left out of requests.
    """

    name: str
    base_url: str
    capabilities: frozenset[Capability] = field(default_factory=lambda: frozenset(Capability))

    def supports(self, capability: Capability) -> bool:
        return capability in self.capabilities

    def endpoint(self, path: str) -> str:
        """Absolute URL of an API resource, without query string."""
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"
