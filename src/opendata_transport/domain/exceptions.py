"""Errors raised by the transport API client.

Every failure of a request surfaces as one of these; nothing is retried.
"""

from opendata_transport.domain.models.error_details import ErrorDetails


class TransportApiError(Exception):
    """Base exception for transport API failures."""

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        super().__init__(reason)
        self.details = ErrorDetails(status_code=status_code, reason=reason)

    @property
    def reason(self) -> str:
        return self.details.reason

    @property
    def status_code(self) -> int | None:
        return self.details.status_code


class InvalidParameterError(TransportApiError):
    """Raised before any network call when required parameters are missing."""


class UrlConstructionError(TransportApiError):
    """Raised when the assembled endpoint is not a valid absolute URL."""


class TransportError(TransportApiError):
    """Raised when the HTTP request fails or returns a non-2xx status."""


class ObjectSerializationError(TransportApiError):
    """Raised when a response body cannot be decoded into the expected shape."""


class DateParsingError(ObjectSerializationError):
    """Raised when a date/time field of a response is not ISO-8601."""

    def __init__(self, reason: str, field: tuple[str | int, ...] = ()) -> None:
        super().__init__(reason)
        self.field = field
