"""Shared configuration for API response models."""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic_core import PydanticCustomError

# Error type reported by pydantic when a date/time field is not ISO-8601
ISO_DATETIME_ERROR = "iso8601_datetime"


def _parse_iso_datetime(value: Any) -> datetime | None:
    """Parse an ISO-8601 string (offsets like +0200, +02:00 and Z are accepted)."""
    if value is None or isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise PydanticCustomError(
            ISO_DATETIME_ERROR,
            "Expected an ISO-8601 date string, got {kind}",
            {"kind": type(value).__name__},
        )
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise PydanticCustomError(
            ISO_DATETIME_ERROR,
            "Invalid ISO-8601 date: '{value}'",
            {"value": value},
        ) from None


IsoDateTime = Annotated[datetime | None, BeforeValidator(_parse_iso_datetime)]


class ApiModel(BaseModel):
    """Base for read-only values decoded from API responses.

    Every field is optional. Types are strict, so a present value with the
    wrong JSON type fails validation instead of being coerced.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        populate_by_name=True,
        extra="ignore",
    )
