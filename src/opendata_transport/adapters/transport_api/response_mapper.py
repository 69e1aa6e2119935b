"""Decoding of transport API JSON responses into domain models."""

from typing import TypeVar

from pydantic import ValidationError

from opendata_transport.domain.exceptions import DateParsingError, ObjectSerializationError
from opendata_transport.domain.models.base import ISO_DATETIME_ERROR
from opendata_transport.domain.models.connection import Connections
from opendata_transport.domain.models.location import Locations
from opendata_transport.domain.models.stationboard import Stationboard

ResponseT = TypeVar("ResponseT", Locations, Connections, Stationboard)

RESPONSE_SHAPES: tuple[type, ...] = (Locations, Connections, Stationboard)


def _format_location(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location like ``connections[0].from.arrival``."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else part
    return path or "<root>"


def _to_serialization_error(
    error: ValidationError, shape: type
) -> ObjectSerializationError:
    """Map a validation failure to the matching serialization error."""
    details = error.errors(include_url=False)
    for detail in details:
        if detail["type"] == ISO_DATETIME_ERROR:
            field = tuple(detail["loc"])
            return DateParsingError(
                f"Could not parse date of {shape.__name__} at "
                f"{_format_location(field)}: {detail['msg']}",
                field=field,
            )

    first = details[0] if details else None
    if first is None:
        return ObjectSerializationError(f"Could not decode {shape.__name__}: {error}")
    return ObjectSerializationError(
        f"Could not decode {shape.__name__} at "
        f"{_format_location(tuple(first['loc']))}: {first['msg']}"
    )


def decode(payload: bytes | str | None, shape: type[ResponseT]) -> ResponseT:
    """Decode a JSON payload into one of the response shapes.

    Missing fields never fail decoding since every field is optional.

    Args:
        payload: Raw response body.
        shape: ``Locations``, ``Connections`` or ``Stationboard``.

    Returns:
        The decoded response.

    Raises:
        ObjectSerializationError: If the payload is empty, not valid JSON,
            or a present field has the wrong JSON type.
        DateParsingError: If a date/time field is not ISO-8601.
        TypeError: If ``shape`` is not a response shape.
    """
    if shape not in RESPONSE_SHAPES:
        raise TypeError(f"Unsupported response shape: {shape!r}")

    if payload is None or not payload.strip():
        raise ObjectSerializationError("No data in response")

    try:
        return shape.model_validate_json(payload)
    except ValidationError as e:
        raise _to_serialization_error(e, shape) from e
