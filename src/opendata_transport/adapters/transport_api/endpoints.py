"""Endpoint builders for the transport API.

Each builder turns typed query parameters into a percent-encoded GET URL.
Builders are pure: they raise InvalidParameterError for missing required
parameters and UrlConstructionError for an unusable base URL, and never
touch the network.
"""

import datetime as dt
from collections.abc import Collection, Iterable, Sequence
from enum import Enum
from typing import TypeVar
from urllib.parse import quote

from yarl import URL

from opendata_transport.adapters.transport_api.constants import (
    CONNECTIONS_PATH,
    LOCATIONS_PATH,
    PRODUCTION_BACKEND,
    STATIONBOARD_PATH,
)
from opendata_transport.domain.exceptions import InvalidParameterError, UrlConstructionError
from opendata_transport.domain.models.backend import ApiBackend, Capability
from opendata_transport.domain.models.query import (
    DEFAULT_CONNECTIONS_LIMIT,
    DEFAULT_CONNECTIONS_PAGE,
    AccessibilityType,
    ConnectionOption,
    ConnectionsQuery,
    QueryType,
    StationboardQuery,
    TimeType,
    TransportationType,
)

EnumT = TypeVar("EnumT", bound=Enum)

# Flag parameters are emitted in this order
_OPTION_FLAG_ORDER = (
    ConnectionOption.BIKE,
    ConnectionOption.COUCHETTE,
    ConnectionOption.DIRECT,
    ConnectionOption.SLEEPER,
)

QueryParams = list[tuple[str, str]]


def _coerce(enum_type: type[EnumT], value: EnumT | str, name: str) -> EnumT:
    """Accept an enum member or its textual name."""
    try:
        return enum_type(value)
    except ValueError:
        allowed = ", ".join(str(member.value) for member in enum_type)
        raise InvalidParameterError(
            f"Invalid {name} '{value}', expected one of: {allowed}"
        ) from None


def _encode_query(params: Iterable[tuple[str, str]]) -> str:
    """Percent-encode name/value pairs, keeping the [] of array-style names."""
    return "&".join(f"{quote(name, safe='[]')}={quote(value, safe='')}" for name, value in params)


def _build_url(backend: ApiBackend, path: str, params: QueryParams) -> str:
    """Join base URL, path and encoded query, rejecting non-absolute results."""
    url = backend.endpoint(path)
    if params:
        url = f"{url}?{_encode_query(params)}"

    try:
        parsed = URL(url, encoded=True)
    except (TypeError, ValueError) as e:
        raise UrlConstructionError(f"Could not construct URL from '{url}': {e}") from e

    if parsed.scheme not in ("http", "https") or not parsed.host:
        raise UrlConstructionError(
            f"Could not construct URL: '{url}' is not an absolute http(s) URL"
        )
    return url


def _transportation_params(
    transportations: Sequence[TransportationType | str],
) -> QueryParams:
    """Serialize transport filters as repeated array-style parameters, in input order."""
    return [
        ("transportations[]", _coerce(TransportationType, t, "transportation").value)
        for t in transportations
    ]


def _option_params(options: Collection[ConnectionOption | str]) -> QueryParams:
    selected = {_coerce(ConnectionOption, option, "option") for option in options}
    return [(option.value, "1") for option in _OPTION_FLAG_ORDER if option in selected]


def _format_date(value: dt.date | str) -> str:
    if isinstance(value, dt.datetime):
        return value.date().isoformat()
    if isinstance(value, dt.date):
        return value.isoformat()
    return value


def _format_time(value: dt.time | dt.datetime | str) -> str:
    if isinstance(value, dt.time | dt.datetime):
        return value.strftime("%H:%M")
    return value


def _format_date_time(value: dt.datetime | str) -> str:
    if isinstance(value, dt.datetime):
        return value.strftime("%Y-%m-%d %H:%M")
    return value


def build_locations_endpoint(
    query: str,
    query_type: QueryType | str = QueryType.ALL,
    backend: ApiBackend = PRODUCTION_BACKEND,
) -> str:
    """Build the URL of a location search by name.

    Args:
        query: Free-text search, e.g. a station name.
        query_type: Kind of location to look for.
        backend: API deployment to target.

    Returns:
        Encoded URL of the form ``.../locations?query=...&type=...``.
    """
    location_type = _coerce(QueryType, query_type, "query type")
    params: QueryParams = [("query", query), ("type", location_type.value)]
    return _build_url(backend, LOCATIONS_PATH, params)


def build_locations_by_coordinate_endpoint(
    x: float,
    y: float,
    backend: ApiBackend = PRODUCTION_BACKEND,
) -> str:
    """Build the URL of a location search around a coordinate.

    Coordinates are passed through as given, without range checks.
    """
    params: QueryParams = [("x", str(x)), ("y", str(y))]
    return _build_url(backend, LOCATIONS_PATH, params)


def build_connections_endpoint(
    query: ConnectionsQuery,
    backend: ApiBackend = PRODUCTION_BACKEND,
) -> str:
    """Build the URL of a connection search.

    Parameters equal to their defaults are omitted. Optional parameter groups
    the backend does not support are left out.

    Raises:
        InvalidParameterError: If neither origin nor destination is given,
            or an enum-valued parameter has an unknown name.
    """
    if not query.from_ and not query.to:
        raise InvalidParameterError("The parameters from and to are required")

    params: QueryParams = []
    if query.from_:
        params.append(("from", query.from_))
    if query.to:
        params.append(("to", query.to))
    if query.limit != DEFAULT_CONNECTIONS_LIMIT:
        params.append(("limit", str(query.limit)))
    if query.page != DEFAULT_CONNECTIONS_PAGE:
        params.append(("page", str(query.page)))
    if query.date:
        params.append(("date", _format_date(query.date)))
    if query.time:
        params.append(("time", _format_time(query.time)))

    transportations = _transportation_params(query.transportations)
    if backend.supports(Capability.TRANSPORTATIONS):
        params.extend(transportations)

    time_type = _coerce(TimeType, query.time_type, "time type")
    if time_type is TimeType.ARRIVAL and backend.supports(Capability.ARRIVAL_TIME):
        params.append(("isArrivalTime", "1"))

    accessibility = _coerce(AccessibilityType, query.accessibility, "accessibility")
    if accessibility is not AccessibilityType.ANY and backend.supports(
        Capability.ACCESSIBILITY
    ):
        params.append(("accessibility", accessibility.value))

    options = _option_params(query.options)
    if backend.supports(Capability.CONNECTION_OPTIONS):
        params.extend(options)

    return _build_url(backend, CONNECTIONS_PATH, params)


def build_stationboard_endpoint(
    query: StationboardQuery,
    backend: ApiBackend = PRODUCTION_BACKEND,
) -> str:
    """Build the URL of a station departure board.

    Raises:
        InvalidParameterError: If neither station name nor station id is given.
    """
    if not query.station and not query.station_id:
        raise InvalidParameterError("Must supply either station name or id")

    params: QueryParams = []
    if query.station:
        params.append(("station", query.station))
    if query.station_id:
        params.append(("id", query.station_id))
    if query.date_time:
        params.append(("dateTime", _format_date_time(query.date_time)))

    transportations = _transportation_params(query.transportations)
    if backend.supports(Capability.TRANSPORTATIONS):
        params.extend(transportations)

    return _build_url(backend, STATIONBOARD_PATH, params)
