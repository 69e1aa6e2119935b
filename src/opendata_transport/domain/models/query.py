"""Query parameter types for the transport API."""

import datetime as dt
from collections.abc import Collection, Sequence
from dataclasses import dataclass
from enum import Enum

DEFAULT_CONNECTIONS_LIMIT = 4
DEFAULT_CONNECTIONS_PAGE = 0


class QueryType(str, Enum):
    """Kind of location to search for."""

    ALL = "all"
    STATION = "station"
    POI = "poi"
    ADDRESS = "address"


class TransportationType(str, Enum):
    """Transport mode filter."""

    ALL = "all"
    ICE_TGV_RJ = "ice_tgv_rj"
    EC_IC = "ec_ic"
    IR = "ir"
    RE_D = "re_d"
    SHIP = "ship"
    S_SN_R = "s_sn_r"
    BUS = "bus"
    CABLEWAY = "cableway"
    ARZ_EXT = "arz_ext"
    TRAMWAY_UNDERGROUND = "tramway_underground"


class TimeType(str, Enum):
    """Whether a connection's date/time is the departure or the arrival."""

    DEPARTURE = "departure"
    ARRIVAL = "arrival"


class AccessibilityType(str, Enum):
    """Required accessibility of a connection."""

    ANY = "any"
    INDEPENDENT_BOARDING = "independent_boarding"
    ASSISTED_BOARDING = "assisted_boarding"
    ADVANCED_NOTICE = "advanced_notice"


class ConnectionOption(str, Enum):
    """Additional connection requirements, each sent as its own flag."""

    DIRECT = "direct"
    SLEEPER = "sleeper"
    COUCHETTE = "couchette"
    BIKE = "bike"


@dataclass(frozen=True)
class ConnectionsQuery:
    """Parameters of a connection search.

    At least one of ``from_`` and ``to`` must be set. Everything else is
    optional and left out of the request when it has its default value.
    """

    from_: str = ""
    to: str = ""
    limit: int = DEFAULT_CONNECTIONS_LIMIT
    page: int = DEFAULT_CONNECTIONS_PAGE
    date: dt.date | str | None = None  # YYYY-MM-DD
    time: dt.time | str | None = None  # HH:MM
    transportations: Sequence[TransportationType | str] = ()
    time_type: TimeType | str = TimeType.DEPARTURE
    accessibility: AccessibilityType | str = AccessibilityType.ANY
    options: Collection[ConnectionOption | str] = frozenset()


@dataclass(frozen=True)
class StationboardQuery:
    """Parameters of a station departure board request.

    Either ``station`` (name) or ``station_id`` must be set.
    """

    station: str = ""
    station_id: str = ""
    date_time: dt.datetime | str | None = None  # YYYY-MM-DD HH:MM
    transportations: Sequence[TransportationType | str] = ()
