"""Stationboard domain model."""

from opendata_transport.domain.models.base import ApiModel
from opendata_transport.domain.models.journey import Journey
from opendata_transport.domain.models.location import Locations


class Stationboard(ApiModel):
    """Departure board for a station."""

    station: Locations | None = None
    stationboard: list[Journey] | None = None
