"""Checkpoint domain models."""

from datetime import datetime

from pydantic import Field

from opendata_transport.domain.models.base import ApiModel, IsoDateTime
from opendata_transport.domain.models.location import Location


class Prognosis(ApiModel):
    """Real-time revision of a checkpoint's scheduled values."""

    platform: str | None = None
    arrival: IsoDateTime = None
    departure: IsoDateTime = None
    capacity_1st: int | None = Field(default=None, alias="capacity1st")
    capacity_2nd: int | None = Field(default=None, alias="capacity2nd")


class Checkpoint(ApiModel):
    """An arrival or departure event at a station.

    The origin of a journey has no arrival and the destination has no
    departure. A prognosis overlays the scheduled values without replacing
    them; the ``expected_*`` properties give the effective value.
    """

    station: Location | None = None
    arrival: IsoDateTime = None
    departure: IsoDateTime = None
    delay: int | None = None  # Minutes
    platform: str | None = None
    prognosis: Prognosis | None = None

    @property
    def expected_arrival(self) -> datetime | None:
        """Arrival time revised by the prognosis, falling back to the schedule."""
        if self.prognosis and self.prognosis.arrival:
            return self.prognosis.arrival
        return self.arrival

    @property
    def expected_departure(self) -> datetime | None:
        """Departure time revised by the prognosis, falling back to the schedule."""
        if self.prognosis and self.prognosis.departure:
            return self.prognosis.departure
        return self.departure

    @property
    def expected_platform(self) -> str | None:
        """Platform revised by the prognosis, falling back to the schedule."""
        if self.prognosis and self.prognosis.platform:
            return self.prognosis.platform
        return self.platform
