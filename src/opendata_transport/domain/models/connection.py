"""Connection domain models."""

import re
from datetime import timedelta

from pydantic import Field

from opendata_transport.domain.models.base import ApiModel
from opendata_transport.domain.models.checkpoint import Checkpoint
from opendata_transport.domain.models.journey import Journey

# Server duration format, e.g. "00d01:02:00"
_DURATION_PATTERN = re.compile(r"^(\d+)d(\d{2}):(\d{2}):(\d{2})$")


class Service(ApiModel):
    """Regularity descriptor of a connection."""

    regular: str | None = None
    irregular: str | None = None


class Walk(ApiModel):
    """A transfer on foot."""

    duration: int | None = None  # Seconds


class Section(ApiModel):
    """One leg of a connection, either a journey or a walk.

    Both are optional in the wire schema and neither is enforced here.
    """

    journey: Journey | None = None
    walk: Walk | None = None
    departure: Checkpoint | None = None
    arrival: Checkpoint | None = None

    @property
    def is_journey(self) -> bool:
        return self.journey is not None

    @property
    def is_walk(self) -> bool:
        return self.walk is not None


class Connection(ApiModel):
    """One complete itinerary from origin to destination.

    ``from`` is a Python keyword, so the origin lives in ``from_`` and is
    read from and written to the ``from`` key.
    """

    from_: Checkpoint | None = Field(default=None, alias="from")
    to: Checkpoint | None = None
    duration: str | None = None
    service: Service | None = None
    products: list[str] | None = None
    capacity_1st: int | None = Field(default=None, alias="capacity1st")
    capacity_2nd: int | None = Field(default=None, alias="capacity2nd")
    sections: list[Section] | None = None  # Chronological order

    @property
    def duration_timedelta(self) -> timedelta | None:
        """Parse ``duration`` into a timedelta, None if absent or malformed."""
        if not self.duration:
            return None
        match = _DURATION_PATTERN.match(self.duration)
        if not match:
            return None
        days, hours, minutes, seconds = (int(part) for part in match.groups())
        return timedelta(days=days, hours=hours, minutes=minutes, seconds=seconds)


class Connections(ApiModel):
    """Result of a connection search, in server ranking order."""

    connections: list[Connection] | None = None
