"""Location domain models."""

from opendata_transport.domain.models.base import ApiModel


class Coordinates(ApiModel):
    """A geographic point."""

    type: str | None = None  # Coordinate system, e.g. "WGS84"
    x: float | None = None
    y: float | None = None


class Location(ApiModel):
    """A stop, point of interest or address."""

    id: str | None = None
    type: str | None = None
    name: str | None = None
    score: int | None = None
    coordinates: Coordinates | None = None
    distance: int | None = None


class Locations(ApiModel):
    """Result of a location search, in server relevance order."""

    stations: list[Location] | None = None
