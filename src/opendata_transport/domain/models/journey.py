"""Journey domain model."""

from pydantic import Field

from opendata_transport.domain.models.base import ApiModel
from opendata_transport.domain.models.checkpoint import Checkpoint


class Journey(ApiModel):
    """One vehicle leg (train, bus, ship, ...).

    ``operator`` keeps the wire name of the operating company. ``company`` is
    a read-only alias for code that prefers that name.
    """

    name: str | None = None
    category: str | None = None
    category_code: int | None = Field(default=None, alias="categoryCode")
    number: str | None = None
    operator: str | None = None
    to: str | None = None  # Destination shown on the vehicle
    pass_list: list[Checkpoint] | None = Field(default=None, alias="passList")
    capacity_1st: int | None = Field(default=None, alias="capacity1st")
    capacity_2nd: int | None = Field(default=None, alias="capacity2nd")

    @property
    def company(self) -> str | None:
        """Alias of ``operator``."""
        return self.operator
