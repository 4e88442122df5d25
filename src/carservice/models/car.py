"""Car model."""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import ConfigDict, Field

from carservice.models._base import CarServiceModel
from carservice.models.location import Location


class Condition(StrEnum):
    """Whether a car is sold new or used."""

    USED = "USED"
    NEW = "NEW"


class Manufacturer(CarServiceModel):
    """Vehicle manufacturer (e.g. ``code=101, name="Chevrolet"``)."""

    code: int
    name: str


class Details(CarServiceModel):
    """Descriptive data about a car.

    The service never inspects these fields; an update replaces the
    whole block.
    """

    model_config = ConfigDict(protected_namespaces=())

    body: str | None = None
    """Body style (e.g. ``"sedan"``)."""
    model: str | None = None
    """Model name (e.g. ``"Impala"``)."""
    manufacturer: Manufacturer | None = None
    number_of_doors: int | None = Field(default=None, ge=0)
    fuel_type: str | None = None
    engine: str | None = None
    mileage: int | None = Field(default=None, ge=0)
    model_year: int | None = None
    production_year: int | None = None
    external_color: str | None = None


class Car(CarServiceModel):
    """A vehicle record.

    ``id`` is ``None`` until the store persists the car. ``price`` is
    only populated on an enriched fetch and is never authoritative.
    ``created_at`` and ``modified_at`` are managed by the store.
    """

    id: int | None = None
    details: Details
    location: Location
    condition: Condition = Condition.USED
    price: str | None = None
    created_at: datetime | None = None
    modified_at: datetime | None = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None
