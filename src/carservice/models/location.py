"""Location and address models."""

from __future__ import annotations

from pydantic import Field

from carservice.models._base import CarServiceModel


class Address(CarServiceModel):
    """Street address as returned by the maps service."""

    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = Field(default=None, alias="zip")


class Location(CarServiceModel):
    """Where a car is parked.

    A stored location carries only coordinates. Resolution through the
    maps service yields a new ``Location`` with the same coordinates and
    the address fields filled in.

    Parameters
    ----------
    lat : float
        Latitude in degrees.
    lon : float
        Longitude in degrees.
    address, city, state, zip_code : str or None
        Populated only on a resolved location.
    """

    lat: float = Field(ge=-90.0, le=90.0)
    lon: float = Field(ge=-180.0, le=180.0)
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip_code: str | None = Field(default=None, alias="zip")

    @property
    def is_resolved(self) -> bool:
        return self.address is not None

    def with_address(self, address: Address) -> Location:
        """Return a copy of this location carrying *address*."""
        return self.model_copy(
            update={
                "address": address.address,
                "city": address.city,
                "state": address.state,
                "zip_code": address.zip_code,
            }
        )

    def coordinates(self) -> Location:
        """Return the unresolved form (coordinates only)."""
        return Location(lat=self.lat, lon=self.lon)
