"""Price quote model."""

from __future__ import annotations

from decimal import Decimal

from carservice.models._base import CarServiceModel


class Price(CarServiceModel):
    """A quote from the pricing service."""

    currency: str
    price: Decimal
    vehicle_id: int | None = None

    @property
    def quote(self) -> str:
        """Human-readable quote, e.g. ``"USD 20000.00"``."""
        return f"{self.currency} {self.price:.2f}"
