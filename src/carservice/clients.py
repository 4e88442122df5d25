"""Clients for the pricing and maps collaborators.

:class:`CarService` depends only on the :class:`PriceLookup` and
:class:`LocationResolver` protocols; the HTTP clients below are the
production implementations.
"""

from __future__ import annotations

from typing import Protocol

from carservice._api.maps import fetch_address
from carservice._api.prices import fetch_price
from carservice._transport import Transport
from carservice.config import CarServiceConfig
from carservice.models.location import Location


class PriceLookup(Protocol):
    async def get_price(self, vehicle_id: int) -> str:
        """Return the price quote for a vehicle as text."""
        ...


class LocationResolver(Protocol):
    async def get_address(self, location: Location) -> Location:
        """Return *location* resolved to a street address."""
        ...


class PriceClient:
    """Reads prices from the pricing service."""

    def __init__(self, config: CarServiceConfig, transport: Transport) -> None:
        self._config = config
        self._transport = transport

    async def get_price(self, vehicle_id: int) -> str:
        """Return the quote for *vehicle_id*, e.g. ``"USD 20000.00"``.

        Raises :class:`~carservice.exceptions.PriceLookupError` when the
        pricing service cannot answer; no placeholder quote is substituted.
        """
        price = await fetch_price(self._config, self._transport, vehicle_id)
        return price.quote


class MapsClient:
    """Resolves coordinates to addresses through the maps service."""

    def __init__(self, config: CarServiceConfig, transport: Transport) -> None:
        self._config = config
        self._transport = transport

    async def get_address(self, location: Location) -> Location:
        address = await fetch_address(self._config, self._transport, location)
        return location.with_address(address)
