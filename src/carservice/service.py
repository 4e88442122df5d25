"""Car aggregation service.

Creates, reads, updates and deletes cars, and on a single-car fetch
gathers the car's price and street address from the external
collaborators.
"""

from __future__ import annotations

import logging

from carservice.clients import LocationResolver, PriceLookup
from carservice.exceptions import CarNotFoundError
from carservice.models.car import Car
from carservice.store.base import CarStore
from carservice.store.lookup import Found

_logger = logging.getLogger(__name__)


class CarService:
    """Stateless orchestration over a store and two collaborators.

    Build one per process and share it; the instance only holds the
    injected handles.

    Parameters
    ----------
    store : CarStore
        Where cars are persisted.
    prices : PriceLookup
        Source of price quotes.
    maps : LocationResolver
        Source of street addresses.
    """

    def __init__(self, store: CarStore, prices: PriceLookup, maps: LocationResolver) -> None:
        self._store = store
        self._prices = prices
        self._maps = maps

    async def _load(self, car_id: int) -> Car:
        lookup = await self._store.find_by_id(car_id)
        if not isinstance(lookup, Found):
            raise CarNotFoundError(car_id)
        return lookup.value

    async def list(self) -> list[Car]:
        """Return every stored car, without price or address."""
        return await self._store.find_all()

    async def find_by_id(self, car_id: int) -> Car:
        """Return the car with *car_id*, enriched with price and address.

        The price is fetched first, then the address. Either collaborator
        failing aborts the call. The enriched car is never written back.

        Raises
        ------
        CarNotFoundError
            If no car is stored under *car_id*.
        """
        car = await self._load(car_id)

        price = await self._prices.get_price(car_id)
        car = car.model_copy(update={"price": price})

        location = await self._maps.get_address(car.location)
        car = car.model_copy(update={"location": location})

        _logger.debug("Enriched car id=%d price=%s address=%s", car_id, price, location.address)
        return car

    async def save(self, car: Car) -> Car:
        """Create *car* if it has no id, otherwise update it.

        An update copies only ``details`` and ``location`` onto the stored
        record; everything else on it is kept as stored.

        Raises
        ------
        CarNotFoundError
            If *car* carries an id that is not stored. Nothing is written.
        """
        if not car.is_persisted:
            created = await self._store.save(car)
            _logger.debug("Created car id=%s", created.id)
            return created

        assert car.id is not None  # noqa: S101
        existing = await self._load(car.id)
        merged = existing.model_copy(update={"details": car.details, "location": car.location})
        updated = await self._store.save(merged)
        _logger.debug("Updated car id=%d", car.id)
        return updated

    async def delete(self, car_id: int) -> None:
        """Delete the car with *car_id*.

        Raises
        ------
        CarNotFoundError
            If no car is stored under *car_id*.
        """
        car = await self._load(car_id)
        await self._store.delete(car)
        _logger.debug("Deleted car id=%d", car_id)
