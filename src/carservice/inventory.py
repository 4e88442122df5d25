"""High-level async entry point wiring the store, the collaborators and the service."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from carservice._transport import HttpTransport
from carservice.clients import MapsClient, PriceClient
from carservice.config import CarServiceConfig
from carservice.exceptions import CarServiceError
from carservice.models.car import Car
from carservice.service import CarService
from carservice.store.base import CarStore
from carservice.store.memory import InMemoryCarStore

_logger = logging.getLogger(__name__)


class CarInventory:
    """Async facade over :class:`CarService`.

    Usage::

        async with CarInventory(CarServiceConfig.from_env()) as inventory:
            car = await inventory.save_car(new_car)
            enriched = await inventory.get_car(car.id)
    """

    def __init__(
        self,
        config: CarServiceConfig | None = None,
        *,
        store: CarStore | None = None,
        session: aiohttp.ClientSession | None = None,
    ) -> None:
        self._config = config or CarServiceConfig()
        self._store: CarStore = store if store is not None else InMemoryCarStore()
        self._external_session = session is not None
        self._http_session = session
        self._service: CarService | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> CarInventory:
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        transport = HttpTransport(self._config, self._http_session)
        self._service = CarService(
            self._store,
            PriceClient(self._config, transport),
            MapsClient(self._config, transport),
        )
        _logger.debug("Car inventory ready (pricing=%s maps=%s)", self._config.pricing_url, self._config.maps_url)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        self._service = None

    @property
    def service(self) -> CarService:
        if self._service is None:
            raise CarServiceError("Inventory not initialized. Use 'async with CarInventory(...) as inventory:'")
        return self._service

    @property
    def store(self) -> CarStore:
        return self._store

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def list_cars(self) -> list[Car]:
        return await self.service.list()

    async def get_car(self, car_id: int) -> Car:
        return await self.service.find_by_id(car_id)

    async def save_car(self, car: Car) -> Car:
        return await self.service.save(car)

    async def delete_car(self, car_id: int) -> None:
        await self.service.delete(car_id)
