"""In-memory vehicle store.

Mirrors what a relational store does for the car table: ids come from a
sequence, ``created_at``/``modified_at`` are stamped on write, and the
transient fields (``price`` and the resolved address part of
``location``) are never persisted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import UTC, datetime

from carservice.exceptions import StoreError
from carservice.models.car import Car
from carservice.store.lookup import ABSENT, Absent, Found

_logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


def _persistable(car: Car) -> Car:
    """Strip the fields that only exist on an enriched car."""
    return car.model_copy(update={"price": None, "location": car.location.coordinates()}, deep=True)


class InMemoryCarStore:
    """Dict-backed :class:`~carservice.store.base.CarStore`.

    Every read and write goes through a deep copy, so callers never share
    an instance with the store.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], datetime] = _utcnow,
        start_id: int = 1,
    ) -> None:
        if start_id < 1:
            raise ValueError(f"start_id must be >= 1, got {start_id}")
        self._clock = clock
        self._next_id = start_id
        self._cars: dict[int, Car] = {}

    def __len__(self) -> int:
        return len(self._cars)

    def __contains__(self, car_id: object) -> bool:
        return car_id in self._cars

    async def find_all(self) -> list[Car]:
        return [self._cars[car_id].model_copy(deep=True) for car_id in sorted(self._cars)]

    async def find_by_id(self, car_id: int) -> Found[Car] | Absent:
        car = self._cars.get(car_id)
        if car is None:
            return ABSENT
        return Found(car.model_copy(deep=True))

    async def save(self, car: Car) -> Car:
        now = self._clock()
        if car.id is None:
            car_id = self._next_id
            self._next_id += 1
            stored = _persistable(car).model_copy(update={"id": car_id, "created_at": now, "modified_at": now})
            _logger.debug("Inserted car id=%d", car_id)
        else:
            existing = self._cars.get(car.id)
            if existing is None:
                raise StoreError(f"Cannot update car id={car.id}: no such row")
            stored = _persistable(car).model_copy(update={"created_at": existing.created_at, "modified_at": now})
            _logger.debug("Updated car id=%d", car.id)
        assert stored.id is not None  # noqa: S101
        self._cars[stored.id] = stored
        # The caller keeps the location it passed in; only the row drops the address.
        return stored.model_copy(update={"location": car.location}, deep=True)

    async def delete(self, car: Car) -> None:
        if car.id is None or car.id not in self._cars:
            raise StoreError(f"Cannot delete car id={car.id}: no such row")
        del self._cars[car.id]
        _logger.debug("Deleted car id=%d", car.id)
