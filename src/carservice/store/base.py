"""Structural interface every vehicle store implements."""

from __future__ import annotations

from typing import Protocol

from carservice.models.car import Car
from carservice.store.lookup import Absent, Found


class CarStore(Protocol):
    """Keyed record store for cars.

    Implementations own identity assignment and any store-managed
    metadata. Their failures propagate to callers untouched.
    """

    async def find_all(self) -> list[Car]:
        ...

    async def find_by_id(self, car_id: int) -> Found[Car] | Absent:
        ...

    async def save(self, car: Car) -> Car:
        """Insert *car* when it has no id, otherwise update it."""
        ...

    async def delete(self, car: Car) -> None:
        ...
