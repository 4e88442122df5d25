"""Result type for keyed store lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Found(Generic[T]):
    """A lookup that matched a record."""

    value: T


@dataclass(frozen=True, slots=True)
class Absent:
    """A lookup that matched nothing."""

    def __bool__(self) -> bool:
        return False


ABSENT: Final = Absent()

Lookup = Found[T] | Absent
