"""Vehicle store layer.

The store is the only component that persists cars. Lookups never return
``None``: they return :class:`Found` or :data:`ABSENT`, and callers branch
on the result before touching a record.
"""

from carservice.store.base import CarStore
from carservice.store.lookup import ABSENT, Absent, Found, Lookup
from carservice.store.memory import InMemoryCarStore

__all__ = [
    "ABSENT",
    "Absent",
    "CarStore",
    "Found",
    "InMemoryCarStore",
    "Lookup",
]
