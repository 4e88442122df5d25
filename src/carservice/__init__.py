"""carservice - Async vehicle inventory with price and address enrichment."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("carservice")
except PackageNotFoundError:
    __version__ = "0+local"
from carservice.clients import LocationResolver, MapsClient, PriceClient, PriceLookup
from carservice.config import CarServiceConfig
from carservice.exceptions import (
    CarNotFoundError,
    CarServiceConfigError,
    CarServiceError,
    CollaboratorError,
    LocationLookupError,
    PriceLookupError,
    StoreError,
    TransportError,
)
from carservice.inventory import CarInventory
from carservice.models import Address, Car, Condition, Details, Location, Manufacturer, Price
from carservice.service import CarService
from carservice.store import ABSENT, Absent, CarStore, Found, InMemoryCarStore

__all__ = [
    "__version__",
    "ABSENT",
    "Absent",
    "Address",
    "Car",
    "CarInventory",
    "CarNotFoundError",
    "CarService",
    "CarServiceConfig",
    "CarServiceConfigError",
    "CarServiceError",
    "CarStore",
    "CollaboratorError",
    "Condition",
    "Details",
    "Found",
    "InMemoryCarStore",
    "Location",
    "LocationLookupError",
    "LocationResolver",
    "Manufacturer",
    "MapsClient",
    "Price",
    "PriceClient",
    "PriceLookup",
    "PriceLookupError",
    "StoreError",
    "TransportError",
]
