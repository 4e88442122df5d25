"""Data models for cars, locations and price quotes."""

from carservice.models._base import CarServiceModel
from carservice.models.car import Car, Condition, Details, Manufacturer
from carservice.models.location import Address, Location
from carservice.models.price import Price

__all__ = [
    "Address",
    "Car",
    "CarServiceModel",
    "Condition",
    "Details",
    "Location",
    "Manufacturer",
    "Price",
]
