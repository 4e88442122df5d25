from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from carservice.models.car import Car, Condition, Details, Manufacturer
from carservice.models.location import Address, Location
from carservice.models.price import Price


def test_car_parses_camel_case_payload() -> None:
    car = Car.model_validate(
        {
            "condition": "NEW",
            "details": {
                "body": "sedan",
                "model": "Impala",
                "manufacturer": {"code": 101, "name": "Chevrolet"},
                "numberOfDoors": 4,
                "fuelType": "Gasoline",
                "engine": "3.6L V6",
                "mileage": 32280,
                "modelYear": 2018,
                "productionYear": 2018,
                "externalColor": "white",
            },
            "location": {"lat": 40.73061, "lon": -73.935242},
        }
    )

    assert car.id is None
    assert car.condition == Condition.NEW
    assert car.details.manufacturer == Manufacturer(code=101, name="Chevrolet")
    assert car.details.number_of_doors == 4
    assert car.details.model_year == 2018
    assert not car.is_persisted


def test_blank_strings_fall_back_to_defaults() -> None:
    details = Details.model_validate({"body": "", "model": "  ", "externalColor": "red"})

    assert details.body is None
    assert details.model is None
    assert details.external_color == "red"


def test_location_coordinates_are_range_checked() -> None:
    with pytest.raises(ValidationError):
        Location(lat=91.0, lon=0.0)
    with pytest.raises(ValidationError):
        Location(lat=0.0, lon=-181.0)


def test_with_address_keeps_coordinates() -> None:
    location = Location(lat=40.0, lon=-75.0)

    resolved = location.with_address(Address.model_validate({"address": "123 Main St", "city": "Springfield", "zip": "19064"}))

    assert resolved.is_resolved
    assert (resolved.lat, resolved.lon) == (40.0, -75.0)
    assert resolved.zip_code == "19064"
    assert resolved.coordinates() == location
    assert not location.is_resolved


def test_models_are_frozen() -> None:
    car = Car(details=Details(body="sedan"), location=Location(lat=1.0, lon=2.0))

    with pytest.raises(ValidationError):
        car.price = "USD 1"  # type: ignore[misc]


def test_to_wire_uses_aliases_and_omits_unset_fields() -> None:
    location = Location(lat=1.0, lon=2.0, address="1 Road", zip_code="12345")

    assert location.to_wire() == {"lat": 1.0, "lon": 2.0, "address": "1 Road", "zip": "12345"}


def test_price_quote_text() -> None:
    price = Price.model_validate({"currency": "USD", "price": "20000.00", "vehicleId": 1})

    assert price.price == Decimal("20000.00")
    assert price.quote == "USD 20000.00"
