from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from carservice._api.maps import build_maps_params, parse_address
from carservice._api.prices import build_price_params, parse_price_response
from carservice.clients import MapsClient, PriceClient
from carservice.config import CarServiceConfig
from carservice.exceptions import CollaboratorError, LocationLookupError, PriceLookupError, TransportError
from carservice.models.location import Location


class _RecordingTransport:
    def __init__(self, payload: dict[str, Any]) -> None:
        self._payload = payload
        self.requests: list[tuple[str, dict[str, str]]] = []

    async def get_json(self, url: str, params: Mapping[str, str]) -> dict[str, Any]:
        self.requests.append((url, dict(params)))
        return self._payload


class _ErrorTransport:
    def __init__(self, status_code: int | None = 503) -> None:
        self._status_code = status_code

    async def get_json(self, url: str, _params: Mapping[str, str]) -> dict[str, Any]:
        raise TransportError(f"HTTP {self._status_code} from {url}", status_code=self._status_code, url=url)


@pytest.fixture
def config() -> CarServiceConfig:
    return CarServiceConfig(pricing_url="http://pricing.test", maps_url="http://maps.test")


def test_build_price_params() -> None:
    assert build_price_params(42) == {"vehicleId": "42"}


def test_build_maps_params_keeps_full_precision() -> None:
    assert build_maps_params(Location(lat=40.730610, lon=-73.935242)) == {"lat": "40.73061", "lon": "-73.935242"}


def test_parse_price_response_fills_missing_vehicle_id() -> None:
    price = parse_price_response({"currency": "USD", "price": 18500.5}, 3)

    assert price.vehicle_id == 3
    assert price.currency == "USD"


def test_numeric_price_is_quoted_with_two_decimals() -> None:
    price = parse_price_response({"currency": "USD", "price": 20000.00}, 1)

    assert price.quote == "USD 20000.00"


def test_parse_price_response_rejects_missing_currency() -> None:
    with pytest.raises(PriceLookupError, match="vehicle 3"):
        parse_price_response({"price": "10"}, 3)


def test_parse_address_requires_street_address() -> None:
    with pytest.raises(LocationLookupError):
        parse_address({"city": "Springfield"}, Location(lat=1.0, lon=2.0))


@pytest.mark.asyncio
async def test_price_client_returns_quote_text(config: CarServiceConfig) -> None:
    transport = _RecordingTransport({"currency": "USD", "price": "20000.00", "vehicleId": 1})
    client = PriceClient(config, transport)

    quote = await client.get_price(1)

    assert quote == "USD 20000.00"
    assert transport.requests == [("http://pricing.test/services/price", {"vehicleId": "1"})]


@pytest.mark.asyncio
async def test_price_client_formats_numeric_price(config: CarServiceConfig) -> None:
    client = PriceClient(config, _RecordingTransport({"currency": "USD", "price": 18500.5}))

    assert await client.get_price(2) == "USD 18500.50"


@pytest.mark.asyncio
async def test_price_client_wraps_transport_failure(config: CarServiceConfig) -> None:
    client = PriceClient(config, _ErrorTransport(503))

    with pytest.raises(PriceLookupError) as exc_info:
        await client.get_price(1)

    exc = exc_info.value
    assert isinstance(exc, CollaboratorError)
    assert exc.service == "pricing"
    assert isinstance(exc.__cause__, TransportError)
    assert exc.__cause__.status_code == 503


@pytest.mark.asyncio
async def test_maps_client_resolves_location(config: CarServiceConfig) -> None:
    transport = _RecordingTransport(
        {"address": "777 Brockton Avenue", "city": "Abington", "state": "MA", "zip": "2351"}
    )
    client = MapsClient(config, transport)
    location = Location(lat=42.1, lon=-70.9)

    resolved = await client.get_address(location)

    assert resolved.address == "777 Brockton Avenue"
    assert resolved.city == "Abington"
    assert resolved.state == "MA"
    assert resolved.zip_code == "2351"
    assert (resolved.lat, resolved.lon) == (42.1, -70.9)
    assert transport.requests == [("http://maps.test/maps", {"lat": "42.1", "lon": "-70.9"})]


@pytest.mark.asyncio
async def test_maps_client_wraps_transport_failure(config: CarServiceConfig) -> None:
    client = MapsClient(config, _ErrorTransport(None))

    with pytest.raises(LocationLookupError) as exc_info:
        await client.get_address(Location(lat=1.0, lon=2.0))

    assert exc_info.value.service == "maps"
