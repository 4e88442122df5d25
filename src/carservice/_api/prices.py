"""Pricing service endpoint.

Endpoint:
  - GET /services/price?vehicleId=<id> (single request)
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from carservice._constants import PRICE_ENDPOINT
from carservice._transport import Transport
from carservice.config import CarServiceConfig
from carservice.exceptions import PriceLookupError, TransportError
from carservice.models.price import Price

_logger = logging.getLogger(__name__)

_SERVICE = "pricing"


def build_price_params(vehicle_id: int) -> dict[str, str]:
    """Build the query string for a price request."""
    return {"vehicleId": str(vehicle_id)}


def parse_price_response(data: dict[str, Any], vehicle_id: int) -> Price:
    """Parse the pricing service reply.

    Raises
    ------
    PriceLookupError
        If the reply lacks a currency or a numeric price.
    """
    try:
        price = Price.model_validate(data)
    except ValidationError as exc:
        raise PriceLookupError(
            f"Malformed price for vehicle {vehicle_id}: {exc.error_count()} validation error(s)",
            service=_SERVICE,
        ) from exc
    if price.vehicle_id is None:
        price = price.model_copy(update={"vehicle_id": vehicle_id})
    return price


async def fetch_price(config: CarServiceConfig, transport: Transport, vehicle_id: int) -> Price:
    """Fetch the current price of a vehicle.

    Parameters
    ----------
    config : CarServiceConfig
        Service configuration.
    transport : Transport
        HTTP transport.
    vehicle_id : int
        Id of the vehicle to price.

    Returns
    -------
    Price
        The quote.

    Raises
    ------
    PriceLookupError
        If the pricing service is unreachable or answers with garbage.
    """
    url = f"{config.pricing_url}{PRICE_ENDPOINT}"
    try:
        data = await transport.get_json(url, build_price_params(vehicle_id))
    except TransportError as exc:
        raise PriceLookupError(f"Price lookup for vehicle {vehicle_id} failed: {exc}", service=_SERVICE) from exc

    price = parse_price_response(data, vehicle_id)
    _logger.debug("Price for vehicle %d: %s", vehicle_id, price.quote)
    return price
