"""Maps (reverse geocoding) endpoint.

Endpoint:
  - GET /maps?lat=<lat>&lon=<lon> (single request)
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from carservice._constants import MAPS_ENDPOINT
from carservice._transport import Transport
from carservice.config import CarServiceConfig
from carservice.exceptions import LocationLookupError, TransportError
from carservice.models.location import Address, Location

_logger = logging.getLogger(__name__)

_SERVICE = "maps"


def build_maps_params(location: Location) -> dict[str, str]:
    """Build the query string for a reverse geocoding request."""
    return {"lat": repr(location.lat), "lon": repr(location.lon)}


def parse_address(data: dict[str, Any], location: Location) -> Address:
    """Parse the maps service reply.

    A reply without a street address does not count as a resolution.
    """
    try:
        address = Address.model_validate(data)
    except ValidationError as exc:
        raise LocationLookupError(
            f"Malformed address for ({location.lat}, {location.lon}): {exc.error_count()} validation error(s)",
            service=_SERVICE,
        ) from exc
    if address.address is None:
        raise LocationLookupError(
            f"No address for ({location.lat}, {location.lon})",
            service=_SERVICE,
        )
    return address


async def fetch_address(config: CarServiceConfig, transport: Transport, location: Location) -> Address:
    """Resolve the street address at *location*.

    Raises
    ------
    LocationLookupError
        If the maps service is unreachable or has no address to offer.
    """
    url = f"{config.maps_url}{MAPS_ENDPOINT}"
    try:
        data = await transport.get_json(url, build_maps_params(location))
    except TransportError as exc:
        raise LocationLookupError(
            f"Address lookup for ({location.lat}, {location.lon}) failed: {exc}",
            service=_SERVICE,
        ) from exc

    address = parse_address(data, location)
    _logger.debug("Resolved (%s, %s) to %s", location.lat, location.lon, address.address)
    return address
