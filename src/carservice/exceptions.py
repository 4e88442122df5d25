"""Custom exception hierarchy for carservice."""

from __future__ import annotations


class CarServiceError(Exception):
    """Base exception for all carservice errors."""


class CarServiceConfigError(CarServiceError):
    """Invalid or missing configuration."""


class CarNotFoundError(CarServiceError):
    """No car is stored under the requested id.

    Raised by lookups, by the update path of ``save`` and by ``delete``.
    """

    def __init__(self, car_id: int | None = None, message: str | None = None) -> None:
        self.car_id = car_id
        super().__init__(message or f"Car not found: id={car_id}")


class StoreError(CarServiceError):
    """The vehicle store rejected an operation."""


class TransportError(CarServiceError):
    """HTTP-level failure (network, timeout, non-200, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        url: str = "",
    ) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(message)


class CollaboratorError(CarServiceError):
    """An external collaborator (pricing or maps) failed to answer."""

    def __init__(self, message: str, *, service: str = "") -> None:
        self.service = service
        super().__init__(message)


class PriceLookupError(CollaboratorError):
    """The pricing service could not produce a quote."""


class LocationLookupError(CollaboratorError):
    """The maps service could not resolve an address."""
