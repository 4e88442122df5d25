"""Client configuration for carservice."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlparse

from carservice._constants import DEFAULT_MAPS_URL, DEFAULT_PRICING_URL, DEFAULT_REQUEST_TIMEOUT, USER_AGENT
from carservice.exceptions import CarServiceConfigError


def _check_url(name: str, value: str) -> None:
    parsed = urlparse(value)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise CarServiceConfigError(f"{name} must be an absolute http(s) URL, got {value!r}")


@dataclass(frozen=True)
class CarServiceConfig:
    """Service configuration.

    Parameters
    ----------
    pricing_url : str
        Base URL of the pricing service.
    maps_url : str
        Base URL of the maps (reverse geocoding) service.
    request_timeout : float
        Total timeout in seconds applied to each collaborator request.
    user_agent : str
        User-Agent header sent to the collaborators.
    """

    pricing_url: str = DEFAULT_PRICING_URL
    maps_url: str = DEFAULT_MAPS_URL
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        _check_url("pricing_url", self.pricing_url)
        _check_url("maps_url", self.maps_url)
        if self.request_timeout <= 0:
            raise CarServiceConfigError(f"request_timeout must be positive, got {self.request_timeout}")
        # Base URLs are joined with endpoint paths, so drop trailing slashes once here.
        object.__setattr__(self, "pricing_url", self.pricing_url.rstrip("/"))
        object.__setattr__(self, "maps_url", self.maps_url.rstrip("/"))

    @classmethod
    def from_env(cls, **overrides: Any) -> CarServiceConfig:
        """Create configuration from environment variables.

        Reads ``CARSERVICE_PRICING_URL``, ``CARSERVICE_MAPS_URL``,
        ``CARSERVICE_REQUEST_TIMEOUT`` and ``CARSERVICE_USER_AGENT``.
        Explicit keyword arguments override environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        CarServiceConfig
            Populated configuration.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "CARSERVICE_PRICING_URL": "pricing_url",
            "CARSERVICE_MAPS_URL": "maps_url",
            "CARSERVICE_USER_AGENT": "user_agent",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        timeout_env = env.get("CARSERVICE_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            try:
                config_kwargs["request_timeout"] = float(timeout_env)
            except ValueError as exc:
                raise CarServiceConfigError(f"CARSERVICE_REQUEST_TIMEOUT is not a number: {timeout_env!r}") from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
