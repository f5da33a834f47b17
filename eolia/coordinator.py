"""Coordinator for Panasonic Eolia air conditioners."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from dataclasses import replace
from typing import TYPE_CHECKING

from .api import EoliaApiClient
from .const import OPERATION_TOKEN
from .device import EoliaAirConditioner
from .errors import InvalidArgumentError
from .models import EoliaConfig
from .session import EoliaSession

if TYPE_CHECKING:
    import httpx

_LOGGER = logging.getLogger(__name__)


def create_operation_token() -> str:
    """Return a random token identifying one update submission."""
    return uuid.uuid4().hex


def _ensure_device(device: object) -> EoliaAirConditioner:
    if not isinstance(device, EoliaAirConditioner):
        error_msg = "Device argument must be EoliaAirConditioner"
        raise InvalidArgumentError(error_msg)
    return device


class EoliaCoordinator:
    """Cache the account's air conditioners and keep them in sync.

    The device list is built once and served from cache until a fresh
    fetch is requested. Local changes made on a device are submitted with
    ``apply`` and the values confirmed by the server replace the local ones.
    """

    def __init__(
        self,
        user_id: str,
        password: str,
        config: EoliaConfig | None = None,
        client: httpx.AsyncClient | None = None,
        token_factory: Callable[[], str] = create_operation_token,
    ) -> None:
        """Initialize the coordinator.

        Args:
            user_id: Account user id.
            password: Account password.
            config: Optional extra settings; user id and password override
                the ones it carries.
            client: Optional HTTP client passed to the session.
            token_factory: Source of operation tokens for updates.

        """
        self._config = replace(
            config or EoliaConfig(),
            user_id=user_id,
            password=password,
        )
        self._api = EoliaApiClient(EoliaSession(self._config, client))
        self._token_factory = token_factory
        self._devices: list[EoliaAirConditioner] | None = None

    @property
    def api(self) -> EoliaApiClient:
        """Return the low-level API client."""
        return self._api

    async def close(self) -> None:
        """Close the underlying session."""
        await self._api.session.close()

    async def __aenter__(self) -> EoliaCoordinator:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def begin(self) -> None:
        """Establish a session with the Eolia service."""
        await self._api.auth_check()

    async def devices(self, fresh: bool = False) -> list[EoliaAirConditioner]:  # noqa: FBT001, FBT002
        """Return the account's air conditioners.

        Args:
            fresh: Rebuild the list from the service even if cached.

        Returns:
            The cached list, or a newly built one.

        Raises:
            EoliaApiClientError: If any request fails; the previous cache
                is kept.

        """
        if self._devices is not None and not fresh:
            return self._devices

        devices = []
        for info in await self._api.devices():
            status = await self._api.device_status(info.appliance_id)
            features = await self._api.product_functions(info.product_code)
            devices.append(EoliaAirConditioner(info, status, features))

        self._devices = devices
        _LOGGER.debug("Cached %d Eolia devices", len(devices))
        return devices

    async def refresh(self, device: EoliaAirConditioner) -> EoliaAirConditioner:
        """Reload the operational values of a device in place."""
        device = _ensure_device(device)
        device.values = await self._api.device_status(device.appliance_id)
        return device

    async def apply(self, device: EoliaAirConditioner) -> EoliaAirConditioner:
        """Submit the device's values and install the confirmed ones.

        Raises:
            InvalidArgumentError: If ``device`` is not an air conditioner.

        """
        device = _ensure_device(device)
        body = {
            **device.values.to_dict(),
            OPERATION_TOKEN: self._token_factory(),
        }
        device.values = await self._api.device_update(device.appliance_id, body)
        _LOGGER.debug("Applied new values to device %s", device.appliance_id)
        return device
