"""API client for the Panasonic Eolia service.

This module provides one call per remote endpoint (authentication,
device listing, device status and product capabilities) on top of an
``EoliaSession``, and the helpers that turn responses into models.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .const import (
    DEFAULT_TERMINAL_TYPE,
    DEVICE_STATUS_PATH,
    DEVICES_PATH,
    LOGIN_PATH,
    LOGOUT_PATH,
    PRODUCT_FUNCTIONS_PATH,
)
from .errors import EoliaApiClientError
from .models import DeviceInfo, DeviceStatus
from .session import create_login_body

if TYPE_CHECKING:
    import httpx

    from .session import EoliaSession

_LOGGER = logging.getLogger(__name__)


def parse_json(response: httpx.Response) -> dict[str, Any]:
    """Return the JSON object of a response, or an empty dict without a body.

    Raises:
        EoliaApiClientError: If the body is not a JSON object.

    """
    if not response.content:
        return {}

    try:
        data = response.json()
    except ValueError as err:
        error_msg = f"Invalid JSON response ({response.status_code})"
        raise EoliaApiClientError(error_msg, status_code=response.status_code) from err

    if not isinstance(data, dict):
        error_msg = "Unexpected response: expected a JSON object"
        raise EoliaApiClientError(error_msg, status_code=response.status_code)
    return data


def extract_devices(data: dict[str, Any]) -> list[DeviceInfo]:
    """Extract the device list from a devices response.

    Args:
        data: API response data dictionary.

    Returns:
        List of DeviceInfo objects, empty if ``ac_list`` is missing.

    Raises:
        EoliaApiClientError: If ``ac_list`` or one of its entries is malformed.

    """
    devices = data.get("ac_list") or []
    if not isinstance(devices, list):
        error_msg = "Unexpected devices response: ac_list is not a list"
        raise EoliaApiClientError(error_msg)
    return [DeviceInfo.from_dict(device) for device in devices]


def extract_functions(data: dict[str, Any]) -> dict[str, Any]:
    """Extract the capability map from a product functions response.

    Args:
        data: API response data dictionary.

    Returns:
        Mapping of ``function_id`` to ``function_value``.

    """
    functions = data.get("ac_function_list") or []
    return {
        function["function_id"]: function.get("function_value")
        for function in functions
        if isinstance(function, dict) and "function_id" in function
    }


class EoliaApiClient:
    """Typed calls for each Eolia endpoint."""

    def __init__(self, session: EoliaSession) -> None:
        self._session = session

    @property
    def session(self) -> EoliaSession:
        """Return the underlying session."""
        return self._session

    async def auth_check(self) -> dict[str, Any]:
        """Probe the login endpoint without credentials."""
        _LOGGER.debug("Checking Eolia session")
        response = await self._session.request("POST", LOGIN_PATH, json={"easy": {}})
        return parse_json(response)

    async def login(
        self,
        user_id: str,
        password: str,
        terminal_type: int = DEFAULT_TERMINAL_TYPE,
        next_easy: bool = True,  # noqa: FBT001, FBT002
    ) -> dict[str, Any]:
        """Log in with a user id and password.

        Returns:
            Raw session and profile data.

        """
        body = create_login_body(user_id, password, terminal_type, next_easy)
        response = await self._session.request("POST", LOGIN_PATH, json=body)
        return parse_json(response)

    async def logout(self) -> dict[str, Any]:
        """Invalidate the session on the server."""
        response = await self._session.request("POST", LOGOUT_PATH)
        return parse_json(response)

    async def product_functions(self, product_code: str) -> dict[str, Any]:
        """Fetch the capability flags of a product model."""
        path = PRODUCT_FUNCTIONS_PATH.format(product_code=product_code)
        response = await self._session.request("GET", path)
        return extract_functions(parse_json(response))

    async def devices(self) -> list[DeviceInfo]:
        """Fetch the devices bound to the account."""
        response = await self._session.request("GET", DEVICES_PATH)
        devices = extract_devices(parse_json(response))
        _LOGGER.debug("Retrieved %d devices from Eolia API", len(devices))
        return devices

    async def device_status(self, device_id: str) -> DeviceStatus:
        """Fetch the current operational values of a device."""
        path = DEVICE_STATUS_PATH.format(device_id=device_id)
        response = await self._session.request("GET", path)
        return DeviceStatus.from_dict(parse_json(response))

    async def device_update(
        self,
        device_id: str,
        body: dict[str, Any],
    ) -> DeviceStatus:
        """Submit a full set of operational values for a device.

        Args:
            device_id: Target appliance id.
            body: Full values payload including the operation token.

        Returns:
            The values confirmed by the server.

        """
        path = DEVICE_STATUS_PATH.format(device_id=device_id)
        _LOGGER.debug("Updating status of device %s", device_id)
        response = await self._session.request("PUT", path, json=body)
        return DeviceStatus.from_dict(parse_json(response))
