"""Async client for the Panasonic Eolia air conditioner service.

Usage:
    async with EoliaCoordinator("user@example.com", "password") as eolia:
        device = (await eolia.devices())[0]
        device.operation_mode = OperationMode.COOLING
        device.temperature = 24
        await eolia.apply(device)
"""

from .api import EoliaApiClient
from .coordinator import EoliaCoordinator
from .device import EoliaAirConditioner, OperationMode
from .errors import (
    EoliaApiAuthError,
    EoliaApiClientError,
    EoliaError,
    InvalidArgumentError,
    UnsupportedOperationError,
)
from .models import DeviceInfo, DeviceStatus, EoliaConfig, SessionState
from .session import EoliaSession

__version__ = "1.0.0"

__all__ = [
    "DeviceInfo",
    "DeviceStatus",
    "EoliaAirConditioner",
    "EoliaApiAuthError",
    "EoliaApiClient",
    "EoliaApiClientError",
    "EoliaConfig",
    "EoliaCoordinator",
    "EoliaError",
    "EoliaSession",
    "InvalidArgumentError",
    "OperationMode",
    "SessionState",
    "UnsupportedOperationError",
    "__version__",
]
