"""Pytest configuration and fixtures for Eolia client tests."""

from datetime import datetime
from typing import Any

import pytest

from eolia.models import EoliaConfig

TEST_HOST = "https://eolia.test"
TEST_USER_ID = "user@example.com"
TEST_PASSWORD = "password123"
TEST_NOW = datetime(2024, 5, 6, 7, 8, 59)


@pytest.fixture
def config() -> EoliaConfig:
    """Fixture providing a session configuration with credentials."""
    return EoliaConfig(
        user_id=TEST_USER_ID,
        password=TEST_PASSWORD,
        host=TEST_HOST,
        user_agent="eolia-tests/1.0",
    )


@pytest.fixture
def fixed_now() -> datetime:
    """Fixture providing the local time used for request date headers."""
    return TEST_NOW


@pytest.fixture
def sample_device() -> dict[str, Any]:
    """Fixture providing one ``ac_list`` entry."""
    return {
        "appliance_id": "ac-1",
        "nickname": "Living room",
        "appliance_type": "AC",
        "product_code": "CS-X280D",
        "product_name": "Eolia X",
        "point_code": "P1",
    }


@pytest.fixture
def sample_devices_response(sample_device: dict[str, Any]) -> dict[str, Any]:
    """Fixture providing a devices API response with two air conditioners.

    Args:
        sample_device: First device entry.

    Returns:
        A dictionary representing a devices API response.

    """
    return {
        "ac_list": [
            sample_device,
            {
                "appliance_id": "ac-2",
                "nickname": "Bedroom",
                "appliance_type": "AC",
                "product_code": "CS-J250D",
                "product_name": "Eolia J",
                "point_code": "P2",
            },
        ],
    }


@pytest.fixture
def sample_status_response() -> dict[str, Any]:
    """Fixture providing a device status API response."""
    return {
        "appliance_id": "ac-1",
        "operation_status": True,
        "operation_mode": "Cooling",
        "temperature": 24.0,
        "wind_speed": 2,
        "wind_direction": 3,
        "timer_value": 0,
        "inside_humidity": 45,
        "inside_temp": 26,
        "outside_temp": 31,
        "operation_priority": False,
        "device_errstatus": False,
        "airquality": False,
        "nanoex": True,
        "aq_value": 0,
        "aq_name": "",
        "air_flag": False,
    }


@pytest.fixture
def sample_functions_response() -> dict[str, Any]:
    """Fixture providing a product functions API response."""
    return {
        "ac_function_list": [
            {"function_id": "blast", "function_value": True},
            {"function_id": "nanoex", "function_value": False},
            {"function_id": "wind_direction_steps", "function_value": 5},
        ],
    }
