"""Air conditioner entity for the Panasonic Eolia client."""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import StrEnum
from types import MappingProxyType
from typing import Any

from .const import (
    HUMIDITY_UNAVAILABLE,
    TEMPERATURE_MAX,
    TEMPERATURE_MIN,
    WIND_MAX,
    WIND_MIN,
)
from .errors import InvalidArgumentError, UnsupportedOperationError
from .models import DeviceInfo, DeviceStatus


class OperationMode(StrEnum):
    """Operation modes accepted by the Eolia service."""

    AUTO = "Auto"
    COOLING = "Cooling"
    HEATING = "Heating"
    COOL_DEHUMIDIFYING = "CoolDehumidifying"
    BLAST = "Blast"


def _clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


class EoliaAirConditioner:
    """One air conditioner: identity, operational values and capabilities.

    Identity and capabilities are fixed for the lifetime of the entity.
    The values are replaced as a whole on refresh and apply, and validated
    field by field when set through the properties below.
    """

    def __init__(
        self,
        info: DeviceInfo,
        status: DeviceStatus,
        features: Mapping[str, Any] | None = None,
    ) -> None:
        self._info = info
        self._status = status
        self._features = MappingProxyType(dict(features or {}))

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(appliance_id={self.appliance_id!r}, "
            f"nickname={self.nickname!r})"
        )

    @property
    def info(self) -> DeviceInfo:
        """Return the identity record from the device list."""
        return self._info

    @property
    def values(self) -> DeviceStatus:
        """Return the current operational values."""
        return self._status

    @values.setter
    def values(self, status: DeviceStatus) -> None:
        """Replace the operational values as a whole."""
        if not isinstance(status, DeviceStatus):
            error_msg = "Values must be a DeviceStatus"
            raise InvalidArgumentError(error_msg)
        self._status = status

    @property
    def features(self) -> Mapping[str, Any]:
        """Return the read-only capability flags."""
        return self._features

    def feature(self, name: str) -> Any:
        """Return the capability value, or False when the device lacks it.

        A missing capability and one reported as False are not told apart.
        """
        return self._features.get(name, False)

    @property
    def appliance_id(self) -> str:
        """Return the appliance id used in device requests."""
        return self._info.appliance_id

    @property
    def nickname(self) -> str | None:
        return self._info.nickname

    @property
    def appliance_type(self) -> str | None:
        return self._info.appliance_type

    @property
    def product_code(self) -> str:
        """Return the product model code."""
        return self._info.product_code

    @property
    def product_name(self) -> str | None:
        return self._info.product_name

    @property
    def point_code(self) -> str | None:
        return self._info.point_code

    @property
    def operation_status(self) -> Any:
        """Operation status (power state), stored without validation."""
        return self._status.operation_status

    @operation_status.setter
    def operation_status(self, value: Any) -> None:
        """Set the power state; the value is sent as given."""
        self._status.set_value("operation_status", value)

    @property
    def operation_mode(self) -> str | None:
        """Operation mode, one of the OperationMode values."""
        return self._status.operation_mode

    @operation_mode.setter
    def operation_mode(self, value: str) -> None:
        """Set the operation mode.

        Raises:
            InvalidArgumentError: If the value is not an OperationMode.
            UnsupportedOperationError: If Blast is requested on a device
                without the ``blast`` capability.

        """
        try:
            mode = OperationMode(value)
        except ValueError as err:
            error_msg = "Invalid Operation Mode"
            raise InvalidArgumentError(error_msg) from err

        if mode is OperationMode.BLAST and self.feature("blast") is not True:
            error_msg = f'Blast mode is not supported on "{self.product_code}"'
            raise UnsupportedOperationError(error_msg)

        self._status.set_value("operation_mode", mode.value)

    @property
    def temperature(self) -> float | None:
        """Target temperature in Celsius, clamped to 16..30 when set."""
        return self._status.temperature

    @temperature.setter
    def temperature(self, value: float) -> None:
        """Set the target temperature, clamped to 16..30."""
        clamped = _clamp(value, TEMPERATURE_MIN, TEMPERATURE_MAX)
        self._status.set_value("temperature", clamped)

    @property
    def wind_speed(self) -> int | None:
        """Wind speed step, clamped to 0..5 when set."""
        return self._status.wind_speed

    @wind_speed.setter
    def wind_speed(self, value: int) -> None:
        """Set the wind speed, clamped to 0..5."""
        self._status.set_value("wind_speed", _clamp(value, WIND_MIN, WIND_MAX))

    @property
    def wind_direction(self) -> int | None:
        """Wind direction step, clamped to 0..5 when set."""
        return self._status.wind_direction

    @wind_direction.setter
    def wind_direction(self, value: int) -> None:
        """Set the wind direction, clamped to 0..5."""
        self._status.set_value("wind_direction", _clamp(value, WIND_MIN, WIND_MAX))

    @property
    def timer_value(self) -> Any:
        """Timer setting, stored without validation."""
        return self._status.timer_value

    @timer_value.setter
    def timer_value(self, value: Any) -> None:
        """Set the timer; the value is sent as given."""
        self._status.set_value("timer_value", value)

    @property
    def inside_humidity(self) -> float | None:
        """Return the inside humidity, NaN when the sensor is unavailable."""
        humidity = self._status.inside_humidity
        if humidity == HUMIDITY_UNAVAILABLE:
            return math.nan
        return humidity

    # Read-only telemetry

    @property
    def inside_temperature(self) -> float | None:
        return self._status.inside_temp

    @property
    def outside_temperature(self) -> float | None:
        return self._status.outside_temp

    @property
    def operation_priority(self) -> Any:
        return self._status.operation_priority

    @property
    def device_error_state(self) -> Any:
        """Return the error state reported by the device."""
        return self._status.device_errstatus

    @property
    def air_quality(self) -> Any:
        return self._status.airquality

    @property
    def nanoex(self) -> Any:
        return self._status.nanoex

    @property
    def aq_value(self) -> Any:
        return self._status.aq_value

    @property
    def aq_name(self) -> Any:
        return self._status.aq_name
