"""Data models for the Panasonic Eolia client."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from enum import StrEnum
from typing import Any

from .const import BASE_URL, DEFAULT_TIMEOUT, OPERATION_TOKEN, USER_AGENT
from .errors import EoliaApiClientError


class SessionState(StrEnum):
    """Authentication state of an Eolia session."""

    UNAUTHENTICATED = "unauthenticated"
    AUTHENTICATED = "authenticated"


@dataclass(frozen=True)
class EoliaConfig:
    """Connection settings for an Eolia session.

    Attributes:
        user_id: Account user id used for automatic re-authentication.
        password: Account password used for automatic re-authentication.
        host: Base URL of the Eolia service.
        user_agent: Value of the identifying User-Agent header.
        session_token: Previously captured session cookie to start with.
        timeout: Per-call timeout in seconds.

    """

    user_id: str | None = None
    password: str | None = field(default=None, repr=False)
    host: str = BASE_URL
    user_agent: str = USER_AGENT
    session_token: str | None = field(default=None, repr=False)
    timeout: float = DEFAULT_TIMEOUT

    @property
    def has_credentials(self) -> bool:
        """Return True if both user id and password are configured."""
        return bool(self.user_id and self.password)


def _require_mapping(data: Any, kind: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        error_msg = f"Unexpected {kind} payload: expected an object"
        raise EoliaApiClientError(error_msg)
    return data


@dataclass(frozen=True)
class DeviceInfo:
    """Identity of an air conditioner as listed by the devices endpoint."""

    appliance_id: str
    product_code: str
    nickname: str | None = None
    appliance_type: str | None = None
    product_name: str | None = None
    point_code: str | None = None
    raw: Mapping[str, Any] = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_dict(cls, data: Any) -> DeviceInfo:
        """Build a DeviceInfo from an ``ac_list`` entry.

        Raises:
            EoliaApiClientError: If the entry is not an object or lacks
                ``appliance_id`` or ``product_code``.

        """
        record = _require_mapping(data, "device")
        missing = [key for key in ("appliance_id", "product_code") if key not in record]
        if missing:
            error_msg = f"Device payload missing fields: {', '.join(missing)}"
            raise EoliaApiClientError(error_msg)

        return cls(
            appliance_id=record["appliance_id"],
            product_code=record["product_code"],
            nickname=record.get("nickname"),
            appliance_type=record.get("appliance_type"),
            product_name=record.get("product_name"),
            point_code=record.get("point_code"),
            raw=dict(record),
        )


def _value_fields(cls: type) -> set[str]:
    return {f.name for f in fields(cls)} - {"extra", "reported"}


@dataclass(slots=True)
class DeviceStatus:
    """Operational values reported by the device status endpoint.

    Fields the model does not name are kept in ``extra`` and the names of
    the reported fields in ``reported``, so a full update sends back
    everything the server reported, explicit nulls included.
    """

    operation_status: Any = None
    operation_mode: str | None = None
    temperature: float | None = None
    wind_speed: int | None = None
    wind_direction: int | None = None
    timer_value: Any = None
    inside_humidity: float | None = None
    inside_temp: float | None = None
    outside_temp: float | None = None
    operation_priority: Any = None
    device_errstatus: Any = None
    airquality: Any = None
    nanoex: Any = None
    aq_value: Any = None
    aq_name: Any = None
    extra: dict[str, Any] = field(default_factory=dict)
    reported: set[str] = field(default_factory=set, repr=False)

    @classmethod
    def from_dict(cls, data: Any) -> DeviceStatus:
        """Build a DeviceStatus from a status payload.

        The operation token echoed back by an update is dropped.

        Raises:
            EoliaApiClientError: If the payload is not an object.

        """
        record = _require_mapping(data, "status")
        known = _value_fields(cls)
        values = {key: value for key, value in record.items() if key in known}
        extra = {
            key: value
            for key, value in record.items()
            if key not in known and key != OPERATION_TOKEN
        }
        return cls(**values, extra=extra, reported=set(values))

    def set_value(self, name: str, value: Any) -> None:
        """Set a named field and mark it for submission."""
        if name not in _value_fields(type(self)):
            error_msg = f"Unknown status field: {name}"
            raise AttributeError(error_msg)
        setattr(self, name, value)
        self.reported.add(name)

    def to_dict(self) -> dict[str, Any]:
        """Return the full payload, named fields over extra ones.

        Named fields are sent when reported or set, even when None;
        fields never seen stay out unless they hold a value.
        """
        payload = dict(self.extra)
        for name in _value_fields(type(self)):
            value = getattr(self, name)
            if name in self.reported or value is not None:
                payload[name] = value
        return payload
