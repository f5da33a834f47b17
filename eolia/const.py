"""Constants for the Panasonic Eolia client.

This module contains the API endpoint, request paths, default headers
and the value ranges enforced on writable device fields.
"""

BASE_URL = "https://app.rac.apws.panasonic.com"
API_PREFIX = "/eolia/v2"
USER_AGENT = "eolia-client/1.0"

DEFAULT_TIMEOUT = 10.0

LOGIN_PATH = f"{API_PREFIX}/auth/login"
LOGOUT_PATH = f"{API_PREFIX}/auth/logout"
DEVICES_PATH = f"{API_PREFIX}/devices"
DEVICE_STATUS_PATH = f"{API_PREFIX}/devices/{{device_id}}/status"
PRODUCT_FUNCTIONS_PATH = f"{API_PREFIX}/products/{{product_code}}/functions"

HEADER_DATE = "X-Eolia-Date"
DATE_FORMAT = "%Y-%m-%dT%H:%M"

DEFAULT_TERMINAL_TYPE = 3

OPERATION_TOKEN = "operation_token"  # noqa: S105

TEMPERATURE_MIN = 16
TEMPERATURE_MAX = 30
WIND_MIN = 0
WIND_MAX = 5

HUMIDITY_UNAVAILABLE = 999
