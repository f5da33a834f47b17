"""Session-authenticated transport for the Eolia API.

This module wraps an ``httpx.AsyncClient`` so that every request carries
the session cookie and the request date header, the cookie is renewed from
``Set-Cookie`` responses, and an expired session is re-established by a
single login followed by a single retry of the failed request.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

import httpx
from httpx_retries import Retry, RetryTransport

from .const import DATE_FORMAT, DEFAULT_TERMINAL_TYPE, HEADER_DATE, LOGIN_PATH
from .errors import EoliaApiAuthError, EoliaApiClientError
from .models import EoliaConfig, SessionState

_LOGGER = logging.getLogger(__name__)

# HTTP status codes
HTTP_BAD_REQUEST = 400
HTTP_UNAUTHORIZED = 401


def create_headers(
    user_agent: str,
    now: datetime,
    session_token: str | None = None,
) -> dict[str, str]:
    """Create HTTP headers for Eolia API requests.

    Args:
        user_agent: Identifying client header value.
        now: Local time of the call, sent truncated to the minute.
        session_token: Optional session cookie to include in headers.

    Returns:
        Dictionary containing HTTP headers for API requests.

    """
    headers = {
        "User-Agent": user_agent,
        "Accept": "application/json",
        "Content-Type": "application/json; charset=UTF-8",
        "Accept-Language": "en-us",
        HEADER_DATE: now.strftime(DATE_FORMAT),
    }
    if session_token:
        headers["Cookie"] = session_token
    return headers


def create_login_body(
    user_id: str,
    password: str,
    terminal_type: int = DEFAULT_TERMINAL_TYPE,
    next_easy: bool = True,  # noqa: FBT001, FBT002
) -> dict[str, Any]:
    """Create the request body of a credential login."""
    return {
        "idpw": {
            "id": user_id,
            "pass": password,
            "terminal_type": terminal_type,
            "next_easy": next_easy,
        },
    }


def extract_session_token(response: httpx.Response) -> str | None:
    """Extract the session cookie from the first Set-Cookie header.

    Returns:
        The ``name=value`` part before the first semicolon, or None if the
        response sets no cookie.

    """
    cookies = response.headers.get_list("set-cookie")
    if not cookies:
        return None
    return cookies[0].split(";")[0].strip() or None


def is_http_error(status: int) -> bool:
    """Check if HTTP status code indicates an error.

    Args:
        status: HTTP status code to check.

    Returns:
        True if status code is 400 or higher, False otherwise.

    """
    return status >= HTTP_BAD_REQUEST


def is_auth_error(status: int) -> bool:
    """Check if HTTP status code indicates authentication error.

    Args:
        status: HTTP status code to check.

    Returns:
        True if status code is 401, False otherwise.

    """
    return status == HTTP_UNAUTHORIZED


def validate_response(response: httpx.Response) -> httpx.Response:
    """Raise the matching client error for a failed HTTP response.

    Raises:
        EoliaApiAuthError: If the status is 401.
        EoliaApiClientError: If the status is any other error.

    """
    status = response.status_code
    if not is_http_error(status):
        return response

    if is_auth_error(status):
        auth_error = "Authentication error"
        raise EoliaApiAuthError(auth_error, status_code=status)

    client_error = f"Request failed: {status}"
    raise EoliaApiClientError(client_error, status_code=status)


def create_session_client(config: EoliaConfig) -> httpx.AsyncClient:
    """Create HTTP client with retry logic for the Eolia API.

    Args:
        config: Session configuration providing the timeout.

    Returns:
        Configured httpx AsyncClient with retry transport.

    """
    # Timeouts propagate to the caller instead of being resent.
    retry = Retry(
        total=3,
        backoff_factor=0.5,
        retry_on_exceptions=[httpx.ConnectError],
    )
    return httpx.AsyncClient(
        timeout=config.timeout,
        transport=RetryTransport(transport=httpx.AsyncHTTPTransport(), retry=retry),
    )


class EoliaSession:
    """HTTP transport holding the Eolia session cookie.

    The session starts ``UNAUTHENTICATED`` unless a cookie is passed through
    the configuration, and becomes ``AUTHENTICATED`` once any response sets a
    cookie. A 401, or a 400 to a request sent without a cookie, triggers one
    login with the configured credentials and one retry of the request.
    """

    def __init__(
        self,
        config: EoliaConfig,
        client: httpx.AsyncClient | None = None,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Initialize the session.

        Args:
            config: Session configuration.
            client: Optional HTTP client; one is created (and owned) if omitted.
            now: Clock used for the request date header.

        """
        self._config = config
        self._owns_client = client is None
        self._client = client if client is not None else create_session_client(config)
        self._now = now
        self._session_token = config.session_token

    @property
    def config(self) -> EoliaConfig:
        """Return the session configuration."""
        return self._config

    @property
    def session_token(self) -> str | None:
        """Return the current session cookie."""
        return self._session_token

    @property
    def state(self) -> SessionState:
        """Return the authentication state."""
        if self._session_token:
            return SessionState.AUTHENTICATED
        return SessionState.UNAUTHENTICATED

    async def close(self) -> None:
        """Close the underlying HTTP client if this session created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> EoliaSession:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def request(
        self,
        method: str,
        path: str,
        json: Any = None,
    ) -> httpx.Response:
        """Send a request, re-authenticating once if the session expired.

        Args:
            method: HTTP method.
            path: Request path relative to the configured host.
            json: Optional JSON body.

        Returns:
            The successful HTTP response.

        Raises:
            EoliaApiAuthError: If the request is still unauthorized.
            EoliaApiClientError: If the request fails with another status.
            httpx.RequestError: If the request cannot be sent or times out.

        """
        held_token = self._session_token
        response = await self._send(method, path, json)

        if self._should_reauthenticate(response.status_code, held_token):
            _LOGGER.warning(
                "%s %s returned %d, logging in again",
                method,
                path,
                response.status_code,
            )
            await self.authenticate()
            response = await self._send(method, path, json)

        return validate_response(response)

    async def authenticate(self) -> httpx.Response:
        """Log in with the configured user id and password.

        Raises:
            EoliaApiAuthError: If credentials are missing or rejected.
            EoliaApiClientError: If the login request fails.

        """
        if not self._config.has_credentials:
            error_msg = "User id and password are required to log in"
            raise EoliaApiAuthError(error_msg)

        _LOGGER.debug("Logging in to Eolia API")
        body = create_login_body(self._config.user_id, self._config.password)
        response = await self._send("POST", LOGIN_PATH, body)
        try:
            validate_response(response)
        except EoliaApiClientError as err:
            error_msg = f"Login failed: {response.status_code}"
            raise EoliaApiAuthError(error_msg, status_code=err.status_code) from err
        _LOGGER.info("Successfully logged in to Eolia API")
        return response

    def _should_reauthenticate(self, status: int, held_token: str | None) -> bool:
        if not self._config.has_credentials:
            return False
        if is_auth_error(status):
            return True
        return status == HTTP_BAD_REQUEST and not held_token

    async def _send(self, method: str, path: str, json: Any) -> httpx.Response:
        headers = create_headers(
            self._config.user_agent,
            self._now(),
            self._session_token,
        )
        _LOGGER.debug("Sending %s %s", method, path)
        response = await self._client.request(
            method,
            f"{self._config.host}{path}",
            json=json,
            headers=headers,
            timeout=self._config.timeout,
        )
        _LOGGER.debug("%s %s returned %d", method, path, response.status_code)

        token = extract_session_token(response)
        if token is not None:
            self._session_token = token
            if self._owns_client:
                # The Cookie header is managed here, not by the cookie jar.
                self._client.cookies.clear()
        return response
