"""Custom exceptions for the Panasonic Eolia client."""

from __future__ import annotations


class EoliaError(Exception):
    """Base exception for Eolia client errors."""


class EoliaApiClientError(EoliaError):
    """Exception raised for failed API requests and malformed responses."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class EoliaApiAuthError(EoliaApiClientError):
    """Exception raised for authentication errors."""


class InvalidArgumentError(EoliaError):
    """Raised when a local argument is malformed."""


class UnsupportedOperationError(EoliaError):
    """Raised when a device does not advertise a required capability."""
