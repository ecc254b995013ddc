"""Exceptions raised for invalid client or request configuration."""

from typing import Any


class ParamFetchError(ValueError):
    """Base class for configuration errors raised by paramfetch."""


class InvalidBaseUrlError(ParamFetchError):
    """Raised when a client is configured without a usable absolute base URL."""

    def __init__(self, base_url: Any, reason: str | None = None) -> None:
        message = f"Please provide a valid base_url (got {base_url!r})."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)
        self.base_url = base_url


class InvalidMethodError(ParamFetchError):
    """Raised when a method is outside the supported HTTP method set."""

    def __init__(self, method: Any) -> None:
        super().__init__(f'"{method}" is not a valid HTTP method.')
        self.method = method
