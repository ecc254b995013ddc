"""Supported HTTP methods."""

from enum import Enum
from typing import Any

from paramfetch.errors import InvalidMethodError


class HttpMethod(str, Enum):
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    PATCH = "PATCH"

    def __str__(self) -> str:
        return self.value


def parse_method(method: Any) -> HttpMethod:
    """Return the matching HttpMethod or raise InvalidMethodError.

    Matching is exact: lowercase names such as ``"get"`` are rejected.
    """
    if isinstance(method, HttpMethod):
        return method
    if not isinstance(method, str):
        raise InvalidMethodError(method)
    try:
        return HttpMethod(method)
    except ValueError as exc:
        raise InvalidMethodError(method) from exc
