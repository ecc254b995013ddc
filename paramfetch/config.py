"""Client-level defaults shared by every request issued through a client."""

from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from paramfetch.errors import InvalidBaseUrlError
from paramfetch.methods import HttpMethod, parse_method
from paramfetch.params import ParamValue, freeze_params


def _parse_base_url(base_url: Any) -> httpx.URL:
    if not isinstance(base_url, (str, httpx.URL)):
        raise InvalidBaseUrlError(base_url)
    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as exc:
        raise InvalidBaseUrlError(base_url, str(exc)) from exc
    if not url.is_absolute_url:
        raise InvalidBaseUrlError(base_url, "An absolute URL with scheme and host is required.")
    return url


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """
    Immutable base configuration: base URL, default params and default method.

    ``base_url`` accepts a string or an ``httpx.URL`` and is stored parsed.
    ``params`` is copied into a read-only mapping so later changes to the
    caller's dict do not leak into the client.
    """

    base_url: httpx.URL
    params: Mapping[str, ParamValue] = field(default_factory=dict)
    default_method: HttpMethod = HttpMethod.GET

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", _parse_base_url(self.base_url))
        object.__setattr__(self, "default_method", parse_method(self.default_method))
        object.__setattr__(self, "params", freeze_params(self.params))
