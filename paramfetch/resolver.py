"""
Turns a per-call request description into a final URL and transport options.

Resolution is synchronous and touches no shared state: the client
configuration is read-only and every call works on its own descriptor.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Mapping, NamedTuple
from urllib.parse import quote

from paramfetch.config import ClientConfig
from paramfetch.methods import HttpMethod, parse_method
from paramfetch.params import (
    UNSET,
    Context,
    ParameterMap,
    Unset,
    effective_params,
    evaluate_param,
    render_query_value,
)

logger = logging.getLogger(__name__)

_SLASH_RUN = re.compile(r"/+")
_PATH_SAFE = "/:@!$&'()*+,;=%"


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """Per-call request specification."""

    path: str = "/"
    method: HttpMethod | str | None = None
    params: ParameterMap | None | Unset = UNSET
    values: Mapping[str, Any] = field(default_factory=dict)
    transport_options: Mapping[str, Any] = field(default_factory=dict)


class ResolvedRequest(NamedTuple):
    url: str
    options: dict[str, Any]

    @property
    def method(self) -> str:
        return self.options["method"]


def join_path(base_path: str, path: str) -> str:
    """Append ``path`` to ``base_path`` and collapse repeated slashes.

    ``base_path`` must already be percent-encoded. ``path`` is encoded here,
    so ``?`` and ``#`` become part of the path instead of ending it, while
    existing ``%xx`` escapes are kept. A path made only of slashes leaves the
    base path as it is, so the default ``"/"`` targets the base URL itself.
    """
    if not path.strip("/"):
        return _SLASH_RUN.sub("/", base_path) or "/"
    return _SLASH_RUN.sub("/", base_path + quote(path, safe=_PATH_SAFE))


class RequestResolver:
    """Applies a ClientConfig to request descriptors."""

    def __init__(self, config: ClientConfig) -> None:
        self._config = config

    @property
    def config(self) -> ClientConfig:
        return self._config

    def resolve(self, descriptor: RequestDescriptor) -> ResolvedRequest:
        params = effective_params(self._config.params, descriptor.params)
        method = parse_method(
            self._config.default_method if descriptor.method is None else descriptor.method
        )

        # raw_path keeps the base URL's escapes; base.path would decode %2F.
        base = self._config.base_url
        base_path, _, base_query = base.raw_path.decode("ascii").partition("?")
        raw_path = join_path(base_path, descriptor.path)
        if base_query:
            raw_path = f"{raw_path}?{base_query}"
        url = base.copy_with(raw_path=raw_path.encode("ascii"))

        ctx = Context(url=str(url), values=descriptor.values)
        for key, value in params.items():
            url = url.copy_set_param(key, render_query_value(evaluate_param(value, ctx)))

        options = {**descriptor.transport_options, "method": method.value}
        logger.debug(
            "Resolved request",
            extra={"method": method.value, "url": str(url), "params": list(params)},
        )
        return ResolvedRequest(str(url), options)
