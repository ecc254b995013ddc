"""
Async fetch client with dynamic query parameters.

Each call is resolved against the client's ClientConfig and handed to an
httpx.AsyncClient. Responses and transport errors come back exactly as httpx
produces them.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from paramfetch.config import ClientConfig
from paramfetch.http_client import create_transport_client
from paramfetch.methods import HttpMethod
from paramfetch.params import UNSET, ParameterMap, Unset
from paramfetch.resolver import RequestDescriptor, RequestResolver
from paramfetch.settings import Settings

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FetchClient:
    """Pairs a ClientConfig with the AsyncClient requests are sent through."""

    config: ClientConfig
    _client: httpx.AsyncClient = field(default_factory=create_transport_client)
    _resolver: RequestResolver = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._resolver = RequestResolver(self.config)

    @classmethod
    def from_settings(cls, settings: Settings) -> "FetchClient":
        """Factory that builds the client from Settings."""
        config = ClientConfig(
            base_url=settings.base_url,  # type: ignore[arg-type]
            default_method=settings.default_method,  # type: ignore[arg-type]
        )
        return cls(config, create_transport_client(settings))

    @property
    def resolver(self) -> RequestResolver:
        return self._resolver

    async def aclose(self) -> None:
        """Close the underlying HTTP resources."""
        await self._client.aclose()

    async def __aenter__(self) -> "FetchClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def request(
        self,
        *,
        path: str = "/",
        method: HttpMethod | str | None = None,
        params: ParameterMap | None | Unset = UNSET,
        values: Mapping[str, Any] | None = None,
        transport_options: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        """
        Resolve and send a single request.

        ``params`` left out uses the client defaults, ``None`` sends no query
        parameters at all, and a mapping is merged over the defaults.
        ``transport_options`` are passed to ``httpx.AsyncClient.request``
        as keyword arguments.
        """
        descriptor = RequestDescriptor(
            path=path,
            method=method,
            params=params,
            values=values or {},
            transport_options=transport_options or {},
        )
        return await self.send(descriptor)

    async def send(self, descriptor: RequestDescriptor) -> httpx.Response:
        """Send a prebuilt descriptor."""
        url, options = self._resolver.resolve(descriptor)
        options = dict(options)
        method = options.pop("method")

        logger.debug("Dispatching request", extra={"method": method, "url": url})
        try:
            return await self._client.request(method, url, **options)
        except httpx.RequestError:
            logger.warning(
                "Request failed",
                extra={"method": method, "url": url},
                exc_info=True,
            )
            raise

    async def get(self, **kwargs: Any) -> httpx.Response:
        return await self.request(**{**kwargs, "method": HttpMethod.GET})

    async def head(self, **kwargs: Any) -> httpx.Response:
        return await self.request(**{**kwargs, "method": HttpMethod.HEAD})

    async def post(self, **kwargs: Any) -> httpx.Response:
        return await self.request(**{**kwargs, "method": HttpMethod.POST})

    async def put(self, **kwargs: Any) -> httpx.Response:
        return await self.request(**{**kwargs, "method": HttpMethod.PUT})

    async def delete(self, **kwargs: Any) -> httpx.Response:
        return await self.request(**{**kwargs, "method": HttpMethod.DELETE})

    async def connect(self, **kwargs: Any) -> httpx.Response:
        return await self.request(**{**kwargs, "method": HttpMethod.CONNECT})

    async def options(self, **kwargs: Any) -> httpx.Response:
        return await self.request(**{**kwargs, "method": HttpMethod.OPTIONS})

    async def trace(self, **kwargs: Any) -> httpx.Response:
        return await self.request(**{**kwargs, "method": HttpMethod.TRACE})

    async def patch(self, **kwargs: Any) -> httpx.Response:
        return await self.request(**{**kwargs, "method": HttpMethod.PATCH})


def create_fetch_client(
    base_url: str | httpx.URL,
    params: ParameterMap | None = None,
    default_method: HttpMethod | str = HttpMethod.GET,
    *,
    client: httpx.AsyncClient | None = None,
) -> FetchClient:
    """Validate the configuration and build a FetchClient around it."""
    config = ClientConfig(
        base_url=base_url,  # type: ignore[arg-type]
        params=params or {},
        default_method=default_method,  # type: ignore[arg-type]
    )
    if client is None:
        return FetchClient(config)
    return FetchClient(config, client)
