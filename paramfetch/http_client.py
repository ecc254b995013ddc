"""Factory for the httpx client that performs the actual requests."""

import httpx

from paramfetch.settings import DEFAULT_TIMEOUT, Settings


def create_transport_client(settings: Settings | None = None) -> httpx.AsyncClient:
    """
    Build the AsyncClient requests are delegated to.

    No base_url is set on it: paramfetch always hands over absolute URLs.
    """
    timeout = settings.timeout if settings is not None else DEFAULT_TIMEOUT
    return httpx.AsyncClient(timeout=timeout)
