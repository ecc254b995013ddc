import httpx
import pytest

from paramfetch import Settings
from paramfetch.http_client import DEFAULT_TIMEOUT, create_transport_client


@pytest.mark.anyio
async def test_transport_client_uses_settings_timeout() -> None:
    client = create_transport_client(Settings(base_url="https://api.example.com", timeout=5.0))
    assert client.timeout == httpx.Timeout(5.0)
    await client.aclose()


@pytest.mark.anyio
async def test_transport_client_default_timeout() -> None:
    client = create_transport_client()
    assert client.timeout == httpx.Timeout(DEFAULT_TIMEOUT)
    await client.aclose()
