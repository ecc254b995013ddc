"""Environment-driven configuration for building a FetchClient."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True, slots=True)
class Settings:
    """Base URL, default method and httpx timeout read from FETCH_* variables."""

    base_url: str
    default_method: str = "GET"
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def load(cls) -> "Settings":
        """
        Load configuration from environment variables.

        Python-dotenv is used so a local .env file can provide the values
        without exporting them globally. Method validation is left to
        ClientConfig so both paths report the same error.
        """
        load_dotenv()

        base_url = os.getenv("FETCH_BASE_URL", "").strip()
        if not base_url:
            raise ValueError("FETCH_BASE_URL is required but was not provided.")

        default_method = os.getenv("FETCH_DEFAULT_METHOD", "").strip() or "GET"

        timeout_raw = os.getenv("FETCH_TIMEOUT", "").strip() or str(DEFAULT_TIMEOUT)
        try:
            timeout = float(timeout_raw)
        except ValueError as exc:
            raise ValueError("FETCH_TIMEOUT must be a numeric value.") from exc
        if timeout <= 0:
            raise ValueError("FETCH_TIMEOUT must be greater than zero.")

        return cls(
            base_url=base_url,
            default_method=default_method,
            timeout=timeout,
        )
