"""
paramfetch: an async fetch client with dynamic query parameters.

Default query parameters may be literals or callables evaluated against a
per-request Context; request-level parameters are merged over them.
"""

from paramfetch.client import FetchClient, create_fetch_client
from paramfetch.config import ClientConfig
from paramfetch.errors import InvalidBaseUrlError, InvalidMethodError, ParamFetchError
from paramfetch.methods import HttpMethod
from paramfetch.params import UNSET, Context, evaluate_param, merge_params
from paramfetch.resolver import RequestDescriptor, RequestResolver, ResolvedRequest
from paramfetch.settings import Settings

__all__ = [
    "UNSET",
    "ClientConfig",
    "Context",
    "FetchClient",
    "HttpMethod",
    "InvalidBaseUrlError",
    "InvalidMethodError",
    "ParamFetchError",
    "RequestDescriptor",
    "RequestResolver",
    "ResolvedRequest",
    "Settings",
    "create_fetch_client",
    "evaluate_param",
    "merge_params",
]
