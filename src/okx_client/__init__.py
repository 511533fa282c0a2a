"""
OKX Client - Python client for the OKX v5 account API.

This package provides an async client for querying balances, positions,
configuration, leverage, risk and bills of an OKX account.
"""

from .account_api import OkxAccount
from .client import OkxClient, create_okx_client
from .exceptions import (
    EmptyResponseError,
    HttpClientClientError,
    HttpClientError,
    HttpServerError,
    OkxApiError,
    OkxError,
    RequestEncodeError,
    ResponseDecodeError,
    TransportError,
)
from .models import (
    # Configuration
    ConnectionConfig,
    RetryConfig,
    # Account
    AccountBalanceInfo,
    AccountConfig,
    AccountRisk,
    Balance,
    MarginMode,
    Position,
)
from .query import build_query

__all__ = [
    # Main Clients
    "OkxAccount",
    "OkxClient",
    "create_okx_client",
    "ConnectionConfig",
    "RetryConfig",
    "AccountBalanceInfo",
    "AccountConfig",
    "AccountRisk",
    "Balance",
    "MarginMode",
    "Position",
    "build_query",
    # Exceptions
    "OkxError",
    "TransportError",
    "HttpClientError",
    "HttpServerError",
    "HttpClientClientError",
    "ResponseDecodeError",
    "EmptyResponseError",
    "RequestEncodeError",
    "OkxApiError",
]
