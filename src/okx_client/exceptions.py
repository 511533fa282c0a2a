"""
Exception hierarchy for OKX client.

Every failure surfaced by the client derives from OkxError so callers can
catch a single type and branch on the subclass when they care.
"""

from typing import Any, Optional


class OkxError(Exception):
    """Base exception for all OKX client errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Any] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_data = response_data


class TransportError(OkxError):
    """Network or HTTP layer failure."""
    pass


class HttpClientError(TransportError):
    """Request rejected with an unexpected HTTP status."""
    pass


class HttpServerError(HttpClientError):
    """Exception for server errors (5xx)."""
    pass


class HttpClientClientError(HttpClientError):
    """Exception for client errors (4xx)."""
    pass


class ResponseDecodeError(OkxError):
    """Response body could not be decoded into the expected shape."""
    pass


class EmptyResponseError(ResponseDecodeError):
    """Response data array was empty where a single record was expected."""
    pass


class RequestEncodeError(OkxError):
    """Request body could not be serialized to JSON."""
    pass


class OkxApiError(OkxError):
    """Business error reported inside the response envelope (code != "0")."""

    def __init__(
        self,
        code: str,
        msg: str,
        status_code: Optional[int] = None,
        response_data: Optional[Any] = None,
    ):
        super().__init__(
            f"OKX API error {code}: {msg}",
            status_code=status_code,
            response_data=response_data,
        )
        self.code = code
        self.msg = msg
