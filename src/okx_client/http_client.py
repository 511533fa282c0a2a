"""
HTTP client for OKX API.

Signs each request, sends it through an aiohttp session, retries
retryable 5xx and connection failures when configured, and unwraps the
OKX {code, msg, data} envelope.
"""

import asyncio
import json
import logging
from typing import Any, Dict, Optional

import aiohttp
from aiohttp import ClientResponse, ClientSession

from .auth import ApiCredentials, OkxSigner
from .constants import SUCCESS_CODE
from .exceptions import (
    HttpClientClientError,
    HttpClientError,
    HttpServerError,
    OkxApiError,
    ResponseDecodeError,
    TransportError,
)
from .models.config import ConnectionConfig, RetryConfig

logger = logging.getLogger(__name__)


class HttpClient:
    """HTTP client specialized for OKX API interactions."""

    def __init__(
        self,
        config: ConnectionConfig,
        retry_config: Optional[RetryConfig] = None,
    ):
        """Initialize HTTP client with configuration."""
        self._config = config
        self._retry_config = retry_config or RetryConfig()
        self._signer = OkxSigner(
            ApiCredentials(config.api_key, config.api_secret, config.passphrase)
        )

    async def request(
        self,
        session: ClientSession,
        method: str,
        request_path: str,
        body: str = "",
    ) -> Any:
        """Execute a signed request and return the ``data`` of the envelope.

        ``request_path`` must already carry its query string; it is signed
        verbatim, as is ``body``.
        """
        url = f"{self._config.base_url}{request_path}"
        headers = self._prepare_headers(method, request_path, body)

        logger.debug(f"{method.upper()} {request_path}")
        envelope = await self._execute_with_retry(session, method, url, body, headers)
        return self._unwrap_envelope(envelope)

    def _prepare_headers(self, method: str, request_path: str, body: str) -> Dict[str, str]:
        """Prepare signed request headers."""
        return self._signer.get_auth_headers(method, request_path, body)

    async def _execute_with_retry(
        self,
        session: ClientSession,
        method: str,
        url: str,
        body: str,
        headers: Dict[str, str],
    ) -> Any:
        """Execute request with retry logic."""
        last_exception: Optional[Exception] = None

        for attempt in range(self._retry_config.max_retries + 1):
            try:
                request_kwargs = {
                    "method": method.upper(),
                    "url": url,
                    "headers": headers,
                }
                if body:
                    request_kwargs["data"] = body

                async with session.request(**request_kwargs) as response:
                    # retryable 5xx bodies may be gateway HTML; keep them raw
                    if response.status in self._retry_config.retry_on_status:
                        raw_text = await response.text()
                        raise HttpServerError(
                            f"Server error {response.status}: {raw_text[:200]}",
                            status_code=response.status,
                            response_data=raw_text,
                        )

                    response_data = await self._process_response(response)

                    if response.status < 400:
                        return response_data

                    # Don't retry on client errors (4xx)
                    if 400 <= response.status < 500:
                        if response.status == 401:
                            raise HttpClientClientError(
                                f"Authentication failed: Please check OKX_API_KEY, "
                                f"OKX_API_SECRET and OKX_PASSPHRASE. "
                                f"Server response: {response_data}",
                                status_code=response.status,
                                response_data=response_data,
                            )

                        raise HttpClientClientError(
                            f"Client error {response.status}: {response_data}",
                            status_code=response.status,
                            response_data=response_data,
                        )

                    raise HttpClientError(
                        f"HTTP {response.status}: {response_data}",
                        status_code=response.status,
                        response_data=response_data,
                    )

            except (HttpServerError, aiohttp.ClientError, asyncio.TimeoutError) as e:
                last_exception = e

                if attempt == self._retry_config.max_retries:
                    break

                delay = self._retry_config.retry_delay * (
                    self._retry_config.backoff_factor ** attempt
                )
                logger.warning(
                    f"Request to {url} failed ({e!r}), retrying in {delay:.2f}s "
                    f"(attempt {attempt + 1}/{self._retry_config.max_retries})"
                )
                await asyncio.sleep(delay)

        if isinstance(last_exception, HttpServerError):
            raise last_exception
        raise TransportError(
            f"Request to {url} failed: {last_exception!r}"
        ) from last_exception

    async def _process_response(self, response: ClientResponse) -> Any:
        """Process HTTP response and return decoded JSON."""
        response_text = await response.text()

        if not response_text:
            raise ResponseDecodeError(
                f"Empty response body (Status {response.status})",
                status_code=response.status,
            )

        try:
            return json.loads(response_text)
        except json.JSONDecodeError as e:
            raise ResponseDecodeError(
                f"Invalid JSON response (Status {response.status}): {response_text[:200]}",
                status_code=response.status,
            ) from e

    def _unwrap_envelope(self, envelope: Any) -> Any:
        """Check the ``{code, msg, data}`` envelope and return ``data``."""
        if not isinstance(envelope, dict) or "code" not in envelope:
            raise ResponseDecodeError(
                f"Unexpected response envelope: {str(envelope)[:200]}",
                response_data=envelope,
            )

        code = str(envelope.get("code"))
        if code != SUCCESS_CODE:
            raise OkxApiError(
                code,
                envelope.get("msg", ""),
                status_code=200,
                response_data=envelope,
            )

        return envelope.get("data", [])
