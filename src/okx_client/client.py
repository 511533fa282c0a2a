"""
OKX Client - shared network client.

This module provides the OkxClient class that every API façade delegates
to. It owns the HTTP session, signs requests, unwraps the response
envelope and records request metrics:
- Data models are immutable structures in models/
- HTTP operations are handled by http_client.py
- Session management is handled by session_manager.py
- Request metrics are tracked by monitoring.py
"""

import asyncio
import logging
import os
from typing import Any, Optional

from dotenv import load_dotenv

from .constants import (
    DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_RETRY_DELAY,
    DEFAULT_MAX_RETRIES, SUCCESS_STATUS_CODE, ERROR_STATUS_CODE
)
from .http_client import HttpClient
from .models import ConnectionConfig, RetryConfig
from .monitoring import PerformanceMonitor, Statistics
from .session_manager import SessionManager

load_dotenv()
logger = logging.getLogger(__name__)

_TRUTHY = ("1", "true", "yes", "on")


class OkxClient:
    """
    Shared OKX REST client.

    Stateless apart from the pooled HTTP session, so concurrent calls need
    no coordination.
    """

    def __init__(
        self,
        config: ConnectionConfig,
        retry_config: Optional[RetryConfig] = None,
    ):
        """Initialize OKX client with configuration."""
        self._config = config
        self._session_manager = SessionManager(config)
        self._http_client = HttpClient(config, retry_config)
        self._monitor = PerformanceMonitor()
        self._closed = False

    @classmethod
    def from_env(cls) -> "OkxClient":
        """Create client from environment variables.

        Reads OKX_API_KEY, OKX_API_SECRET and OKX_PASSPHRASE, plus the
        optional OKX_BASE_URL and OKX_SIMULATED.

        Raises:
            ValueError: If a credential is missing
        """
        config = ConnectionConfig(
            api_key=os.getenv("OKX_API_KEY", ""),
            api_secret=os.getenv("OKX_API_SECRET", ""),
            passphrase=os.getenv("OKX_PASSPHRASE", ""),
            base_url=os.getenv("OKX_BASE_URL", DEFAULT_BASE_URL),
            simulation=os.getenv("OKX_SIMULATED", "").strip().lower() in _TRUTHY,
        )

        return cls(config)

    @property
    def config(self) -> ConnectionConfig:
        return self._config

    async def send_request(self, method: str, path: str, body: str = "") -> Any:
        """Send one signed request and return the envelope ``data``.

        Args:
            method: HTTP method
            path: Request path including any query string
            body: JSON text for POST requests, empty otherwise

        Raises:
            RuntimeError: If the client has been closed
            OkxError: On transport, decoding or exchange-reported failure
        """
        if self._closed:
            raise RuntimeError("Client is closed")

        loop = asyncio.get_running_loop()
        start_time = loop.time()
        session = await self._session_manager.create_session()

        try:
            result = await self._http_client.request(session, method, path, body)
        except Exception as e:
            duration_ms = (loop.time() - start_time) * 1000
            status_code = getattr(e, "status_code", None) or ERROR_STATUS_CODE
            if status_code < 400:
                # exchange errors arrive with HTTP 200
                status_code = ERROR_STATUS_CODE
            self._monitor.record_request(path, method, status_code, duration_ms)
            raise

        duration_ms = (loop.time() - start_time) * 1000
        self._monitor.record_request(path, method, SUCCESS_STATUS_CODE, duration_ms)
        return result

    def get_statistics(self) -> Statistics:
        """Get performance statistics."""
        return self._monitor.statistics

    @property
    def monitor(self) -> PerformanceMonitor:
        return self._monitor

    @property
    def closed(self) -> bool:
        return self._closed

    async def close(self) -> None:
        """Close client and cleanup resources."""
        if not self._closed:
            await self._session_manager.close_session()
            self._closed = True
            logger.info("OKX client closed")

    # Context manager support
    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()

    def __repr__(self) -> str:
        return f"OkxClient(base_url={self._config.base_url!r}, simulation={self._config.simulation})"


def create_okx_client(
    api_key: str,
    api_secret: str,
    passphrase: str,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
    simulation: bool = False,
    max_retries: int = DEFAULT_MAX_RETRIES,
    retry_delay: float = DEFAULT_RETRY_DELAY,
) -> OkxClient:
    """
    Factory function to create OKX client with common configuration.

    Args:
        api_key: API key for authentication
        api_secret: API secret for authentication
        passphrase: Passphrase chosen when the API key was created
        base_url: Base URL for API endpoints
        timeout: Request timeout in seconds
        simulation: Route requests to demo trading
        max_retries: Maximum number of retry attempts
        retry_delay: Initial delay between retries in seconds

    Returns:
        Configured OkxClient instance
    """
    config = ConnectionConfig(
        api_key=api_key,
        api_secret=api_secret,
        passphrase=passphrase,
        base_url=base_url,
        timeout=timeout,
        simulation=simulation,
    )

    retry_config = RetryConfig(
        max_retries=max_retries,
        retry_delay=retry_delay,
    )

    return OkxClient(config, retry_config)
