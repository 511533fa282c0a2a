"""
Session management for OKX client.

Owns the single pooled aiohttp session used for every OKX request. Headers
shared by all requests (JSON content type, and the demo-trading flag when
the client targets OKX demo trading) are set on the session, so per-request
headers only carry the signature.
"""

import logging
from typing import Dict, Optional

import aiohttp

from .models.config import ConnectionConfig

logger = logging.getLogger(__name__)

SIMULATED_TRADING_HEADER = "x-simulated-trading"


def default_headers(config: ConnectionConfig) -> Dict[str, str]:
    """Headers sent with every request for ``config``."""
    headers = {
        "User-Agent": "okx-account-client/1.0",
        "Accept": "application/json",
        "Content-Type": "application/json",
    }
    if config.simulation:
        headers[SIMULATED_TRADING_HEADER] = "1"
    return headers


class SessionManager:
    """Lazily creates and closes the shared OKX HTTP session."""

    def __init__(self, config: ConnectionConfig):
        self._config = config
        self._session: Optional[aiohttp.ClientSession] = None

    async def create_session(self) -> aiohttp.ClientSession:
        """Return the open session, creating it on first use or after close."""
        if self._session is not None and not self._session.closed:
            return self._session

        self._session = aiohttp.ClientSession(
            connector=aiohttp.TCPConnector(limit=100, limit_per_host=20, ttl_dns_cache=300),
            timeout=aiohttp.ClientTimeout(total=self._config.timeout),
            headers=default_headers(self._config),
        )
        logger.debug(
            f"Created HTTP session for {self._config.base_url}"
            f"{' (demo trading)' if self._config.simulation else ''}"
        )

        return self._session

    async def close_session(self) -> None:
        """Close HTTP session and cleanup resources."""
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    @property
    def session(self) -> Optional[aiohttp.ClientSession]:
        """Get current session without creating one."""
        return self._session
