"""
Authentication and signing utilities for OKX API
"""

import base64
import hashlib
import hmac
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, Optional


@dataclass
class ApiCredentials:
    """Container for API credentials"""
    api_key: str
    api_secret: str
    passphrase: str


def iso_timestamp(now: Optional[datetime] = None) -> str:
    """Return an OKX request timestamp, e.g. ``2020-12-08T09:08:57.715Z``."""
    now = now or datetime.now(timezone.utc)
    return now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z"


class OkxSigner:
    """
    Handles request signing for OKX API authentication.

    The prehash string is ``timestamp + METHOD + request_path + body`` where
    request_path includes the query string and body is the exact JSON text
    sent (empty for GET). It is signed with HMAC-SHA256 and base64 encoded.
    """

    def __init__(self, credentials: ApiCredentials):
        """
        Initialize the signer with API credentials.

        Args:
            credentials: API key, secret and passphrase
        """
        self.credentials = credentials

    def sign(self, timestamp: str, method: str, request_path: str, body: str = "") -> str:
        """
        Generate the OK-ACCESS-SIGN value.

        Args:
            timestamp: ISO-8601 UTC timestamp with milliseconds
            method: HTTP method
            request_path: Path with query string, e.g. /api/v5/account/balance?ccy=BTC
            body: Raw request body

        Returns:
            Base64-encoded HMAC-SHA256 signature
        """
        message = f"{timestamp}{method.upper()}{request_path}{body}"
        digest = hmac.new(
            self.credentials.api_secret.encode("utf-8"),
            message.encode("utf-8"),
            hashlib.sha256,
        ).digest()
        return base64.b64encode(digest).decode("utf-8")

    def get_auth_headers(
        self,
        method: str,
        request_path: str,
        body: str = "",
        timestamp: Optional[str] = None,
    ) -> Dict[str, str]:
        """
        Get authentication headers for a single request.

        Returns:
            Dictionary containing the OK-ACCESS-* headers
        """
        timestamp = timestamp or iso_timestamp()
        return {
            "OK-ACCESS-KEY": self.credentials.api_key,
            "OK-ACCESS-SIGN": self.sign(timestamp, method, request_path, body),
            "OK-ACCESS-TIMESTAMP": timestamp,
            "OK-ACCESS-PASSPHRASE": self.credentials.passphrase,
        }
