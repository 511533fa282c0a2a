"""
Configuration models for OKX client.

Immutable configuration structures following state-first design.
"""

from dataclasses import dataclass

from ..constants import DEFAULT_BASE_URL, DEFAULT_MAX_RETRIES, DEFAULT_RETRY_DELAY, DEFAULT_TIMEOUT


@dataclass(frozen=True)
class ConnectionConfig:
    """Configuration for OKX client connection."""
    api_key: str
    api_secret: str
    passphrase: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    simulation: bool = False  # demo trading, sent as x-simulated-trading

    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate_credentials()
        self._validate_endpoint()

    def _validate_credentials(self):
        """Validate that every credential is present."""
        if not self.api_key:
            raise ValueError("API key cannot be empty")

        if not self.api_secret:
            raise ValueError("API secret cannot be empty")

        if not self.passphrase:
            raise ValueError("API passphrase cannot be empty")

        if len(self.api_key) > 128 or len(self.api_secret) > 128:
            raise ValueError("API key or secret appears to be too long (expected max 128 characters)")

    def _validate_endpoint(self):
        """Validate base URL format and timeout."""
        if not self.base_url.startswith(("http://", "https://")) or "." not in self.base_url:
            raise ValueError(f"Base URL must be a valid HTTP/HTTPS URL, got {self.base_url!r}")

        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout}")


@dataclass(frozen=True)
class RetryConfig:
    """Configuration for request retry behavior.

    Retries are off by default so each call maps to exactly one request.
    """
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_delay: float = DEFAULT_RETRY_DELAY
    backoff_factor: float = 2.0
    retry_on_status: tuple[int, ...] = (500, 502, 503, 504)
