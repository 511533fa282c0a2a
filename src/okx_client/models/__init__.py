"""
Data models for OKX client.

This package contains all data structures used throughout the OKX client,
following the state-first principle with immutable data structures.
"""

from .base import WireModel
from .config import ConnectionConfig, RetryConfig
from .account import AccountBalanceInfo, AccountConfig, AccountRisk, Balance, MarginMode
from .trade import Position

__all__ = [
    "WireModel",
    # Configuration
    "ConnectionConfig",
    "RetryConfig",
    # Account
    "AccountBalanceInfo",
    "AccountConfig",
    "AccountRisk",
    "Balance",
    "MarginMode",
    # Positions
    "Position",
]
