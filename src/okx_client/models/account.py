"""
Account-related models for OKX client.

Immutable data structures for balance, configuration and risk information.
Amounts stay decimal strings exactly as OKX transmits them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .base import WireModel, wire


class MarginMode(Enum):
    """Margin mode enumeration."""
    CROSS = "cross"
    ISOLATED = "isolated"
    CASH = "cash"


@dataclass(frozen=True)
class Balance(WireModel):
    """Per-currency balance detail."""
    ccy: str
    balance: str = wire("cashBal")
    available_balance: str = wire("availBal")
    frozen_balance: str = wire("frozenBal")
    liability: Optional[str] = wire("liab", default=None)
    available_equity: Optional[str] = wire("availEq", default=None)
    unrealized_pl: Optional[str] = wire("upl", default=None)


@dataclass(frozen=True)
class AccountBalanceInfo(WireModel):
    """Account-wide balance summary, USD denominated."""
    details: List[Balance]
    adj_eq: Optional[str] = wire("adjEq", default=None)  # adjusted / effective equity
    borrow_froz: Optional[str] = wire("borrowFroz", default=None)
    imr: Optional[str] = None  # initial margin requirement
    iso_eq: Optional[str] = wire("isoEq", default=None)
    mgn_ratio: Optional[str] = wire("mgnRatio", default=None)
    mmr: Optional[str] = None  # maintenance margin requirement
    notional_usd: Optional[str] = wire("notionalUsd", default=None)
    notional_usd_for_borrow: Optional[str] = wire("notionalUsdForBorrow", default=None)
    notional_usd_for_futures: Optional[str] = wire("notionalUsdForFutures", default=None)
    notional_usd_for_option: Optional[str] = wire("notionalUsdForOption", default=None)
    notional_usd_for_swap: Optional[str] = wire("notionalUsdForSwap", default=None)
    ord_froz: Optional[str] = wire("ordFroz", default=None)
    total_eq: Optional[str] = wire("totalEq", default=None)
    u_time: Optional[str] = wire("uTime", default=None)
    upl: Optional[str] = None


@dataclass(frozen=True)
class AccountConfig(WireModel):
    """Account configuration data structure."""
    account_id: str = wire("acctId")
    position_mode: str = wire("posMode")
    auto_loan: bool = wire("autoLoan")
    level: str
    margin_mode: MarginMode = wire("mgnMode")


@dataclass(frozen=True)
class AccountRisk(WireModel):
    """Account risk snapshot."""
    risk: str
    risk_level: str = wire("riskLvl")
    total_equity: str = wire("totalEq")
