"""
Position models for OKX client.
"""

from dataclasses import dataclass
from typing import Optional

from .base import WireModel, wire


@dataclass(frozen=True)
class Position(WireModel):
    """Open position as reported by the account positions endpoint."""
    inst_type: str = wire("instType")  # SPOT, MARGIN, SWAP, FUTURES, OPTION
    inst_id: str = wire("instId")
    pos_id: str = wire("posId")
    pos_side: str = wire("posSide")  # long, short or net
    pos: str
    margin_mode: str = wire("mgnMode")
    ccy: Optional[str] = None
    avail_pos: Optional[str] = wire("availPos", default=None)
    avg_px: Optional[str] = wire("avgPx", default=None)
    mark_px: Optional[str] = wire("markPx", default=None)
    upl: Optional[str] = None
    upl_ratio: Optional[str] = wire("uplRatio", default=None)
    lever: Optional[str] = None
    liq_px: Optional[str] = wire("liqPx", default=None)
    imr: Optional[str] = None
    margin: Optional[str] = None
    mgn_ratio: Optional[str] = wire("mgnRatio", default=None)
    mmr: Optional[str] = None
    notional_usd: Optional[str] = wire("notionalUsd", default=None)
    c_time: Optional[str] = wire("cTime", default=None)
    u_time: Optional[str] = wire("uTime", default=None)
