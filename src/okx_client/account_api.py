"""
OKX account API.

One coroutine per account endpoint. Each call builds the request path,
sends exactly one request through the shared OkxClient and maps the
result. Errors propagate unchanged.

Leverage, max-size and bills responses are returned as decoded JSON: their
shape varies by instrument type and they are passed through as-is.
"""

import json
from typing import Any, List, Optional, Union

from .client import OkxClient
from .constants import API_ACCOUNT_PATH
from .exceptions import EmptyResponseError, RequestEncodeError
from .models.account import AccountBalanceInfo, AccountConfig, AccountRisk, Balance, MarginMode
from .models.trade import Position
from .query import with_query


class OkxAccount:
    """OKX account API façade."""

    def __init__(self, client: OkxClient):
        """Create an account API bound to ``client``."""
        self._client = client

    @classmethod
    def from_env(cls) -> "OkxAccount":
        """Create an account API with a client configured from the environment."""
        return cls(OkxClient.from_env())

    @property
    def client(self) -> OkxClient:
        """The underlying shared client."""
        return self._client

    async def get_balance(self, ccy: Optional[str] = None) -> List[Balance]:
        """
        Get per-currency balances.

        Args:
            ccy: Currency filter, e.g. "BTC" or "BTC,ETH"

        Returns:
            Balance details of the account

        Raises:
            EmptyResponseError: If OKX returns no account record
        """
        path = with_query(f"{API_ACCOUNT_PATH}/balance", [("ccy", ccy)])
        data = await self._client.send_request("GET", path)

        accounts = AccountBalanceInfo.from_list(data)
        if not accounts:
            raise EmptyResponseError(
                "Balance response contained no account record",
                response_data=data,
            )
        return accounts[0].details

    async def get_positions(
        self,
        inst_type: Optional[str] = None,
        inst_id: Optional[str] = None,
        pos_id: Optional[str] = None,
    ) -> List[Position]:
        """Get open positions, optionally filtered."""
        path = with_query(
            f"{API_ACCOUNT_PATH}/positions",
            [("instType", inst_type), ("instId", inst_id), ("posId", pos_id)],
        )
        data = await self._client.send_request("GET", path)
        return Position.from_list(data)

    async def get_account_positions(
        self,
        inst_type: Optional[str] = None,
        inst_id: Optional[str] = None,
        pos_id: Optional[str] = None,
    ) -> List[Position]:
        """Alias of :meth:`get_positions`."""
        return await self.get_positions(inst_type, inst_id, pos_id)

    async def get_config(self) -> List[AccountConfig]:
        """Get account configuration."""
        data = await self._client.send_request("GET", f"{API_ACCOUNT_PATH}/config")
        return AccountConfig.from_list(data)

    async def set_leverage(
        self,
        inst_id: str,
        leverage: str,
        margin_mode: Union[MarginMode, str],
        pos_side: Optional[str] = None,
    ) -> Any:
        """
        Set leverage for an instrument.

        Args:
            inst_id: Instrument ID, e.g. "BTC-USDT-SWAP"
            leverage: Leverage as a decimal string
            margin_mode: cross or isolated
            pos_side: long or short, only for isolated margin in long/short mode

        Returns:
            Decoded response data
        """
        if isinstance(margin_mode, MarginMode):
            margin_mode = margin_mode.value

        body = {
            "instId": inst_id,
            "lever": leverage,
            "mgnMode": margin_mode,
        }
        if pos_side is not None:
            body["posSide"] = pos_side

        try:
            body_str = json.dumps(body)
        except (TypeError, ValueError) as e:
            raise RequestEncodeError(f"Cannot encode set-leverage body: {e}") from e

        return await self._client.send_request(
            "POST", f"{API_ACCOUNT_PATH}/set-leverage", body_str
        )

    async def get_max_size(
        self,
        inst_id: str,
        td_mode: str,
        ccy: Optional[str] = None,
        px: Optional[str] = None,
        leverage: Optional[str] = None,
    ) -> Any:
        """Get the maximum buy/sell size for an instrument."""
        path = with_query(
            f"{API_ACCOUNT_PATH}/max-size",
            [
                ("instId", inst_id),
                ("tdMode", td_mode),
                ("ccy", ccy),
                ("px", px),
                ("leverage", leverage),
            ],
        )
        return await self._client.send_request("GET", path)

    async def get_account_risk(self) -> List[AccountRisk]:
        """Get account risk state."""
        data = await self._client.send_request("GET", f"{API_ACCOUNT_PATH}/account-risk")
        return AccountRisk.from_list(data)

    async def get_bills(
        self,
        inst_type: Optional[str] = None,
        ccy: Optional[str] = None,
        margin_mode: Optional[str] = None,
        type_: Optional[str] = None,
        start_time: Optional[str] = None,
        end_time: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> Any:
        """
        Get account bills.

        ``start_time`` and ``end_time`` are millisecond timestamps sent as
        ``begin`` and ``end``.
        """
        path = with_query(
            f"{API_ACCOUNT_PATH}/bills",
            [
                ("instType", inst_type),
                ("ccy", ccy),
                ("mgnMode", margin_mode),
                ("type", type_),
                ("begin", start_time),
                ("end", end_time),
                ("limit", limit),
            ],
        )
        return await self._client.send_request("GET", path)

    async def close(self) -> None:
        """Close the underlying client."""
        await self._client.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
