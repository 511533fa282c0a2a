# -*- coding: utf-8 -*-
"""
Shared fixtures and utilities for testing OKX client.
"""

import json
from typing import Any, Dict, List
from unittest.mock import AsyncMock, MagicMock, Mock

import aiohttp
import pytest

from okx_client.account_api import OkxAccount
from okx_client.client import OkxClient
from okx_client.models import ConnectionConfig, RetryConfig


TEST_API_KEY = "0f1e2d3c-4b5a-6978-8796-a5b4c3d2e1f0"
TEST_API_SECRET = "A1B2C3D4E5F60718293A4B5C6D7E8F90"
TEST_PASSPHRASE = "test-passphrase"


# Configuration fixtures
@pytest.fixture
def connection_config() -> ConnectionConfig:
    """Valid connection configuration."""
    return ConnectionConfig(
        api_key=TEST_API_KEY,
        api_secret=TEST_API_SECRET,
        passphrase=TEST_PASSPHRASE,
        base_url="https://test.okx.example.com",
        timeout=10.0,
    )


@pytest.fixture
def retry_config() -> RetryConfig:
    """Retry configuration without sleeping between attempts."""
    return RetryConfig(max_retries=2, retry_delay=0.0)


@pytest.fixture
def okx_client(connection_config) -> OkxClient:
    """Create a fresh OkxClient instance for testing."""
    return OkxClient(connection_config)


@pytest.fixture
def mock_client() -> Mock:
    """OkxClient stand-in whose send_request is an AsyncMock."""
    client = Mock(spec=OkxClient)
    client.send_request = AsyncMock(return_value=[])
    client.close = AsyncMock()
    return client


@pytest.fixture
def account(mock_client) -> OkxAccount:
    """Account API bound to the mocked client."""
    return OkxAccount(mock_client)


# Mock data fixtures
@pytest.fixture
def balance_detail_data() -> Dict[str, Any]:
    """Single currency balance detail with every optional field present."""
    return {
        "ccy": "USDT",
        "cashBal": "1000.25",
        "availBal": "900.25",
        "frozenBal": "100",
        "liab": "0",
        "availEq": "950.1",
        "upl": "-3.2",
    }


@pytest.fixture
def balance_response_data() -> List[Dict[str, Any]]:
    """Mock account balance response data (envelope ``data``)."""
    return [
        {
            "adjEq": "10679.68",
            "borrowFroz": "",
            "details": [
                {
                    "ccy": "BTC",
                    "cashBal": "1.5",
                    "availBal": "1.2",
                    "frozenBal": "0.3",
                }
            ],
            "imr": "3372.2942371050594",
            "isoEq": "0",
            "mgnRatio": "70375.35408747017",
            "mmr": "134.89176948420236",
            "notionalUsd": "33722.9423710506",
            "ordFroz": "0",
            "totalEq": "11172.992503337134",
            "uTime": "1705474164160",
            "upl": "-7.665",
        }
    ]


@pytest.fixture
def positions_response_data() -> List[Dict[str, Any]]:
    """Mock positions response data."""
    return [
        {
            "instType": "SWAP",
            "instId": "BTC-USDT-SWAP",
            "posId": "307173036051017730",
            "posSide": "long",
            "pos": "10",
            "mgnMode": "cross",
            "ccy": "USDT",
            "availPos": "10",
            "avgPx": "42000.1",
            "markPx": "42100.5",
            "upl": "10.04",
            "uplRatio": "0.0238",
            "lever": "5",
            "liqPx": "35000",
            "cTime": "1619507758793",
            "uTime": "1619507761462",
        }
    ]


@pytest.fixture
def config_response_data() -> List[Dict[str, Any]]:
    """Mock account configuration response data."""
    return [
        {
            "acctId": "44626223",
            "posMode": "long_short_mode",
            "autoLoan": False,
            "level": "Lv1",
            "mgnMode": "cross",
        }
    ]


@pytest.fixture
def risk_response_data() -> List[Dict[str, Any]]:
    """Mock account risk response data."""
    return [{"risk": "0.05", "riskLvl": "1", "totalEq": "11172.99"}]


# HTTP fixtures
def make_response(payload: Any, status: int = 200) -> Mock:
    """Build a mocked aiohttp response returning ``payload`` as text."""
    response = Mock()
    response.status = status
    text = payload if isinstance(payload, str) else json.dumps(payload)
    response.text = AsyncMock(return_value=text)
    return response


def make_envelope(data: Any, code: str = "0", msg: str = "") -> Dict[str, Any]:
    """Wrap ``data`` in the OKX response envelope."""
    return {"code": code, "msg": msg, "data": data}


@pytest.fixture
def mock_client_session():
    """Mock aiohttp ClientSession whose request() is an async context manager."""
    session = MagicMock(spec=aiohttp.ClientSession)
    session.request = MagicMock()
    session.close = AsyncMock()
    session.closed = False

    def respond(*responses):
        if len(responses) == 1:
            session.request.return_value.__aenter__.return_value = responses[0]
            session.request.return_value.__aexit__.return_value = False
        else:
            contexts = []
            for response in responses:
                ctx = MagicMock()
                ctx.__aenter__.return_value = response
                ctx.__aexit__.return_value = False
                contexts.append(ctx)
            session.request.side_effect = contexts

    session.respond = respond
    return session
