# -*- coding: utf-8 -*-
"""
Tests for SessionManager.
"""

import pytest

from okx_client.models import ConnectionConfig
from okx_client.session_manager import SessionManager, default_headers

from conftest import TEST_API_KEY, TEST_API_SECRET, TEST_PASSPHRASE


class TestSessionManager:
    """Test session lifecycle."""

    @pytest.mark.asyncio
    async def test_reuses_open_session(self, connection_config):
        manager = SessionManager(connection_config)
        try:
            first = await manager.create_session()
            second = await manager.create_session()
            assert first is second
            assert first.timeout.total == connection_config.timeout
        finally:
            await manager.close_session()

    @pytest.mark.asyncio
    async def test_close_session(self, connection_config):
        manager = SessionManager(connection_config)
        session = await manager.create_session()

        await manager.close_session()

        assert session.closed
        assert manager.session is None

    @pytest.mark.asyncio
    async def test_recreates_session_after_close(self, connection_config):
        manager = SessionManager(connection_config)
        first = await manager.create_session()
        await manager.close_session()

        second = await manager.create_session()
        try:
            assert second is not first
            assert not second.closed
        finally:
            await manager.close_session()


class TestDefaultHeaders:
    """Test headers shared by every request."""

    def test_live_trading_has_no_simulation_flag(self, connection_config):
        headers = default_headers(connection_config)
        assert headers["Content-Type"] == "application/json"
        assert "x-simulated-trading" not in headers

    @pytest.mark.asyncio
    async def test_demo_trading_session_sends_simulation_flag(self):
        config = ConnectionConfig(
            api_key=TEST_API_KEY,
            api_secret=TEST_API_SECRET,
            passphrase=TEST_PASSPHRASE,
            simulation=True,
        )
        manager = SessionManager(config)
        try:
            session = await manager.create_session()
            assert session.headers.get("x-simulated-trading") == "1"
            assert session.headers.get("Content-Type") == "application/json"
        finally:
            await manager.close_session()
