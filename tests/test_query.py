# -*- coding: utf-8 -*-
"""
Tests for query-string building.
"""

from okx_client.models import MarginMode
from okx_client.query import build_query, with_query


class TestBuildQuery:
    """Test build_query."""

    def test_empty_when_nothing_supplied(self):
        assert build_query([]) == ""
        assert build_query([("instType", None), ("instId", None)]) == ""

    def test_keeps_caller_order(self):
        query = build_query([("posId", "1"), ("instType", "SWAP"), ("instId", "BTC-USDT-SWAP")])
        assert query == "?posId=1&instType=SWAP&instId=BTC-USDT-SWAP"

    def test_skips_none_values_only(self):
        assert build_query([("ccy", ""), ("px", None), ("limit", 0)]) == "?ccy=&limit=0"

    def test_escapes_reserved_characters(self):
        assert build_query([("ccy", "BTC,ETH"), ("note", "a b&c")]) == "?ccy=BTC%2CETH&note=a%20b%26c"

    def test_formats_enums_and_booleans(self):
        assert build_query([("mgnMode", MarginMode.ISOLATED), ("reduceOnly", True)]) == (
            "?mgnMode=isolated&reduceOnly=true"
        )


class TestWithQuery:
    """Test with_query."""

    def test_appends_to_path(self):
        assert with_query("/api/v5/account/bills", [("limit", 10)]) == "/api/v5/account/bills?limit=10"

    def test_leaves_path_untouched(self):
        assert with_query("/api/v5/account/bills", [("limit", None)]) == "/api/v5/account/bills"
