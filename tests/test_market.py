from __future__ import annotations

import pytest

from apps.market.symbols import search_symbols


def test_prefix_and_name_match() -> None:
    symbols = [s["symbol"] for s in search_symbols("tata")]

    assert symbols == ["TCS", "TATAMOTORS", "TATASTEEL"]


def test_name_substring_match() -> None:
    symbols = [s["symbol"] for s in search_symbols("bank")]

    assert "HDFCBANK" in symbols
    assert "SBIN" in symbols


def test_empty_query() -> None:
    assert search_symbols("   ") == []


def test_results_capped() -> None:
    assert len(search_symbols("L")) <= 8


@pytest.mark.django_db
def test_search_endpoint(auth_client, api_client) -> None:
    assert api_client.get("/api/market/search-symbols", {"q": "INF"}).status_code == 401

    body = auth_client.get("/api/market/search-symbols", {"q": "INF"}).json()
    assert body[0]["symbol"] == "INFY"
