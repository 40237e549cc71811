from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from rest_framework.test import APIClient


@pytest.fixture
def user(django_user_model):
    return django_user_model.objects.create_user(username="alice", password="password123")


@pytest.fixture
def other_user(django_user_model):
    return django_user_model.objects.create_user(username="bob", password="password123")


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def client_for():
    def _make(user) -> APIClient:
        client = APIClient()
        client.force_authenticate(user=user)
        return client

    return _make


@pytest.fixture
def auth_client(client_for, user) -> APIClient:
    return client_for(user)


@pytest.fixture
def trade_payload() -> dict:
    return {
        "symbol": "tcs",
        "sector": "Technology",
        "status": "Running",
        "buy_price": 100,
        "qty": 10,
        "sl": 95,
        "target": 115,
        "buy_date": "2025-01-15",
        "reason": "Breakout above base",
        "tags": "breakout",
    }


@pytest.fixture
def ipo_payload() -> dict:
    return {
        "company_name": "Acme Tech",
        "year": "2024",
        "ipo_price": 100,
        "allotted": "Yes",
        "qty_allotted": 50,
        "listing_price": 140,
        "selling_price": 130,
        "status": "Sold on Listing",
    }


@pytest.fixture
def make_trade(user):
    from apps.trading.models import Trade

    def _make(owner=None, **overrides):
        fields = {
            "symbol": "INFY",
            "buy_price": Decimal("100"),
            "qty": Decimal("10"),
            "sl": Decimal("95"),
            "buy_date": date(2025, 1, 15),
        }
        fields.update(overrides)
        return Trade.objects.create(user=owner or user, **fields)

    return _make
