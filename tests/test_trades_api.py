from __future__ import annotations

import pytest

from apps.trading.models import Trade

pytestmark = pytest.mark.django_db

URL = "/api/trades"


def test_requires_authentication(api_client) -> None:
    assert api_client.get(URL).status_code == 401
    assert api_client.post(URL, {"symbol": "TCS"}, format="json").status_code == 401
    assert api_client.delete(URL, {"id": 1}, format="json").status_code == 401


def test_create_assigns_server_id_and_deployed(auth_client, trade_payload) -> None:
    resp = auth_client.post(URL, trade_payload, format="json")

    assert resp.status_code == 201
    body = resp.json()
    assert isinstance(body["id"], int)
    assert body["symbol"] == "TCS"
    assert body["deployed"] == 1000
    assert body["metrics"]["sl_pct"] == pytest.approx(5.0)
    assert body["metrics"]["risk_reward"] == pytest.approx(3.0)


def test_client_supplied_deployed_is_ignored(auth_client, trade_payload) -> None:
    trade_payload["deployed"] = 1
    body = auth_client.post(URL, trade_payload, format="json").json()

    assert body["deployed"] == 1000


def test_list_is_scoped_and_newest_first(auth_client, make_trade, other_user) -> None:
    first = make_trade(symbol="INFY")
    second = make_trade(symbol="WIPRO")
    make_trade(owner=other_user, symbol="HAL")

    body = auth_client.get(URL).json()

    assert [t["id"] for t in body] == [second.id, first.id]


def test_upsert_replaces_record_entirely(auth_client, trade_payload) -> None:
    created = auth_client.post(URL, trade_payload, format="json").json()

    replacement = {
        "id": created["id"],
        "symbol": "TCS",
        "status": "Exited",
        "buy_price": 100,
        "qty": 20,
        "sl": 90,
        "buy_date": "2025-01-15",
        "exit_price": 130,
        "exit_date": "2025-02-01",
    }
    resp = auth_client.post(URL, replacement, format="json")
    assert resp.status_code == 200

    rows = auth_client.get(URL).json()
    assert len(rows) == 1
    row = rows[0]
    assert row["status"] == "Exited"
    assert row["qty"] == 20
    assert row["deployed"] == 2000
    assert row["exit_price"] == 130
    # fields left out of the replacement are cleared
    assert row["target"] is None
    assert row["reason"] is None
    assert row["tags"] is None
    assert row["metrics"]["pnl"] == 600


def test_upsert_of_foreign_id_is_noop(client_for, user, other_user, make_trade, trade_payload) -> None:
    theirs = make_trade(owner=other_user, symbol="HAL")

    trade_payload["id"] = theirs.id
    resp = client_for(user).post(URL, trade_payload, format="json")

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "affected": 0}
    theirs.refresh_from_db()
    assert theirs.symbol == "HAL"
    assert theirs.user_id == other_user.id
    assert not Trade.objects.filter(user=user).exists()


def test_upsert_of_unknown_id_is_noop(auth_client, trade_payload) -> None:
    trade_payload["id"] = 987654321
    resp = auth_client.post(URL, trade_payload, format="json")

    assert resp.json()["affected"] == 0
    assert Trade.objects.count() == 0


def test_delete_own_trade(auth_client, make_trade) -> None:
    trade = make_trade()

    resp = auth_client.delete(URL, {"id": trade.id}, format="json")

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "affected": 1}
    assert not Trade.objects.filter(id=trade.id).exists()


def test_delete_of_foreign_trade_is_noop(auth_client, make_trade, other_user) -> None:
    theirs = make_trade(owner=other_user)

    resp = auth_client.delete(URL, {"id": theirs.id}, format="json")

    assert resp.status_code == 200
    assert resp.json()["affected"] == 0
    assert Trade.objects.filter(id=theirs.id).exists()


def test_delete_without_id(auth_client) -> None:
    resp = auth_client.delete(URL, {}, format="json")

    assert resp.status_code == 400


def test_invalid_status_rejected(auth_client, trade_payload) -> None:
    trade_payload["status"] = "Closed"
    resp = auth_client.post(URL, trade_payload, format="json")

    assert resp.status_code == 400
    assert "status" in resp.json()


def test_missing_required_fields_rejected(auth_client) -> None:
    resp = auth_client.post(URL, {"symbol": "TCS"}, format="json")

    assert resp.status_code == 400
    body = resp.json()
    assert {"buy_price", "qty", "sl", "buy_date"} <= set(body)


def test_non_numeric_id_rejected(auth_client, trade_payload) -> None:
    trade_payload["id"] = "abc"
    resp = auth_client.post(URL, trade_payload, format="json")

    assert resp.status_code == 400


def test_delete_with_non_numeric_id(auth_client, make_trade) -> None:
    trade = make_trade()

    resp = auth_client.delete(URL, {"id": "abc"}, format="json")

    assert resp.status_code == 400
    assert resp.json() == {"error": "id required"}
    assert Trade.objects.filter(id=trade.id).exists()


def test_fractional_id_rejected(auth_client, make_trade, trade_payload) -> None:
    trade = make_trade(symbol="INFY")

    trade_payload["id"] = trade.id + 0.9
    resp = auth_client.post(URL, trade_payload, format="json")

    assert resp.status_code == 400
    trade.refresh_from_db()
    assert trade.symbol == "INFY"


def test_integral_float_id_accepted(auth_client, make_trade, trade_payload) -> None:
    trade = make_trade(symbol="INFY")

    trade_payload["id"] = float(trade.id)
    resp = auth_client.post(URL, trade_payload, format="json")

    assert resp.status_code == 200
    trade.refresh_from_db()
    assert trade.symbol == "TCS"
