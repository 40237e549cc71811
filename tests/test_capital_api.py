from __future__ import annotations

import pytest

from apps.trading.models import Capital

pytestmark = pytest.mark.django_db

URL = "/api/capital"


def test_requires_authentication(api_client) -> None:
    assert api_client.get(URL).status_code == 401


def test_first_get_creates_default(auth_client, user) -> None:
    assert not Capital.objects.filter(user=user).exists()

    resp = auth_client.get(URL)

    assert resp.status_code == 200
    assert resp.json()["total"] == 500000
    assert Capital.objects.filter(user=user).count() == 1


def test_repeated_get_does_not_duplicate(auth_client, user) -> None:
    auth_client.get(URL)
    auth_client.get(URL)

    assert Capital.objects.filter(user=user).count() == 1


def test_post_upserts_total(auth_client, user) -> None:
    resp = auth_client.post(URL, {"total": 750000}, format="json")

    assert resp.status_code == 200
    assert resp.json()["total"] == 750000
    assert auth_client.get(URL).json()["total"] == 750000


def test_capital_is_per_user(client_for, user, other_user) -> None:
    client_for(user).post(URL, {"total": 100000}, format="json")

    assert client_for(other_user).get(URL).json()["total"] == 500000


def test_post_rejects_non_numeric(auth_client) -> None:
    resp = auth_client.post(URL, {"total": "lots"}, format="json")

    assert resp.status_code == 400


def test_default_follows_settings(auth_client, settings) -> None:
    settings.DEFAULT_CAPITAL = 250000

    assert auth_client.get(URL).json()["total"] == 250000
