from __future__ import annotations

import pytest
from rest_framework.authtoken.models import Token

pytestmark = pytest.mark.django_db


def _register(client, username="carol", password="password123"):
    return client.post("/api/auth/register", {"username": username, "password": password}, format="json")


def test_register_returns_token(api_client) -> None:
    resp = _register(api_client)

    assert resp.status_code == 201
    body = resp.json()
    assert body["username"] == "carol"
    assert Token.objects.filter(key=body["token"]).exists()


def test_register_duplicate_username(api_client) -> None:
    _register(api_client)
    resp = _register(api_client)

    assert resp.status_code == 400


def test_login_and_use_token(api_client) -> None:
    _register(api_client)
    resp = api_client.post("/api/auth/login", {"username": "carol", "password": "password123"}, format="json")
    assert resp.status_code == 200

    api_client.credentials(HTTP_AUTHORIZATION=f"Token {resp.json()['token']}")
    profile = api_client.get("/api/auth/profile")

    assert profile.status_code == 200
    assert profile.json()["username"] == "carol"
    assert api_client.get("/api/trades").status_code == 200


def test_invalid_credentials(api_client) -> None:
    _register(api_client)
    resp = api_client.post("/api/auth/login", {"username": "carol", "password": "wrongpass"}, format="json")

    assert resp.status_code == 401


def test_logout_revokes_token(api_client) -> None:
    token = _register(api_client).json()["token"]
    api_client.credentials(HTTP_AUTHORIZATION=f"Token {token}")

    assert api_client.post("/api/auth/logout").status_code == 200
    assert api_client.get("/api/trades").status_code == 401


def test_health_check(api_client) -> None:
    body = api_client.get("/health/").json()

    assert body["status"] == "healthy"
    assert body["database"] == "connected"
