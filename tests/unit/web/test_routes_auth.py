"""Tests for jewelcalc.web.routes.auth - Token issuance routes."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from jewelcalc.web.auth import REFRESH_COOKIE_NAME, decode_token
from jewelcalc.web.routes import auth


@pytest.fixture
def app():
    """Create test FastAPI app with auth router."""
    test_app = FastAPI()
    test_app.include_router(auth.router)
    return test_app


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


class TestTokenAuth:
    """Tests for POST /api/auth/token-auth."""

    def test_returns_access_token(self, client):
        response = client.post("/api/auth/token-auth", json={"username": "asha", "role": "staff"})

        assert response.status_code == 200
        claims = decode_token(response.json()["access_token"])
        assert claims["username"] == "asha"
        assert claims["role"] == "staff"

    def test_sets_refresh_cookie(self, client):
        response = client.post("/api/auth/token-auth", json={"username": "asha"})

        refresh = response.cookies.get(REFRESH_COOKIE_NAME)
        assert refresh is not None
        assert decode_token(refresh, refresh=True)["username"] == "asha"

        set_cookie = response.headers["set-cookie"].lower()
        assert "httponly" in set_cookie
        assert f"max-age={7 * 86400}" in set_cookie

    def test_refresh_token_not_in_body(self, client):
        response = client.post("/api/auth/token-auth", json={"username": "asha"})

        assert set(response.json()) == {"access_token"}

    def test_missing_body_is_rejected(self, client):
        response = client.post("/api/auth/token-auth")

        assert response.status_code == 422
