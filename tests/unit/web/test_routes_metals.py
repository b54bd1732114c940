"""Tests for jewelcalc.web.routes.metals - Metal routes."""

from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from jewelcalc.web.routes import metals


@pytest.fixture
def app():
    """Create test FastAPI app with metals router."""
    test_app = FastAPI()
    test_app.include_router(metals.router)
    return test_app


@pytest.fixture
def client(app):
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def mock_db_session():
    """Mock database session with async context manager."""
    session = AsyncMock()

    async_cm = AsyncMock()
    async_cm.__aenter__.return_value = session
    async_cm.__aexit__.return_value = None

    return async_cm


class TestCreateMetal:
    """Tests for POST /api/metals/create."""

    @patch("jewelcalc.web.routes.metals.repository")
    @patch("jewelcalc.web.routes.metals.get_session")
    def test_create_metal(self, mock_get_session, mock_repository, client, mock_db_session):
        mock_get_session.return_value = mock_db_session
        mock_repository.create_metal = AsyncMock(return_value=MagicMock())
        mock_repository.model_to_dict.return_value = {"id": 1, "name": "Gold"}

        response = client.post(
            "/api/metals/create",
            json={"name": "Gold", "purity": "22K", "pricePerGram": 5500, "isAlloy": True},
        )

        assert response.status_code == 201
        assert response.json()["data"] == {"id": 1, "name": "Gold"}
        kwargs = mock_repository.create_metal.call_args.kwargs
        assert kwargs["price_per_gram"] == Decimal("5500")
        assert kwargs["purity"] == "22K"
        assert kwargs["is_alloy"] is True

    @patch("jewelcalc.web.routes.metals.get_session")
    def test_missing_price_is_bad_request(self, mock_get_session, client):
        response = client.post("/api/metals/create", json={"name": "Gold"})

        assert response.status_code == 400
        assert response.json()["detail"] == "Missing required fields"
        mock_get_session.assert_not_called()

    @patch("jewelcalc.web.routes.metals.get_session")
    def test_zero_price_counts_as_missing(self, mock_get_session, client):
        response = client.post("/api/metals/create", json={"name": "Gold", "pricePerGram": 0})

        assert response.status_code == 400


class TestReadMetals:
    """Tests for GET /api/metals and /api/metals/{id}."""

    @patch("jewelcalc.web.routes.metals.repository")
    @patch("jewelcalc.web.routes.metals.get_session")
    def test_list_metals_empty(self, mock_get_session, mock_repository, client, mock_db_session):
        mock_get_session.return_value = mock_db_session
        mock_repository.list_metals = AsyncMock(return_value=[])

        response = client.get("/api/metals")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": []}

    @patch("jewelcalc.web.routes.metals.repository")
    @patch("jewelcalc.web.routes.metals.get_session")
    def test_get_metal_not_found(self, mock_get_session, mock_repository, client, mock_db_session):
        mock_get_session.return_value = mock_db_session
        mock_repository.get_metal = AsyncMock(return_value=None)

        response = client.get("/api/metals/7")

        assert response.status_code == 404
        assert response.json()["detail"] == "Metal not found"


class TestExportMetals:
    """Tests for GET /api/metals/export."""

    @patch("jewelcalc.web.routes.metals.export_metals_csv")
    @patch("jewelcalc.web.routes.metals.get_session")
    def test_export_streams_csv(self, mock_get_session, mock_export, client, mock_db_session):
        mock_get_session.return_value = mock_db_session

        async def rows(session):
            yield "id,name\r\n"
            yield "1,Gold\r\n"

        mock_export.side_effect = rows

        response = client.get("/api/metals/export")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/csv")
        assert "attachment; filename=metals_" in response.headers["content-disposition"]
        assert response.text == "id,name\r\n1,Gold\r\n"
