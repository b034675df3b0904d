"""
Tests for application-level endpoints and error handling
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from restaurant_api.database import Database, ping
from restaurant_api.services.order_service import OrderService
from restaurant_api.utils.error_handler import InternalError
from main import app

class TestRootEndpoints:

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["message"] == "Restaurant Backend API is running!"

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200

        data = response.json()
        assert data["success"] is True
        assert data["status"] == "healthy"
        assert data["database"] == "connected"

class TestErrorHandling:

    def test_unknown_route(self, client):
        response = client.get("/api/menu")
        assert response.status_code == 404
        assert response.json() == {"success": False, "message": "Route not found"}

    def test_unsupported_method(self, client):
        response = client.patch("/api/orders")
        assert response.status_code == 404
        assert response.json()["message"] == "Route not found"

    def test_malformed_json_body(self, client):
        response = client.post(
            "/api/orders",
            content="{not json",
            headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json()["success"] is False

    def test_store_failure_returns_500(self, client, order_payload, monkeypatch):
        def broken_list(self, status=None):
            raise InternalError("Failed to fetch orders", "connection refused")

        monkeypatch.setattr(OrderService, "list_orders", broken_list)

        response = client.get("/api/orders")
        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "message": "Failed to fetch orders",
            "error": "connection refused"
        }

    def test_unexpected_exception_returns_json(self, order_payload, monkeypatch):
        def explode(self, order_in):
            raise RuntimeError("boom")

        monkeypatch.setattr(OrderService, "create_order", explode)

        client = TestClient(app, raise_server_exceptions=False)
        response = client.post("/api/orders", json=order_payload)
        assert response.status_code == 500

        data = response.json()
        assert data["success"] is False
        assert data["message"] == "Something went wrong!"
        assert data["error"] == "boom"
        assert data["errorId"]

class TestDatabaseLifecycle:

    def test_session_before_open_fails(self):
        store = Database("sqlite://")
        with pytest.raises(InternalError):
            store.session()

    def test_open_and_close(self):
        store = Database("sqlite://")
        store.open()
        assert store.is_open

        db = store.session()
        try:
            ping(db)
            assert OrderService(db).list_orders() == []
        finally:
            db.close()

        store.close()
        assert not store.is_open
        with pytest.raises(InternalError):
            store.session()

    def test_unreachable_store_reported_by_health(self, client, monkeypatch):
        def broken_ping(db):
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))

        monkeypatch.setattr("main.ping", broken_ping)

        response = client.get("/health")
        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"
