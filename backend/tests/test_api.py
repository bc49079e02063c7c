"""Tests for API endpoints."""

import pytest
from fastapi.testclient import TestClient
from conftest import FakeFoodDBClient, make_record

from food_label.main import app
from food_label.api import routes


@pytest.fixture
def client():
    """Create test client."""
    return TestClient(app)


@pytest.fixture
def fake_db(monkeypatch):
    """Swap the route's food DB client for a fake."""
    fake = FakeFoodDBClient(record=make_record(raw_ingredients="밀가루, 백설탕, 소금"))
    monkeypatch.setattr(routes.verification_service, "client", fake)
    return fake


class TestHealthEndpoint:
    """Test /health endpoint."""
    
    def test_health_returns_200(self, client):
        response = client.get("/api/v1/health")
        assert response.status_code == 200
    
    def test_health_response_format(self, client, fake_db):
        data = client.get("/api/v1/health").json()
        
        assert data["status"] == "ok"
        assert "version" in data
        assert data["foodDbConfigured"] is True


class TestRootEndpoint:
    """Test root endpoint."""
    
    def test_root_contains_info(self, client):
        response = client.get("/")
        data = response.json()
        
        assert response.status_code == 200
        assert data["name"] == "food-label-checker"
        assert "version" in data
        assert data["endpoints"]["verify"] == "/api/v1/verify"


class TestToolsEndpoint:
    """Test /tools endpoint."""
    
    def test_lists_verify_tool(self, client):
        data = client.get("/api/v1/tools").json()
        
        assert [tool["name"] for tool in data["tools"]] == ["verify_food_label"]


class TestVerifyEndpoint:
    """Test /verify endpoint."""
    
    def test_requires_body(self, client):
        response = client.post("/api/v1/verify")
        assert response.status_code == 422
    
    def test_requires_product_name(self, client):
        response = client.post("/api/v1/verify", json={"ingredients": ["설탕"]})
        assert response.status_code == 422
    
    def test_rejects_empty_product_name(self, client):
        response = client.post("/api/v1/verify", json={"productName": "", "ingredients": []})
        assert response.status_code == 422
    
    def test_verify_all_correct(self, client, fake_db):
        response = client.post("/api/v1/verify", json={
            "productName": "테스트과자",
            "manufacturer": "테스트식품",
            "ingredients": ["밀가루", "백설탕", "소금"],
        })
        
        assert response.status_code == 200
        data = response.json()
        assert data["verified"] is True
        assert data["corrections"] == []
        assert data["confidence"] == 100
        assert fake_db.queries == ["테스트과자"]
    
    def test_verify_with_correction(self, client, fake_db):
        data = client.post("/api/v1/verify", json={
            "productName": "테스트과자",
            "ingredients": ["밀가루", "백설탕류"],
        }).json()
        
        assert data["ingredients"]["verified"] == ["밀가루", "백설탕"]
        assert data["corrections"] == [{"original": "백설탕류", "corrected": "백설탕", "confidence": 75}]
        assert data["confidence"] == 85
    
    def test_verify_not_found(self, client, monkeypatch):
        monkeypatch.setattr(routes.verification_service, "client", FakeFoodDBClient(record=None))
        
        response = client.post("/api/v1/verify", json={
            "productName": "존재하지않는제품",
            "ingredients": ["밀가루"],
        })
        
        assert response.status_code == 200
        data = response.json()
        assert data["verified"] is False
        assert data["originalData"]["productName"] == "존재하지않는제품"
        assert "corrections" not in data
    
    def test_verify_error_in_body(self, client, monkeypatch):
        failing = FakeFoodDBClient(error=RuntimeError("db exploded"))
        monkeypatch.setattr(routes.verification_service, "client", failing)
        
        response = client.post("/api/v1/verify", json={
            "productName": "테스트과자",
            "ingredients": ["밀가루"],
        })
        
        assert response.status_code == 200
        data = response.json()
        assert data["error"] is True
        assert "db exploded" in data["message"]
