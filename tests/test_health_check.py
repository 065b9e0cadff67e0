import pytest

from modules.core.registry import registry


class TestHealthCheck:
    def test_health_check_returns_200(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert "timestamp" in data

    def test_health_check_reports_every_collection(self, client):
        data = client.get("/health").json()
        assert data["collections"] == {"customers": 0, "employees": 0, "stores": 0}

    def test_health_check_counts_records(self, client, address):
        from modules.stores.dtos import StoreDTO

        registry.get("stores").add(StoreDTO(id="s1", name="Kwik-E-Mart", address=address))

        data = client.get("/health").json()
        assert data["collections"]["stores"] == 1
