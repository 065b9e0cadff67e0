import pytest

from rest_framework.test import APIClient

from modules.core.registry import registry


@pytest.fixture(autouse=True)
def _empty_collections():
    """Every test starts and ends with empty in-memory collections."""
    registry.clear()
    yield
    registry.clear()


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_request_id(api_client):
    """APIClient pre-configured with a known request ID header."""
    request_id = "test-request-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = request_id
    return api_client, request_id


@pytest.fixture()
def address():
    return {
        "street": "Main St",
        "city": "Springfield",
        "zip": "00000",
        "country": "US",
    }
