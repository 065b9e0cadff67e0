"""The OpenAPI schema documents every resource route."""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.integration


@pytest.fixture()
def schema_body(api_client):
    response = api_client.get("/api/schema/", {"format": "json"})
    assert response.status_code == 200
    return response.content.decode()


class TestSchema:
    def test_schema_lists_resource_paths(self, schema_body):
        for route in (
            '"/services/customers"',
            '"/services/customers/add"',
            '"/services/customers/delete/{',
            '"/services/employees/update/{',
            '"/services/stores/{',
        ):
            assert route in schema_body

    def test_schema_carries_summaries(self, schema_body):
        assert "Adds a customer to the mocked list" in schema_body
        assert "Deletes a Store from the mocked list after finding it by id" in schema_body
