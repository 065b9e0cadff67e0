import logging
import uuid

import pytest


class TestRequestLoggingMiddleware:
    def test_returns_provided_request_id(self, client):
        custom_id = "my-custom-request-id-123"
        response = client.get("/health", HTTP_X_REQUEST_ID=custom_id)
        assert response["X-Request-ID"] == custom_id

    def test_generates_uuid_when_no_request_id(self, client):
        response = client.get("/health")
        request_id = response["X-Request-ID"]
        parsed = uuid.UUID(request_id, version=4)
        assert str(parsed) == request_id

    def test_request_id_in_logs(self, api_client_with_request_id, caplog):
        api_client, request_id = api_client_with_request_id
        with caplog.at_level(logging.INFO):
            api_client.get("/services/customers/unknown")
        found = any(request_id in record.getMessage() for record in caplog.records)
        assert found, (
            f"request_id '{request_id}' not found in log records: "
            f"{[r.getMessage() for r in caplog.records]}"
        )

    def test_finished_line_carries_status(self, client, caplog):
        with caplog.at_level(logging.INFO):
            client.get("/services/stores/none")
        messages = [r.getMessage() for r in caplog.records]
        assert any("request_finished" in m and "404" in m for m in messages)


class TestSensitiveDataMasking:
    def test_email_key_masked(self):
        from config.settings import mask_sensitive_data

        result = mask_sensitive_data(None, None, {"event": "test", "email": "ana@example.com"})
        assert result["email"] == "***MASKED***"

    def test_phone_key_masked(self):
        from config.settings import mask_sensitive_data

        result = mask_sensitive_data(None, None, {"event": "test", "phone": "+1 555 0100"})
        assert result["phone"] == "***MASKED***"

    def test_email_inside_text_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "detail": "duplicate contact ana@example.com"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "ana@example.com" not in result["detail"]
        assert "***MASKED***" in result["detail"]

    def test_password_masked_in_log_output(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "data": "password='s3cret123'"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "s3cret123" not in result["data"]
        assert "***MASKED***" in result["data"]

    def test_token_masked_in_log_output(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "test", "header": "token=abc123xyz"}
        result = mask_sensitive_data(None, None, event_dict)
        assert "abc123xyz" not in result["header"]

    def test_non_sensitive_data_unchanged(self):
        from config.settings import mask_sensitive_data

        event_dict = {"event": "customer.created", "resource_id": "c-001"}
        result = mask_sensitive_data(None, None, event_dict)
        assert result["resource_id"] == "c-001"
        assert result["event"] == "customer.created"

    def test_phone_inside_text_masked(self):
        from config.settings import mask_sensitive_data

        event_dict = {
            "event": "test",
            "detail": "call +1 555 0100 or 555-123-4567 after hours",
        }
        result = mask_sensitive_data(None, None, event_dict)
        assert "555 0100" not in result["detail"]
        assert "555-123-4567" not in result["detail"]
        assert result["detail"].startswith("call ***MASKED***")

    def test_request_id_and_timestamp_not_mistaken_for_phone(self):
        from config.settings import mask_sensitive_data

        event_dict = {
            "event": "request_finished",
            "request_id": "12345678-1234-5678-1234-567812345678",
            "timestamp": "2024-01-15T10:30:00.123456Z",
            "duration_ms": "12.345",
        }
        result = mask_sensitive_data(None, None, dict(event_dict))
        assert result == event_dict
