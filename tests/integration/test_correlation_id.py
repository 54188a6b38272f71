import logging
import uuid

import pytest

pytestmark = pytest.mark.integration


class TestCorrelationIdMiddleware:
    def test_returns_provided_request_id(self, client):
        custom_id = "my-custom-request-id-123"
        response = client.get("/health", HTTP_X_REQUEST_ID=custom_id)
        assert response["X-Request-ID"] == custom_id

    def test_generates_uuid_when_no_request_id(self, client):
        response = client.get("/health")
        request_id = response["X-Request-ID"]
        parsed = uuid.UUID(request_id, version=4)
        assert str(parsed) == request_id

    def test_api_responses_carry_request_id(self, api_client_with_correlation):
        api_client, cid = api_client_with_correlation
        response = api_client.get("/api/products")
        assert response["X-Request-ID"] == cid

    def test_correlation_id_in_logs(self, client, caplog):
        custom_id = "log-test-correlation-456"
        with caplog.at_level(logging.INFO):
            client.get("/api/products", HTTP_X_REQUEST_ID=custom_id)
        found = any(custom_id in record.getMessage() for record in caplog.records)
        assert found, (
            f"correlation_id '{custom_id}' not found in log records: "
            f"{[r.getMessage() for r in caplog.records]}"
        )

    def test_request_finished_carries_duration(self, client, caplog):
        with caplog.at_level(logging.INFO):
            client.get("/api/products")
        finished = [
            r.getMessage() for r in caplog.records if "request_finished" in r.getMessage()
        ]
        assert len(finished) == 1
        assert "duration_ms" in finished[0]
        assert "status_code" in finished[0]

    def test_health_probe_skips_request_started(self, client, caplog):
        with caplog.at_level(logging.INFO):
            client.get("/health")
        messages = [r.getMessage() for r in caplog.records]
        assert not any("request_started" in m for m in messages)
        assert any("request_finished" in m for m in messages)

    def test_api_call_logs_request_started(self, client, caplog):
        with caplog.at_level(logging.INFO):
            client.get("/api/products")
        assert any("request_started" in r.getMessage() for r in caplog.records)
