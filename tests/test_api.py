from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from core.settings import get_settings
from main import app


AUTH_HEADERS = {"Authorization": "Bearer pipeline-secret"}


@pytest.fixture
def api_client(settings):
    app.dependency_overrides[get_settings] = lambda: settings
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health_endpoint(api_client):
    resp = api_client.get("/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "healthy"


def test_correlation_id_is_echoed(api_client):
    resp = api_client.get("/health", headers={"X-Correlation-ID": "abc-123"})

    assert resp.headers["X-Correlation-ID"] == "abc-123"


def test_correlation_id_is_generated(api_client):
    resp = api_client.get("/health")

    assert resp.headers["X-Correlation-ID"]


def test_list_pipelines(api_client):
    resp = api_client.get("/v1/pipelines/", headers=AUTH_HEADERS)

    assert resp.status_code == 200
    assert [p["name"] for p in resp.json()["pipelines"]] == ["name_score"]


def test_trigger_requires_token(api_client):
    resp = api_client.post("/v1/pipelines/name-score")

    assert resp.status_code in (401, 403)


def test_trigger_rejects_wrong_token(api_client):
    resp = api_client.post(
        "/v1/pipelines/name-score",
        headers={"Authorization": "Bearer wrong"},
    )

    assert resp.status_code == 401


def test_trigger_without_configured_token(api_client, settings):
    app.dependency_overrides[get_settings] = lambda: settings.model_copy(
        update={"pipeline_api_token": None}
    )

    resp = api_client.post("/v1/pipelines/name-score", headers=AUTH_HEADERS)

    assert resp.status_code == 500


def test_trigger_runs_pipeline(api_client, make_response, name_records):
    with patch("core.http.requests.request") as mock_request:
        mock_request.side_effect = [
            make_response(200, name_records),
            make_response(200, text="ok"),
        ]
        resp = api_client.post(
            "/v1/pipelines/name-score",
            headers=AUTH_HEADERS,
            params={"test": "true", "subject": "Grace"},
        )

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "success"
    assert body["data"]["total_score"] == 236
    assert body["data"]["submission_status"] == 200

    params = mock_request.call_args_list[1].kwargs["params"]
    assert params["prueba"] == 1
    assert params["nombre"] == "Grace"


def test_trigger_reports_source_failure(api_client, make_response):
    with patch("core.http.requests.request") as mock_request:
        mock_request.return_value = make_response(503, text="unavailable")
        resp = api_client.post("/v1/pipelines/name-score", headers=AUTH_HEADERS)

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "error"
    assert "SourceUnavailable" in body["data"]["error"]
    assert body["data"]["total_score"] is None


def test_trigger_validation_error(api_client):
    resp = api_client.post(
        "/v1/pipelines/name-score",
        headers=AUTH_HEADERS,
        params={"test": "not-a-bool"},
    )

    assert resp.status_code == 422
    assert resp.json()["error_code"] == "VALIDATION_ERROR"
