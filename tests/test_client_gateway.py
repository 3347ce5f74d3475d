import json
from unittest.mock import Mock

import pytest
import requests

from client.gateway import ApiGateway, ApiError


def make_response(status=200, body=None, content_type="application/json", text=None):
    response = requests.Response()
    response.status_code = status
    response.reason = "OK" if status < 400 else "Error"
    response.url = "http://api.test/endpoint"
    response._content = (text if text is not None else json.dumps(body)).encode("utf-8")
    if content_type:
        response.headers["Content-Type"] = content_type
    return response


@pytest.fixture
def session():
    return Mock(spec=requests.Session)


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def gateway(session, sleeps):
    return ApiGateway("http://api.test/", "secret-key", session=session, sleep=sleeps.append)


def test_returns_decoded_json_and_sends_headers(gateway, session):
    session.request.return_value = make_response(body={"status": "OK"})

    assert gateway.get("/api/health") == {"status": "OK"}

    args, kwargs = session.request.call_args
    assert args == ("GET", "http://api.test/api/health")
    assert kwargs["headers"]["X-API-Key"] == "secret-key"
    assert kwargs["headers"]["Content-Type"] == "application/json"
    assert kwargs["timeout"] == 10.0


def test_post_sends_json_body(gateway, session):
    session.request.return_value = make_response(status=201, body={"message": "ok"})

    gateway.post("/api/reviews", {"company": "Acme"})

    assert session.request.call_args.kwargs["json"] == {"company": "Acme"}


def test_html_response_is_rejected(session, sleeps):
    gateway = ApiGateway("http://api.test", "secret-key", retries=0, session=session, sleep=sleeps.append)
    session.request.return_value = make_response(text="<!doctype html><html></html>", content_type="text/html")

    with pytest.raises(ApiError) as excinfo:
        gateway.get("/api/problems")

    assert excinfo.value.code == "INVALID_RESPONSE"
    assert "text/html" in excinfo.value.message


def test_retries_with_fixed_delay_until_success(gateway, session, sleeps):
    session.request.side_effect = [
        make_response(status=503, body={"error": "busy"}),
        make_response(status=500, body={"error": "oops"}),
        make_response(body=[1, 2, 3]),
    ]

    assert gateway.get("/api/mcqs") == [1, 2, 3]
    assert session.request.call_count == 3
    assert sleeps == [1.0, 1.0]


def test_gives_up_after_configured_retries(gateway, session, sleeps):
    session.request.return_value = make_response(status=500, body={"error": "Internal Server Error"})

    with pytest.raises(ApiError) as excinfo:
        gateway.get("/api/mcqs")

    assert session.request.call_count == 4
    assert len(sleeps) == 3
    assert excinfo.value.status == 500
    assert excinfo.value.code == "HTTP_ERROR"
    assert excinfo.value.message == "Internal Server Error"


def test_post_is_not_retried(gateway, session, sleeps):
    session.request.return_value = make_response(status=503, body={"error": "busy"})

    with pytest.raises(ApiError) as excinfo:
        gateway.post("/api/reviews", {"company": "Acme", "role": "Engineer"})

    assert session.request.call_count == 1
    assert sleeps == []
    assert excinfo.value.status == 503


def test_put_and_delete_are_retried(gateway, session, sleeps):
    session.request.side_effect = [
        requests.Timeout(),
        make_response(body={"ok": True}),
        requests.Timeout(),
        make_response(body={"ok": True}),
    ]

    assert gateway.put("/api/reviews/1", {"rating": 4}) == {"ok": True}
    assert gateway.delete("/api/reviews/1") == {"ok": True}
    assert sleeps == [1.0, 1.0]


@pytest.mark.parametrize("status", [401, 403])
def test_auth_failures_are_not_retried(gateway, session, sleeps, status):
    session.request.return_value = make_response(status=status, body={"error": "Unauthorized: Missing or invalid API key"})

    with pytest.raises(ApiError) as excinfo:
        gateway.get("/api/reviews")

    assert session.request.call_count == 1
    assert sleeps == []
    assert excinfo.value.status == status


def test_timeout_maps_to_408(session):
    gateway = ApiGateway("http://api.test", "k", retries=0, session=session)
    session.request.side_effect = requests.Timeout()

    with pytest.raises(ApiError) as excinfo:
        gateway.get("/api/reviews")

    assert excinfo.value.status == 408
    assert excinfo.value.code == "TIMEOUT"


def test_connection_error_is_retried_then_surfaced(gateway, session, sleeps):
    session.request.side_effect = requests.ConnectionError()

    with pytest.raises(ApiError) as excinfo:
        gateway.get("/api/reviews")

    assert excinfo.value.status == 0
    assert excinfo.value.code == "NETWORK_ERROR"
    assert session.request.call_count == 4


def test_error_body_without_json_uses_status(session):
    gateway = ApiGateway("http://api.test", "k", retries=0, session=session)
    session.request.return_value = make_response(status=502, text="Bad gateway", content_type="text/plain")

    with pytest.raises(ApiError) as excinfo:
        gateway.get("/api/reviews")

    assert excinfo.value.message == "HTTP 502"


def test_check_status_reports_auth_failure(session):
    gateway = ApiGateway("http://api.test", "k", retries=0, session=session)
    session.request.side_effect = [
        make_response(body={"status": "ok"}),
        make_response(body={"status": "OK"}),
        make_response(status=401, body={"error": "Unauthorized"}),
    ]

    status = gateway.check_status()

    assert status["server"] is True
    assert status["api"] is True
    assert status["authentication"] is False
    assert status["issues"] == ["API key authentication failed"]


def test_validate_environment_flags_missing_key():
    result = ApiGateway("http://api.test", None).validate_environment()
    assert result == {"valid": False, "issues": ["API key is not properly configured"]}
