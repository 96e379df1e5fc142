import json

import httpx
import pytest

from generic_frameworks.api_testing.framework.environments import ApiEnvironment
from generic_frameworks.api_testing.framework.http_client import HttpClient, HttpClientError


ENVIRONMENT = ApiEnvironment(
    name="test",
    base_url="https://api.test",
    timeout=2500,
    retries=0,
    api_key="apikey-123",
)


def test_redact_headers_masks_sensitive_values():
    client = object.__new__(HttpClient)  # bypass __init__
    masked = client._redact_headers(
        {
            "Authorization": "secret-token",
            "x-api-key": "apikey",
            "Cookie": "session=abc",
            "X-Other": "keep",
        }
    )
    assert masked["Authorization"] == "***MASKED***"
    assert masked["x-api-key"] == "***MASKED***"
    assert masked["Cookie"] == "***MASKED***"
    assert masked["X-Other"] == "keep"


def test_redact_body_masks_sensitive_fields():
    client = object.__new__(HttpClient)
    payload = {
        "password": "p1",
        "nested": {"token": "tok", "keep": "value"},
        "items": [{"api_key": "k1"}, {"regular": "ok"}],
    }
    redacted = client._redact_body(payload)

    assert redacted["password"] == "***MASKED***"
    assert redacted["nested"]["token"] == "***MASKED***"
    assert redacted["nested"]["keep"] == "value"
    assert redacted["items"][0]["api_key"] == "***MASKED***"
    assert redacted["items"][1]["regular"] == "ok"
    assert payload["password"] == "p1"


def test_curl_uses_redacted_parts():
    client = HttpClient(ENVIRONMENT)
    headers = client._redact_headers(client.default_headers())
    body = client._redact_body({"email": "eve.holt@reqres.in", "password": "cityslicka"})

    curl = client._build_curl("POST", "https://api.test/api/login", headers, body)

    assert curl.startswith("curl -X POST")
    assert "apikey-123" not in curl
    assert "cityslicka" not in curl
    assert "'https://api.test/api/login'" in curl


def test_request_outside_context_manager():
    client = HttpClient(ENVIRONMENT)

    with pytest.raises(HttpClientError, match="context manager"):
        client.get("/api/users")


def test_default_headers_and_base_url():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    with HttpClient(ENVIRONMENT, transport=httpx.MockTransport(handler)) as client:
        response = client.get("/api/users", params={"page": 2})

    assert response.json() == {"ok": True}
    request = seen[0]
    assert str(request.url) == "https://api.test/api/users?page=2"
    assert request.headers["x-api-key"] == "apikey-123"
    assert request.headers["Content-Type"] == "application/json"
    assert client.session is None


def test_no_api_key_header_without_key():
    client = HttpClient(ApiEnvironment(name="staging", base_url="https://s.test", timeout=1000, retries=0))
    assert "x-api-key" not in client.default_headers()


def test_error_statuses_are_returned_not_raised():
    transport = httpx.MockTransport(lambda request: httpx.Response(404, json={}))

    with HttpClient(ENVIRONMENT, transport=transport) as client:
        assert client.delete("/api/users/23").status_code == 404


def test_transport_errors_propagate():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with HttpClient(ENVIRONMENT, transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(httpx.ConnectError):
            client.get("/api/users")


def test_json_body_is_sent():
    bodies = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(201, json={"id": "1"})

    with HttpClient(ENVIRONMENT, transport=httpx.MockTransport(handler)) as client:
        client.post("/api/users", json={"name": "morpheus", "job": "leader"})

    assert bodies == [{"name": "morpheus", "job": "leader"}]
