import json
import os

os.environ.setdefault("USE_MOCK_DATA", "true")
os.environ.setdefault("GATEWAY_ENDPOINT", "https://api.example.com/test")

from typing import List  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from relay.app.api.deps import get_gateway_client  # noqa: E402
from relay.app.main import app  # noqa: E402
from relay.app.services.gateway_client import GatewayClient  # noqa: E402


@pytest.fixture()
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def use_gateway(handler) -> List[httpx.Request]:
    calls: List[httpx.Request] = []

    def recording(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return handler(request)

    gateway = GatewayClient(
        "https://api.example.com/test", transport=httpx.MockTransport(recording)
    )
    app.dependency_overrides[get_gateway_client] = lambda: gateway
    return calls


def test_health_route_makes_no_downstream_call(client):
    calls = use_gateway(lambda request: httpx.Response(200, json={}))
    response = client.get("/")
    assert response.status_code == 200
    assert response.json() == {"message": "Node.js server is running"}
    assert calls == []


def test_start_posts_fixed_payload(client):
    calls = use_gateway(lambda request: httpx.Response(200, json={"done": True}))
    response = client.get("/start")
    assert response.status_code == 200
    assert response.json() == {"greeting": "Hello from Node.js"}
    assert len(calls) == 1
    assert calls[0].method == "POST"
    assert calls[0].url.path == "/test/process-all"
    assert json.loads(calls[0].content) == {"name": "John"}


def test_start_ignores_downstream_network_failure(client):
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    calls = use_gateway(handler)
    response = client.get("/start")
    assert response.status_code == 200
    assert response.json() == {"greeting": "Hello from Node.js"}
    assert len(calls) == 1


def test_start_ignores_downstream_error_status(client):
    use_gateway(lambda request: httpx.Response(500, json={"message": "boom"}))
    response = client.get("/start")
    assert response.status_code == 200
    assert response.json() == {"greeting": "Hello from Node.js"}


def test_start_returns_500_on_local_failure(client):
    class Broken:
        async def post(self, path, data=None):
            raise RuntimeError("client misconfigured")

    app.dependency_overrides[get_gateway_client] = lambda: Broken()
    response = client.get("/start")
    assert response.status_code == 500
    assert response.json() == {"error": "Something went wrong"}


def test_mock_mode_client_is_wired_from_settings(client):
    gateway = client.app.state.gateway_client
    assert isinstance(gateway, GatewayClient)
    assert gateway.config.base_url == "https://api.example.com/test"
    response = client.get("/start")
    assert response.status_code == 200


def test_start_ignores_downstream_null_error_body(client):
    use_gateway(lambda request: httpx.Response(400, content=b"null"))
    response = client.get("/start")
    assert response.status_code == 200
    assert response.json() == {"greeting": "Hello from Node.js"}


def test_app_title_comes_from_settings(client):
    assert client.app.title == client.app.state.settings.app_name
