import pytest

from relay.app.config import Settings
from relay.app.services.gateway_client import GatewayClient


@pytest.mark.asyncio
async def test_mock_mode_echoes_request():
    settings = Settings(USE_MOCK_DATA=True, GATEWAY_ENDPOINT="https://api.example.com/test")
    async with GatewayClient.from_settings(settings).lifespan() as client:
        result = await client.post("/process-all", {"name": "John"}, params={"dry": "1"})

    assert result.success is True
    assert result.status_code == 200
    assert result.data["method"] == "POST"
    assert result.data["path"] == "/test/process-all"
    assert result.data["params"] == {"dry": "1"}
    assert result.data["body"] == {"name": "John"}
    assert result.data["source"] == "mock"


def test_settings_defaults(monkeypatch):
    for name in ("GATEWAY_ENDPOINT", "GATEWAY_API_KEY", "GATEWAY_TIMEOUT", "PORT"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 3000
    assert settings.gateway_timeout == 10.0
    assert settings.gateway_api_key is None
    assert str(settings.gateway_endpoint).endswith("/test")
