"""FastAPI dependency helpers."""

from fastapi import Request

from relay.app.services.gateway_client import GatewayClient


def get_gateway_client(request: Request) -> GatewayClient:
    """Retrieve the gateway client from app state."""
    client: GatewayClient = request.app.state.gateway_client  # type: ignore[attr-defined]
    return client
