"""Entrypoint for the gateway relay FastAPI server."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI
from loguru import logger

from relay.app.api import routes
from relay.app.config import Settings, get_settings
from relay.app.services.gateway_client import GatewayClient


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application startup/shutdown routines."""
    settings: Settings = get_settings()
    client = GatewayClient.from_settings(settings)

    app.title = settings.app_name
    app.state.settings = settings  # type: ignore[attr-defined]
    app.state.gateway_client = client  # type: ignore[attr-defined]

    logger.info(
        "Starting gateway relay against {endpoint} (mock mode = {mock})",
        endpoint=str(settings.gateway_endpoint),
        mock=settings.use_mock_data,
    )
    try:
        yield
    finally:
        await client.close()
        logger.info("Gateway relay shutdown complete")


app = FastAPI(
    title="API Gateway Relay",
    version="0.1.0",
    lifespan=lifespan,
)


app.include_router(routes.router)


def run() -> None:
    """Serve the app with uvicorn on the configured port."""
    settings = get_settings()
    logger.info(
        "Server running on http://localhost:{port}", port=settings.port
    )
    uvicorn.run(app, host=settings.host, port=settings.port)
