"""Health and trigger endpoints."""

from typing import Any, Dict

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from loguru import logger

from relay.app.api.deps import get_gateway_client

router = APIRouter(tags=["relay"])

PROCESS_PATH = "/process-all"
PROCESS_PAYLOAD: Dict[str, Any] = {"name": "John"}


@router.get("/")
async def root() -> Dict[str, str]:
    """Health check; never touches the gateway."""
    return {"message": "Node.js server is running"}


@router.get("/start", response_model=None)
async def start(
    client: Any = Depends(get_gateway_client),
) -> Any:
    """Fire one POST at the gateway and reply with a fixed greeting.

    The gateway outcome is not inspected: a failed downstream call still
    answers 200. Only a local exception produces a 500.
    """
    try:
        logger.info("Route : /start called")
        await client.post(PROCESS_PATH, dict(PROCESS_PAYLOAD))
    except Exception as exc:  # noqa: BLE001
        logger.exception("Trigger route failed: {error}", error=str(exc))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Something went wrong"},
        )
    return {"greeting": "Hello from Node.js"}
