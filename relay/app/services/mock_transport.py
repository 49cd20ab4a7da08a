"""Offline transport answering gateway calls with local demo data."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any, Dict

import httpx
from loguru import logger


def _echo(request: httpx.Request) -> httpx.Response:
    body: Any = None
    if request.content:
        try:
            body = json.loads(request.content)
        except ValueError:
            body = request.content.decode("utf-8", errors="replace")

    logger.debug(
        "Mock gateway {method} {path}", method=request.method, path=request.url.path
    )
    payload: Dict[str, Any] = {
        "method": request.method,
        "path": request.url.path,
        "params": dict(request.url.params),
        "body": body,
        "received_at": datetime.now(timezone.utc).isoformat(),
        "source": "mock",
    }
    return httpx.Response(200, json=payload)


def build_mock_transport() -> httpx.MockTransport:
    """Return a transport that echoes every request back with status 200."""
    return httpx.MockTransport(_echo)
