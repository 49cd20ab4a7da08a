"""HTTP client wrapper around an API Gateway stage."""

from __future__ import annotations

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import Any, AsyncIterator, Dict, Optional

import httpx
from loguru import logger

from relay.app.config import Settings
from relay.app.models.result import CallResult
from relay.app.services.mock_transport import build_mock_transport

DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class GatewayClientConfig:
    """Immutable connection settings captured when the client is built."""

    base_url: str
    api_key: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT

    @property
    def headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["x-api-key"] = self.api_key
        return headers


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return ""
    try:
        return response.json()
    except ValueError:
        return response.text


class GatewayClient:
    """Async client issuing single-attempt requests and returning CallResult."""

    def __init__(
        self,
        endpoint: str,
        api_key: Optional[str] = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not isinstance(endpoint, str) or not endpoint.strip():
            raise ValueError("endpoint must be a non-empty URL string")
        self._config = GatewayClientConfig(
            base_url=endpoint, api_key=api_key, timeout=timeout
        )
        self._client = httpx.AsyncClient(
            base_url=endpoint,
            headers=self._config.headers,
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "GatewayClient":
        """Build a client from application settings."""
        transport = build_mock_transport() if settings.use_mock_data else None
        return cls(
            str(settings.gateway_endpoint),
            settings.gateway_api_key,
            timeout=settings.gateway_timeout,
            transport=transport,
        )

    @property
    def config(self) -> GatewayClientConfig:
        return self._config

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()

    @asynccontextmanager
    async def lifespan(self) -> AsyncIterator["GatewayClient"]:
        """Async context manager to ensure resource cleanup."""
        try:
            yield self
        finally:
            await self.close()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        data: Any = None,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> CallResult:
        """Send one request and fold every outcome into a CallResult."""
        options: Dict[str, Any] = {"headers": headers, "params": params}
        if data is not None:
            options["json"] = data
        if timeout is not None:
            options["timeout"] = httpx.Timeout(timeout)

        try:
            request = self._client.build_request(method, path, **options)
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            message = str(exc) or exc.__class__.__name__
            logger.error("Request error: {message}", message=message)
            return CallResult.fail(message)

        try:
            response = await self._client.send(request)
        except httpx.TimeoutException:
            effective = timeout if timeout is not None else self._config.timeout
            logger.error(
                "No response received: {method} {url}",
                method=request.method,
                url=str(request.url),
            )
            return CallResult.fail(f"timeout of {int(effective * 1000)}ms exceeded")
        except httpx.RequestError as exc:
            logger.error(
                "No response received: {method} {url}",
                method=request.method,
                url=str(request.url),
            )
            return CallResult.fail(str(exc) or exc.__class__.__name__)

        body = _decode_body(response)
        if response.status_code < 200 or response.status_code >= 400:
            logger.error(
                "API Error [{status}]: {body}",
                status=response.status_code,
                body=body,
            )
            if not body and not isinstance(body, (dict, list)):
                body = f"Request failed with status code {response.status_code}"
            return CallResult.fail(body, status_code=response.status_code)

        logger.debug(
            "Gateway {method} {url} -> {status}",
            method=request.method,
            url=str(request.url),
            status=response.status_code,
        )
        return CallResult.ok(response.status_code, body)

    async def get(
        self,
        path: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> CallResult:
        """Issue a GET request."""
        return await self._request(
            "GET", path, headers=headers, params=params, timeout=timeout
        )

    async def post(
        self,
        path: str,
        data: Any = None,
        *,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> CallResult:
        """Issue a POST request with a JSON body."""
        return await self._request(
            "POST", path, data=data, headers=headers, params=params, timeout=timeout
        )

    async def put(
        self,
        path: str,
        data: Any = None,
        *,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> CallResult:
        """Issue a PUT request with a JSON body."""
        return await self._request(
            "PUT", path, data=data, headers=headers, params=params, timeout=timeout
        )

    async def patch(
        self,
        path: str,
        data: Any = None,
        *,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> CallResult:
        """Issue a PATCH request with a JSON body."""
        return await self._request(
            "PATCH", path, data=data, headers=headers, params=params, timeout=timeout
        )

    async def delete(
        self,
        path: str,
        *,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> CallResult:
        """Issue a DELETE request."""
        return await self._request(
            "DELETE", path, headers=headers, params=params, timeout=timeout
        )
