"""Async HTTP client wrapper with bearer authentication."""

from __future__ import annotations

import asyncio
from collections.abc import Mapping, Sequence
from time import perf_counter
from typing import Any

import aiohttp

from ...config import ClientData, HTTPConfig
from ...core.exceptions import TransportError
from .codec import raise_for_error_status
from .line_source import ResponseLineSource
from .response import HTTPResponse
from .telemetry import log_request_completed, log_request_failed

Params = Mapping[str, Any] | Sequence[tuple[str, Any]]


class HTTPClient:
    """Issues requests against one instance and returns raw responses.

    Decoding is left to callers (routes and `Page`), which go through
    `decode_body_or_api_error`.
    """

    def __init__(self, data: ClientData, config: HTTPConfig | None = None) -> None:
        self.data = data
        self.config = config or HTTPConfig()
        self.base_url = data.base
        self.timeout = aiohttp.ClientTimeout(total=self.config.timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def build_url(self, url: str) -> str:
        """Join relative paths to the instance base URL."""
        if url.startswith(("http://", "https://")):
            return url
        if not url.startswith("/"):
            url = f"/{url}"
        return f"{self.base_url}{url}"

    def _headers(self, extra: Mapping[str, str] | None = None) -> dict[str, str]:
        headers = {"User-Agent": self.config.user_agent, "Accept": "application/json"}
        if self.data.token:
            headers["Authorization"] = f"Bearer {self.data.token}"
        if extra:
            headers.update(extra)
        return headers

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Params | None = None,
        json: Any | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> HTTPResponse:
        """Send a request and read the whole body.

        Status codes are not checked here.

        Raises:
            TransportError: On connection errors and timeouts
        """
        full_url = self.build_url(url)
        started = perf_counter()
        try:
            async with self.session.request(
                method,
                full_url,
                params=params,
                json=json,
                headers=self._headers(headers),
            ) as response:
                body = await response.read()
                result = HTTPResponse(
                    status=response.status,
                    body=body,
                    headers=response.headers.copy(),
                    url=str(response.url),
                )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            log_request_failed(
                method=method,
                url=full_url,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise TransportError(f"{method} {full_url} failed: {e!r}") from e

        log_request_completed(
            method=method,
            url=result.url or full_url,
            status=result.status,
            latency_ms=(perf_counter() - started) * 1000.0,
            body_bytes=len(body),
        )
        return result

    async def get(self, url: str, params: Params | None = None) -> HTTPResponse:
        """GET request."""
        return await self.request("GET", url, params=params)

    async def post(
        self, url: str, params: Params | None = None, json: Any | None = None
    ) -> HTTPResponse:
        """POST request."""
        return await self.request("POST", url, params=params, json=json)

    async def put(self, url: str, json: Any | None = None) -> HTTPResponse:
        """PUT request."""
        return await self.request("PUT", url, json=json)

    async def patch(self, url: str, json: Any | None = None) -> HTTPResponse:
        """PATCH request."""
        return await self.request("PATCH", url, json=json)

    async def delete(self, url: str, params: Params | None = None) -> HTTPResponse:
        """DELETE request."""
        return await self.request("DELETE", url, params=params)

    async def open_line_source(
        self, url: str, params: Params | None = None
    ) -> ResponseLineSource:
        """Open a streaming GET and return a line source over its body.

        Only the connection phase is bounded by a timeout; the body is read
        for as long as the server keeps it open.

        Raises:
            TransportError: On connection errors
            ApiError, ClientError, ServerError: On an error status
        """
        full_url = self.build_url(url)
        timeout = aiohttp.ClientTimeout(
            total=None, sock_connect=self.config.stream_connect_timeout
        )
        try:
            response = await self.session.get(
                full_url,
                params=params,
                headers=self._headers({"Accept": "text/event-stream"}),
                timeout=timeout,
            )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            log_request_failed(
                method="GET",
                url=full_url,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise TransportError(f"GET {full_url} failed: {e!r}") from e

        if response.status >= 400:
            try:
                body = await response.read()
            except (aiohttp.ClientError, asyncio.TimeoutError):
                body = b""
            finally:
                response.release()
            raise_for_error_status(
                HTTPResponse(status=response.status, body=body, url=str(response.url))
            )
        return ResponseLineSource(response)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
