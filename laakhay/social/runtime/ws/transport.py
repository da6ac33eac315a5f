"""WebSocket transport that exposes a connection as a line source."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import websockets

from ...config import TransportConfig
from ...core.exceptions import TransportError

logger = logging.getLogger(__name__)


class WebSocketLineSource:
    """One WebSocket text message per line.

    A closed connection, clean or not, is end of input.
    """

    def __init__(self, websocket: Any) -> None:
        self._ws = websocket

    async def read_line(self) -> str | None:
        try:
            message = await self._ws.recv()
        except websockets.exceptions.ConnectionClosed as e:
            logger.debug(f"WebSocket closed: {e}")
            return None
        if isinstance(message, bytes):
            return message.decode("utf-8", errors="replace")
        return message

    async def close(self) -> None:
        await self._ws.close()


class WebSocketTransport:
    """Opens streaming WebSocket connections with keepalive settings."""

    def __init__(self, config: TransportConfig | None = None) -> None:
        self._conf = config or TransportConfig()

    def _connect_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {
            "ping_interval": self._conf.ping_interval,
            "ping_timeout": self._conf.ping_timeout,
            "close_timeout": self._conf.close_timeout,
            "open_timeout": self._conf.open_timeout,
        }
        # Only include size if not None to keep library defaults
        if self._conf.max_size is not None:
            kwargs["max_size"] = self._conf.max_size
        return kwargs

    async def open_line_source(self, url: str) -> WebSocketLineSource:
        """Connect to `url` and return a line source over its messages.

        Raises:
            TransportError: If the connection cannot be established
        """
        try:
            websocket = await websockets.connect(url, **self._connect_kwargs())
        except (OSError, asyncio.TimeoutError, websockets.exceptions.WebSocketException) as e:
            raise TransportError(f"WebSocket connect to {_redact(url)} failed: {e!r}") from e
        logger.debug(f"WebSocket connected to {_redact(url)}")
        return WebSocketLineSource(websocket)


def _redact(url: str) -> str:
    """Drop the query string, which carries the access token."""
    return url.split("?", 1)[0]
