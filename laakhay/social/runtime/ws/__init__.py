"""Runtime WebSocket helpers."""

from .transport import WebSocketLineSource, WebSocketTransport

__all__ = [
    "WebSocketLineSource",
    "WebSocketTransport",
]
