"""Streaming runtime: line sources and the event decoder."""

from .reader import DecoderState, EventReader, build_event
from .sources import IteratorLineSource, LineSource, ResponseLineSource, WebSocketLineSource

__all__ = [
    "DecoderState",
    "EventReader",
    "IteratorLineSource",
    "LineSource",
    "ResponseLineSource",
    "WebSocketLineSource",
    "build_event",
]
