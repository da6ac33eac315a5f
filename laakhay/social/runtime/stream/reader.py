"""Streaming event decoder.

Architecture:
    `EventReader` pulls lines from a `LineSource` and reduces them to
    `StreamEvent`s. Two framings are accepted on the same reader:

    - Dialect A (chunked HTTP, SSE style)::

          event: update
          data: {"id": "1", ...}

    - Dialect B (WebSocket), one JSON envelope per line::

          {"event": "update", "payload": "{\\"id\\": \\"1\\", ...}"}

    An `event:` line anywhere in the frame selects dialect A; otherwise the
    first line of the frame is read as a dialect B envelope.

Frame completion:
    Completion is attempted after every line appended to the frame, so a
    frame is emitted as soon as it is whole, with or without a terminating
    blank line. A blank line only matters when the frame can never complete
    (an event that still lacks its `data:` line): the frame is discarded
    and the pull raises `MissingPayloadError`. A partial frame left when the
    source ends is dropped silently.

Errors:
    Frame errors (`UnknownEventError`, `MissingPayloadError`,
    `StreamDecodeError`) are raised from the pull that hit them. The frame
    is discarded and the reader keeps working for later pulls. A
    `TransportError` from the source is logged and the pull keeps reading.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ...core.enums import EventType
from ...core.exceptions import (
    DecodeError,
    MissingPayloadError,
    StreamDecodeError,
    TransportError,
    UnknownEventError,
)
from ...models.events import (
    DeleteEvent,
    FiltersChangedEvent,
    NotificationEvent,
    StreamEnvelope,
    StreamEvent,
    UpdateEvent,
)
from ...models.notification import Notification
from ...models.status import Status
from ..rest.codec import decode
from .sources import LineSource

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

COMMENT_PREFIX = ":"
EVENT_PREFIX = "event:"
DATA_PREFIX = "data:"


class DecoderState(Enum):
    COLLECTING = "collecting"
    CLOSED = "closed"


def _decode_payload(model: type[M], payload: str, event: str) -> M:
    try:
        return decode(model, payload)
    except DecodeError as e:
        raise StreamDecodeError(f"Invalid {event} payload: {e}", event=event, body=payload) from e


def build_event(name: str, payload: str | None) -> StreamEvent:
    """Turn an (event name, payload) pair into a StreamEvent.

    Raises:
        UnknownEventError: If `name` is not a known event
        MissingPayloadError: If the event needs a payload and has none
        StreamDecodeError: If the payload does not decode
    """
    event_type = EventType.from_name(name)
    if event_type is None:
        raise UnknownEventError(name)
    if event_type is EventType.FILTERS_CHANGED:
        return FiltersChangedEvent()
    if payload is None:
        raise MissingPayloadError(name)
    if event_type is EventType.DELETE:
        return DeleteEvent(status_id=payload)
    if event_type is EventType.NOTIFICATION:
        return NotificationEvent(notification=_decode_payload(Notification, payload, name))
    return UpdateEvent(status=_decode_payload(Status, payload, name))


def _field(lines: list[str], prefix: str) -> str | None:
    """Value of the first line starting with `prefix`, trimmed."""
    for line in lines:
        if line.startswith(prefix):
            return line[len(prefix) :].strip()
    return None


class EventReader:
    """Async iterator of streaming events over a line source.

    `async for` ends when the source does. A frame error raised from one
    pull does not close the reader; call `next_event()` (or re-enter the
    loop) to keep reading.
    """

    def __init__(self, source: LineSource) -> None:
        self._source = source
        self._frame: list[str] = []
        self._state = DecoderState.COLLECTING

    @property
    def state(self) -> DecoderState:
        return self._state

    @property
    def source(self) -> LineSource:
        return self._source

    async def next_event(self) -> StreamEvent | None:
        """Read until one event is decoded; None once the source has ended."""
        while self._state is DecoderState.COLLECTING:
            try:
                line = await self._source.read_line()
            except TransportError as e:
                logger.warning(f"Stream read failed, continuing: {e}")
                await asyncio.sleep(0)
                continue
            if line is None:
                self._close_frame()
                return None
            event = self.feed(line)
            if event is not None:
                return event
        return None

    def feed(self, raw: str) -> StreamEvent | None:
        """Consume one raw line; return an event if it completed a frame."""
        line = raw.strip()
        if line.startswith(COMMENT_PREFIX):
            return None
        if not line:
            if self._frame:
                self._flush_incomplete()
            return None
        self._frame.append(line)
        return self._try_complete()

    def _try_complete(self) -> StreamEvent | None:
        name = _field(self._frame, EVENT_PREFIX)
        if name is not None:
            payload = _field(self._frame, DATA_PREFIX)
            event_type = EventType.from_name(name)
            if payload is None and event_type is not None and event_type.requires_payload:
                # a data: line may still arrive
                return None
            return self._emit(name, payload)

        if self._frame[0].startswith(DATA_PREFIX):
            return None

        envelope = self._parse_envelope(self._frame[0])
        return self._emit(envelope.event, envelope.payload)

    def _parse_envelope(self, line: str) -> StreamEnvelope:
        try:
            return StreamEnvelope.model_validate_json(line)
        except PydanticValidationError as e:
            self._frame.clear()
            raise StreamDecodeError(
                f"Unrecognised stream line: {e.error_count()} validation error(s)",
                body=line,
            ) from e

    def _emit(self, name: str, payload: str | None) -> StreamEvent:
        # The frame is consumed whether or not it builds.
        self._frame.clear()
        return build_event(name, payload)

    def _flush_incomplete(self) -> None:
        name = _field(self._frame, EVENT_PREFIX)
        dropped = len(self._frame)
        self._frame.clear()
        if name is not None:
            raise MissingPayloadError(name)
        logger.debug(f"Dropped {dropped} line(s) with no event name at frame boundary")

    def _close_frame(self) -> None:
        if self._frame:
            logger.debug(f"Stream ended with {len(self._frame)} line(s) of partial frame")
            self._frame.clear()
        self._state = DecoderState.CLOSED

    async def close(self) -> None:
        """Stop reading and close the underlying source."""
        self._close_frame()
        await self._source.close()

    def __aiter__(self) -> EventReader:
        return self

    async def __anext__(self) -> StreamEvent:
        event = await self.next_event()
        if event is None:
            raise StopAsyncIteration
        return event

    async def __aenter__(self) -> EventReader:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
