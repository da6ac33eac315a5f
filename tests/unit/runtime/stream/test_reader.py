"""Unit tests for the streaming event decoder.

Covers both framings (`event:`/`data:` lines and single-line JSON
envelopes), frame completion, and recovery after bad frames.
"""

from __future__ import annotations

import asyncio
import json

import pytest

from laakhay.social.core import (
    MissingPayloadError,
    StreamDecodeError,
    TransportError,
    UnknownEventError,
)
from laakhay.social.models import (
    DeleteEvent,
    FiltersChangedEvent,
    NotificationEvent,
    UpdateEvent,
)
from laakhay.social.runtime.stream import (
    DecoderState,
    EventReader,
    IteratorLineSource,
    build_event,
)


class ScriptedSource:
    """Line source replaying lines and exceptions in order."""

    def __init__(self, script):
        self._script = list(script)
        self.closed = False

    async def read_line(self):
        if not self._script:
            return None
        item = self._script.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    async def close(self):
        self.closed = True


def _reader(*lines: str) -> EventReader:
    return EventReader(IteratorLineSource(lines))


async def _drain(reader: EventReader) -> list:
    return [event async for event in reader]


class TestLineFraming:
    """event:/data: framing."""

    @pytest.mark.asyncio
    async def test_update_event(self, status_json):
        reader = _reader("event: update", f"data: {json.dumps(status_json())}", "")

        events = await _drain(reader)

        assert len(events) == 1
        assert isinstance(events[0], UpdateEvent)
        assert events[0].status.id == "100"

    @pytest.mark.asyncio
    async def test_comments_ignored_anywhere(self, status_json):
        reader = _reader(
            ":thump",
            "event: update",
            ":)",
            f"data: {json.dumps(status_json())}",
            ":",
            "",
        )

        events = await _drain(reader)

        assert len(events) == 1
        assert isinstance(events[0], UpdateEvent)

    @pytest.mark.asyncio
    async def test_notification_event(self, notification_json):
        reader = _reader("event: notification", f"data: {json.dumps(notification_json())}")

        event = await reader.next_event()

        assert isinstance(event, NotificationEvent)
        assert event.notification.id == "7"

    @pytest.mark.asyncio
    async def test_delete_event_payload_is_raw_id(self):
        reader = _reader("event: delete", "data: 103704874086360371", "")
        event = await reader.next_event()
        assert event == DeleteEvent(status_id="103704874086360371")

    @pytest.mark.asyncio
    async def test_filters_changed_without_data(self):
        reader = _reader("event: filters_changed", "")
        assert isinstance(await reader.next_event(), FiltersChangedEvent)

    @pytest.mark.asyncio
    async def test_frames_without_blank_separators(self):
        """Completion does not wait for a blank line."""
        reader = _reader("event: delete", "data: 1", "event: delete", "data: 2")
        events = await _drain(reader)
        assert [e.status_id for e in events] == ["1", "2"]

    @pytest.mark.asyncio
    async def test_crlf_and_whitespace(self):
        reader = _reader("event: delete\r\n", "data:  42 \r\n", "\r\n")
        assert await reader.next_event() == DeleteEvent(status_id="42")

    @pytest.mark.asyncio
    async def test_data_before_event_line(self):
        reader = _reader("data: 9", "event: delete")
        assert await reader.next_event() == DeleteEvent(status_id="9")


class TestEnvelopeFraming:
    """Single-line JSON envelopes."""

    @pytest.mark.asyncio
    async def test_filters_changed_envelope(self):
        reader = _reader('{"event":"filters_changed"}')
        assert isinstance(await reader.next_event(), FiltersChangedEvent)

    @pytest.mark.asyncio
    async def test_update_envelope(self, status_json):
        envelope = {
            "stream": ["user"],
            "event": "update",
            "payload": json.dumps(status_json("555")),
        }
        reader = _reader(json.dumps(envelope))

        event = await reader.next_event()

        assert isinstance(event, UpdateEvent)
        assert event.status.id == "555"

    @pytest.mark.asyncio
    async def test_envelope_missing_payload(self):
        reader = _reader('{"event": "update"}')
        with pytest.raises(MissingPayloadError):
            await reader.next_event()

    @pytest.mark.asyncio
    async def test_unparseable_line_then_recovery(self):
        reader = _reader("this is not json", '{"event": "delete", "payload": "3"}')

        with pytest.raises(StreamDecodeError):
            await reader.next_event()
        assert await reader.next_event() == DeleteEvent(status_id="3")


class TestFrameErrors:
    """Errors are per pull and never wedge the reader."""

    @pytest.mark.asyncio
    async def test_unknown_event_then_recovery(self):
        reader = _reader("event: bogus", "", "event: filters_changed", "")

        with pytest.raises(UnknownEventError) as exc_info:
            await reader.next_event()
        assert exc_info.value.event == "bogus"

        assert isinstance(await reader.next_event(), FiltersChangedEvent)
        assert await reader.next_event() is None

    @pytest.mark.asyncio
    async def test_unknown_event_inside_async_for(self):
        """An error from one pull can be caught and iteration resumed."""
        reader = _reader("event: bogus", "event: delete", "data: 4")
        with pytest.raises(UnknownEventError):
            await _drain(reader)
        assert await _drain(reader) == [DeleteEvent(status_id="4")]

    @pytest.mark.asyncio
    async def test_bad_payload(self):
        reader = _reader("event: update", 'data: {"id": "1"}', "event: delete", "data: 2")

        with pytest.raises(StreamDecodeError) as exc_info:
            await reader.next_event()
        assert exc_info.value.event == "update"
        assert await reader.next_event() == DeleteEvent(status_id="2")

    @pytest.mark.asyncio
    async def test_missing_data_waits_for_data_line(self):
        """An event that needs data is held until the data line arrives."""
        reader = _reader("event: delete", ":keepalive", "data: 8")
        assert await reader.next_event() == DeleteEvent(status_id="8")

    @pytest.mark.asyncio
    async def test_missing_data_at_end_of_input_dropped(self):
        """A partial frame at end of input emits nothing and raises nothing."""
        reader = _reader("event: update")
        assert await reader.next_event() is None
        assert reader.state is DecoderState.CLOSED

    @pytest.mark.asyncio
    async def test_missing_data_at_blank_line(self):
        """A blank line forces the incomplete frame out as an error."""
        reader = _reader("event: update", "", "event: delete", "data: 1")

        with pytest.raises(MissingPayloadError) as exc_info:
            await reader.next_event()
        assert exc_info.value.event == "update"
        assert await reader.next_event() == DeleteEvent(status_id="1")

    @pytest.mark.asyncio
    async def test_orphan_data_dropped_at_blank_line(self):
        reader = _reader("data: 1", "", '{"event": "filters_changed"}')
        assert isinstance(await reader.next_event(), FiltersChangedEvent)


class TestReaderLifecycle:
    """End of input, transient errors and closing."""

    @pytest.mark.asyncio
    async def test_transport_error_is_retried_within_pull(self):
        source = ScriptedSource(
            ["event: delete", TransportError("chunk lost"), "data: 6", ""]
        )
        reader = EventReader(source)

        assert await reader.next_event() == DeleteEvent(status_id="6")
        assert await reader.next_event() is None

    @pytest.mark.asyncio
    async def test_failing_source_lets_other_tasks_run(self):
        """Repeated read failures still hand control back to the loop."""
        failures = [TransportError(f"reset {n}") for n in range(50)]
        source = ScriptedSource([*failures, "event: filters_changed"])
        ticks = 0

        async def ticker():
            nonlocal ticks
            while True:
                ticks += 1
                await asyncio.sleep(0)

        task = asyncio.create_task(ticker())
        await asyncio.sleep(0)
        try:
            event = await EventReader(source).next_event()
        finally:
            task.cancel()

        assert isinstance(event, FiltersChangedEvent)
        assert ticks > 10

    @pytest.mark.asyncio
    async def test_end_of_input_is_sticky(self):
        reader = _reader()
        assert await reader.next_event() is None
        assert await reader.next_event() is None

    @pytest.mark.asyncio
    async def test_async_context_manager_closes_source(self):
        source = ScriptedSource(["event: filters_changed"])
        async with EventReader(source) as reader:
            assert isinstance(await reader.next_event(), FiltersChangedEvent)
        assert source.closed
        assert reader.state is DecoderState.CLOSED

    @pytest.mark.asyncio
    async def test_async_line_iterable(self):
        async def lines():
            yield "event: delete"
            yield "data: 11"

        reader = EventReader(IteratorLineSource(lines()))
        assert await _drain(reader) == [DeleteEvent(status_id="11")]


class TestBuildEvent:
    """Test build_event()."""

    def test_unknown(self):
        with pytest.raises(UnknownEventError):
            build_event("Update", "{}")

    def test_filters_changed_ignores_payload(self):
        assert isinstance(build_event("filters_changed", "anything"), FiltersChangedEvent)

    def test_missing_payload(self):
        with pytest.raises(MissingPayloadError):
            build_event("notification", None)

    def test_invalid_json_payload(self):
        with pytest.raises(StreamDecodeError):
            build_event("update", "{not json")
