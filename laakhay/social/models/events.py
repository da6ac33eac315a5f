"""Event types produced by the streaming API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Union

from pydantic import BaseModel, ConfigDict

from ..core.enums import EventType
from .notification import Notification
from .status import Status


@dataclass(frozen=True)
class UpdateEvent:
    """A new status appeared on the timeline."""

    event_type: ClassVar[EventType] = EventType.UPDATE

    status: Status


@dataclass(frozen=True)
class NotificationEvent:
    """The authorized user received a notification."""

    event_type: ClassVar[EventType] = EventType.NOTIFICATION

    notification: Notification


@dataclass(frozen=True)
class DeleteEvent:
    """A status was deleted."""

    event_type: ClassVar[EventType] = EventType.DELETE

    status_id: str


@dataclass(frozen=True)
class FiltersChangedEvent:
    """The user's keyword filters changed; cached filters are stale."""

    event_type: ClassVar[EventType] = EventType.FILTERS_CHANGED


StreamEvent = Union[UpdateEvent, NotificationEvent, DeleteEvent, FiltersChangedEvent]


class StreamEnvelope(BaseModel):
    """Single-line JSON framing used by the WebSocket endpoint.

    `payload` is itself a JSON document encoded as a string.
    """

    event: str
    payload: str | None = None
    stream: list[str] | None = None

    model_config = ConfigDict(frozen=True)
