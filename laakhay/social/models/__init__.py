"""Data models for API entities and streaming events.

Architecture:
    REST entities are Pydantic v2 models, frozen so that a fetched page can
    never be modified after the fact. Unknown server fields are kept as
    extras on the main entities (Account, Status, Notification, ...) so newer
    server versions keep decoding.

    Streaming events are small frozen dataclasses, one per event kind, that
    wrap the decoded entity.

Model Categories:
    - Entities: Account, Status, Notification, Relationship, Context, Card,
      Filter, Instance, Report
    - Search: SearchResult, SearchResultV2
    - Embedded: Attachment, Emoji, Mention, MetadataField, Source, Tag
    - Errors: ApiErrorPayload
    - Events: UpdateEvent, NotificationEvent, DeleteEvent, FiltersChangedEvent
"""

from .account import Account, Emoji, MetadataField, Source
from .api_error import ApiErrorPayload
from .events import (
    DeleteEvent,
    FiltersChangedEvent,
    NotificationEvent,
    StreamEnvelope,
    StreamEvent,
    UpdateEvent,
)
from .filter import Filter
from .instance import Instance
from .notification import Notification
from .relationship import Relationship
from .report import Report
from .search import SearchResult, SearchResultV2
from .status import Application, Attachment, Card, Context, Mention, Status, Tag

__all__ = [
    "Account",
    "ApiErrorPayload",
    "Application",
    "Attachment",
    "Card",
    "Context",
    "DeleteEvent",
    "Emoji",
    "Filter",
    "FiltersChangedEvent",
    "Instance",
    "Mention",
    "MetadataField",
    "Notification",
    "NotificationEvent",
    "Relationship",
    "Report",
    "SearchResult",
    "SearchResultV2",
    "Source",
    "Status",
    "StreamEnvelope",
    "StreamEvent",
    "Tag",
    "UpdateEvent",
]
