"""Laakhay Social - Typed async client for the Mastodon API."""

from .clients import (
    AddFilterRequest,
    MastodonClient,
    NewStatus,
    StatusesRequest,
    UpdateCredsRequest,
)
from .config import ClientData, HTTPConfig, TransportConfig
from .core import (
    ApiError,
    ClientError,
    DecodeError,
    EventType,
    FilterContext,
    HTTPStatusError,
    MediaType,
    MissingPayloadError,
    NotificationType,
    ServerError,
    SocialError,
    StreamDecodeError,
    StreamError,
    StreamKind,
    TransportError,
    UnknownEventError,
    ValidationError,
    Visibility,
)
from .models import (
    Account,
    ApiErrorPayload,
    Attachment,
    Card,
    Context,
    DeleteEvent,
    Filter,
    FiltersChangedEvent,
    Instance,
    Notification,
    NotificationEvent,
    Relationship,
    Report,
    SearchResult,
    SearchResultV2,
    Status,
    StreamEvent,
    UpdateEvent,
)
from .runtime.rest import HTTPClient, LinkRelations, Page, parse_link_header
from .runtime.stream import EventReader, IteratorLineSource, LineSource

__version__ = "0.1.0"

__all__ = [
    # Client
    "MastodonClient",
    "StatusesRequest",
    "NewStatus",
    "AddFilterRequest",
    "UpdateCredsRequest",
    "ClientData",
    "HTTPConfig",
    "TransportConfig",
    "HTTPClient",
    # Pagination
    "Page",
    "LinkRelations",
    "parse_link_header",
    # Streaming
    "EventReader",
    "LineSource",
    "IteratorLineSource",
    # Enums
    "EventType",
    "FilterContext",
    "MediaType",
    "NotificationType",
    "StreamKind",
    "Visibility",
    # Models
    "Account",
    "ApiErrorPayload",
    "Attachment",
    "Card",
    "Context",
    "Notification",
    "Relationship",
    "Status",
    "Filter",
    "Instance",
    "Report",
    "SearchResult",
    "SearchResultV2",
    "StreamEvent",
    "UpdateEvent",
    "NotificationEvent",
    "DeleteEvent",
    "FiltersChangedEvent",
    # Exceptions
    "SocialError",
    "TransportError",
    "DecodeError",
    "ApiError",
    "HTTPStatusError",
    "ClientError",
    "ServerError",
    "StreamError",
    "UnknownEventError",
    "MissingPayloadError",
    "StreamDecodeError",
    "ValidationError",
]
