"""Core enumerations shared by models, routes and the stream decoder.

Key Types:
    - Visibility: Who can see a status
    - NotificationType: What triggered a notification
    - MediaType: Kind of media attachment
    - EventType: Streaming event names as sent on the wire
    - StreamKind: Streaming timelines the server exposes
    - FilterContext: Timelines a keyword filter applies to
"""

from enum import Enum


class Visibility(str, Enum):
    """Status visibility levels."""

    PUBLIC = "public"
    UNLISTED = "unlisted"
    PRIVATE = "private"
    DIRECT = "direct"


class NotificationType(str, Enum):
    """Notification kinds.

    Servers add new kinds over time; models keep the raw string when the
    value is not listed here.
    """

    MENTION = "mention"
    STATUS = "status"
    REBLOG = "reblog"
    FOLLOW = "follow"
    FOLLOW_REQUEST = "follow_request"
    FAVOURITE = "favourite"
    POLL = "poll"
    UPDATE = "update"


class MediaType(str, Enum):
    """Media attachment kinds."""

    IMAGE = "image"
    GIFV = "gifv"
    VIDEO = "video"
    AUDIO = "audio"
    UNKNOWN = "unknown"


class EventType(str, Enum):
    """Streaming event names (case-sensitive, exact match on the wire)."""

    UPDATE = "update"
    NOTIFICATION = "notification"
    DELETE = "delete"
    FILTERS_CHANGED = "filters_changed"

    @property
    def requires_payload(self) -> bool:
        return self is not EventType.FILTERS_CHANGED

    @classmethod
    def from_name(cls, name: str) -> "EventType | None":
        """Map a wire event name to an EventType, or None when unknown."""
        try:
            return cls(name)
        except ValueError:
            return None


class StreamKind(str, Enum):
    """Streaming timelines.

    The value is the `stream` parameter used by the WebSocket endpoint.
    """

    USER = "user"
    PUBLIC = "public"
    PUBLIC_LOCAL = "public:local"
    HASHTAG = "hashtag"
    HASHTAG_LOCAL = "hashtag:local"
    LIST = "list"
    DIRECT = "direct"

    @property
    def http_path(self) -> str:
        """Path of the equivalent chunked-HTTP streaming endpoint."""
        return _HTTP_PATHS[self]


_HTTP_PATHS = {
    StreamKind.USER: "/api/v1/streaming/user",
    StreamKind.PUBLIC: "/api/v1/streaming/public",
    StreamKind.PUBLIC_LOCAL: "/api/v1/streaming/public/local",
    StreamKind.HASHTAG: "/api/v1/streaming/hashtag",
    StreamKind.HASHTAG_LOCAL: "/api/v1/streaming/hashtag/local",
    StreamKind.LIST: "/api/v1/streaming/list",
    StreamKind.DIRECT: "/api/v1/streaming/direct",
}


class FilterContext(str, Enum):
    """Where a keyword filter applies."""

    HOME = "home"
    NOTIFICATIONS = "notifications"
    PUBLIC = "public"
    THREAD = "thread"
    ACCOUNT = "account"
