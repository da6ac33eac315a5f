"""Core components."""

from .enums import (
    EventType,
    FilterContext,
    MediaType,
    NotificationType,
    StreamKind,
    Visibility,
)
from .exceptions import (
    ApiError,
    ClientError,
    DecodeError,
    HTTPStatusError,
    MissingPayloadError,
    ServerError,
    SocialError,
    StreamDecodeError,
    StreamError,
    TransportError,
    UnknownEventError,
    ValidationError,
)

__all__ = [
    # Enums
    "EventType",
    "FilterContext",
    "MediaType",
    "NotificationType",
    "StreamKind",
    "Visibility",
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
