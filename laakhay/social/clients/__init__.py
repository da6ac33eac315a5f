"""High-level API clients."""

from .mastodon import MastodonClient
from .requests import (
    AddFilterRequest,
    NewStatus,
    ProfileField,
    StatusesRequest,
    UpdateCredsRequest,
)

__all__ = [
    "AddFilterRequest",
    "MastodonClient",
    "NewStatus",
    "ProfileField",
    "StatusesRequest",
    "UpdateCredsRequest",
]
