"""Account data model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import Visibility


class Emoji(BaseModel):
    """Custom emoji."""

    shortcode: str
    url: str
    static_url: str
    visible_in_picker: bool = True
    category: str | None = None

    model_config = ConfigDict(frozen=True)


class MetadataField(BaseModel):
    """Profile metadata as a name-value pair."""

    name: str
    value: str
    verified_at: datetime | None = None

    model_config = ConfigDict(frozen=True)


class Source(BaseModel):
    """Posting preferences, returned with the user's own account."""

    note: str = ""
    fields: list[MetadataField] = Field(default_factory=list)
    privacy: Visibility | None = None
    sensitive: bool | None = None
    language: str | None = None
    follow_requests_count: int | None = None

    model_config = ConfigDict(frozen=True)


class Account(BaseModel):
    """A user and their profile.

    Fields the server sends but this model does not declare are kept as
    extra attributes so newer servers do not break decoding.
    """

    id: str = Field(..., min_length=1)
    username: str
    acct: str
    url: str | None = None
    display_name: str = ""
    note: str = ""
    avatar: str | None = None
    avatar_static: str | None = None
    header: str | None = None
    header_static: str | None = None
    locked: bool = False
    bot: bool | None = None
    discoverable: bool | None = None
    group: bool | None = None
    created_at: datetime | None = None
    last_status_at: str | None = None
    statuses_count: int = 0
    followers_count: int = 0
    following_count: int = 0
    emojis: list[Emoji] = Field(default_factory=list)
    fields: list[MetadataField] = Field(default_factory=list)
    moved: Account | None = None
    source: Source | None = None
    suspended: bool | None = None
    mute_expires_at: datetime | None = None

    model_config = ConfigDict(frozen=True, extra="allow")

    @property
    def is_remote(self) -> bool:
        """True when the account lives on another instance."""
        return "@" in self.acct
