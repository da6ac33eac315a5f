"""Status data model and the entities embedded in it."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import MediaType, Visibility
from .account import Account, Emoji


class Attachment(BaseModel):
    """Media attached to a status."""

    id: str
    type: MediaType | str = Field(MediaType.UNKNOWN, union_mode="left_to_right")
    url: str | None = None
    preview_url: str | None = None
    remote_url: str | None = None
    text_url: str | None = None
    meta: dict[str, Any] | None = None
    description: str | None = None
    blurhash: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class Mention(BaseModel):
    id: str
    username: str
    acct: str
    url: str

    model_config = ConfigDict(frozen=True)


class Tag(BaseModel):
    name: str
    url: str

    model_config = ConfigDict(frozen=True, extra="allow")


class Application(BaseModel):
    name: str
    website: str | None = None

    model_config = ConfigDict(frozen=True)


class Card(BaseModel):
    """Preview card of a link in a status."""

    url: str
    title: str
    description: str = ""
    type: str | None = None
    author_name: str | None = None
    author_url: str | None = None
    provider_name: str | None = None
    provider_url: str | None = None
    html: str | None = None
    width: int | None = None
    height: int | None = None
    image: str | None = None
    embed_url: str | None = None
    blurhash: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")


class Status(BaseModel):
    """A status (toot) posted by an account."""

    id: str = Field(..., min_length=1)
    uri: str
    url: str | None = None
    created_at: datetime
    account: Account
    content: str = ""
    visibility: Visibility = Visibility.PUBLIC
    sensitive: bool = False
    spoiler_text: str = ""
    in_reply_to_id: str | None = None
    in_reply_to_account_id: str | None = None
    reblog: Status | None = None
    media_attachments: list[Attachment] = Field(default_factory=list)
    mentions: list[Mention] = Field(default_factory=list)
    tags: list[Tag] = Field(default_factory=list)
    emojis: list[Emoji] = Field(default_factory=list)
    reblogs_count: int = 0
    favourites_count: int = 0
    replies_count: int = 0
    application: Application | None = None
    card: Card | None = None
    language: str | None = None
    edited_at: datetime | None = None
    favourited: bool | None = None
    reblogged: bool | None = None
    muted: bool | None = None
    bookmarked: bool | None = None
    pinned: bool | None = None

    model_config = ConfigDict(frozen=True, extra="allow")

    @property
    def is_reblog(self) -> bool:
        return self.reblog is not None


class Context(BaseModel):
    """Statuses above and below a status in its thread."""

    ancestors: list[Status] = Field(default_factory=list)
    descendants: list[Status] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
