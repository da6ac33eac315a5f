"""Instance metadata model."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .account import Account


class Instance(BaseModel):
    """Public information about the server."""

    uri: str
    title: str
    description: str = ""
    short_description: str | None = None
    email: str | None = None
    version: str
    urls: dict[str, str] = Field(default_factory=dict)
    stats: dict[str, int] = Field(default_factory=dict)
    thumbnail: str | None = None
    languages: list[str] = Field(default_factory=list)
    registrations: bool | None = None
    approval_required: bool | None = None
    configuration: dict[str, Any] | None = None
    contact_account: Account | None = None

    model_config = ConfigDict(frozen=True, extra="allow")
