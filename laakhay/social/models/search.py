"""Search results."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .account import Account
from .status import Status, Tag


class SearchResult(BaseModel):
    """Results of `/api/v1/search`; hashtags are plain names."""

    accounts: list[Account] = Field(default_factory=list)
    statuses: list[Status] = Field(default_factory=list)
    hashtags: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class SearchResultV2(BaseModel):
    """Results of `/api/v2/search`; hashtags are full tag entities."""

    accounts: list[Account] = Field(default_factory=list)
    statuses: list[Status] = Field(default_factory=list)
    hashtags: list[Tag] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
