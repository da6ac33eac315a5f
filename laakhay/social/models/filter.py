"""Keyword filter data model."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import FilterContext


class Filter(BaseModel):
    """Keyword filter applied to timelines.

    Changes to these are announced on the user stream with a
    `filters_changed` event.
    """

    id: str = Field(..., min_length=1)
    phrase: str
    context: list[Annotated[FilterContext | str, Field(union_mode="left_to_right")]] = Field(
        default_factory=list
    )
    expires_at: datetime | None = None
    irreversible: bool = False
    whole_word: bool = True

    model_config = ConfigDict(frozen=True, extra="allow")
