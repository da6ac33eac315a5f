"""Notification data model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import NotificationType
from .account import Account
from .status import Status


class Notification(BaseModel):
    """Something that happened to the authorized user's account."""

    id: str = Field(..., min_length=1)
    type: NotificationType | str = Field(..., union_mode="left_to_right")
    created_at: datetime
    account: Account
    status: Status | None = None

    model_config = ConfigDict(frozen=True, extra="allow")
