"""Relationship data model."""

from pydantic import BaseModel, ConfigDict


class Relationship(BaseModel):
    """How the authorized user relates to another account."""

    id: str
    following: bool = False
    followed_by: bool = False
    blocking: bool = False
    blocked_by: bool = False
    muting: bool = False
    muting_notifications: bool = False
    requested: bool = False
    domain_blocking: bool = False
    showing_reblogs: bool = True
    endorsed: bool = False
    notifying: bool | None = None
    note: str | None = None

    model_config = ConfigDict(frozen=True, extra="allow")
