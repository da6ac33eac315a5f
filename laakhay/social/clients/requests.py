"""Request builders for routes that take optional filters or a body."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..core.enums import FilterContext, Visibility
from ..core.exceptions import ValidationError


class StatusesRequest(BaseModel):
    """Filters for an account's statuses.

    Example:
        >>> StatusesRequest(only_media=True, limit=10).to_params()
        {'only_media': 'true', 'limit': '10'}
    """

    only_media: bool = False
    exclude_replies: bool = False
    exclude_reblogs: bool = False
    pinned: bool = False
    tagged: str | None = None
    max_id: str | None = None
    since_id: str | None = None
    min_id: str | None = None
    limit: int | None = Field(None, ge=1)

    model_config = ConfigDict(frozen=True)

    def to_params(self) -> dict[str, str]:
        """Query parameters, omitting unset filters."""
        params: dict[str, str] = {}
        for name, value in self.model_dump(exclude_none=True).items():
            if isinstance(value, bool):
                if value:
                    params[name] = "true"
            else:
                params[name] = str(value)
        return params


class NewStatus(BaseModel):
    """Body for posting a status.

    A status needs text, media, or both.

    Example:
        >>> NewStatus(status="hello", visibility=Visibility.UNLISTED).to_json()
        {'status': 'hello', 'visibility': 'unlisted'}
    """

    status: str | None = None
    in_reply_to_id: str | None = None
    media_ids: list[str] | None = None
    sensitive: bool | None = None
    spoiler_text: str | None = None
    visibility: Visibility | None = None
    language: str | None = None
    scheduled_at: datetime | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _has_content(self) -> NewStatus:
        if not self.status and not self.media_ids:
            raise ValueError("a status needs text or media_ids")
        return self

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class AddFilterRequest(BaseModel):
    """Body for creating or replacing a keyword filter."""

    phrase: str = Field(..., min_length=1)
    context: list[FilterContext] = Field(..., min_length=1)
    irreversible: bool | None = None
    whole_word: bool | None = None
    expires_in: int | None = Field(None, ge=1)

    model_config = ConfigDict(frozen=True)

    def to_json(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)


class ProfileField(BaseModel):
    """One name/value pair shown on a profile."""

    name: str
    value: str

    model_config = ConfigDict(frozen=True)


class UpdateCredsRequest(BaseModel):
    """Profile changes for the authorized user.

    `privacy`, `sensitive` and `language` are posting defaults and travel
    under the `source` key.
    """

    display_name: str | None = None
    note: str | None = None
    locked: bool | None = None
    bot: bool | None = None
    discoverable: bool | None = None
    privacy: Visibility | None = None
    sensitive: bool | None = None
    language: str | None = None
    fields_attributes: list[ProfileField] | None = None

    model_config = ConfigDict(frozen=True)

    def to_json(self) -> dict[str, Any]:
        """JSON body with unset values omitted.

        Raises:
            ValidationError: If no field is set
        """
        body = self.model_dump(mode="json", exclude_none=True)
        source = {
            key: body.pop(key) for key in ("privacy", "sensitive", "language") if key in body
        }
        if source:
            body["source"] = source
        if not body:
            raise ValidationError("update_credentials needs at least one field to change")
        return body
