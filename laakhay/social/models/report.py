"""Report data model."""

from pydantic import BaseModel, ConfigDict


class Report(BaseModel):
    """A report filed by the authorized user."""

    id: str
    action_taken: bool = False

    model_config = ConfigDict(frozen=True, extra="allow")
