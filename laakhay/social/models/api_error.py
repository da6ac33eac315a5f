"""Error body returned by the API."""

from pydantic import BaseModel, ConfigDict


class ApiErrorPayload(BaseModel):
    """`{"error": ..., "error_description": ...}` error body.

    `error` is required so that an arbitrary JSON object is never mistaken
    for an error response.
    """

    error: str
    error_description: str | None = None

    model_config = ConfigDict(frozen=True)
