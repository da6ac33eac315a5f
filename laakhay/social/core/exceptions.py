"""Custom exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.api_error import ApiErrorPayload


class SocialError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(SocialError):
    """Underlying HTTP or WebSocket I/O failed.

    Fatal for REST calls. Stream readers treat it as transient and keep
    reading on the same pull.
    """

    pass


class DecodeError(SocialError):
    """A response body or stream payload did not match the expected type."""

    def __init__(self, message: str, body: bytes | str | None = None) -> None:
        super().__init__(message)
        self.body = body


class ApiError(SocialError):
    """Well-formed error payload returned by the server instead of an entity."""

    def __init__(
        self,
        payload: ApiErrorPayload,
        status_code: int | None = None,
    ) -> None:
        message = payload.error
        if payload.error_description:
            message = f"{message}: {payload.error_description}"
        super().__init__(message)
        self.payload = payload
        self.status_code = status_code

    @property
    def error(self) -> str:
        return self.payload.error

    @property
    def error_description(self) -> str | None:
        return self.payload.error_description


class HTTPStatusError(SocialError):
    """Error status without a recognisable error payload."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class ClientError(HTTPStatusError):
    """4xx response."""

    pass


class ServerError(HTTPStatusError):
    """5xx response."""

    pass


class StreamError(SocialError):
    """A streaming frame could not be turned into an event.

    The reader discards the offending frame and stays usable.
    """

    def __init__(self, message: str, event: str | None = None) -> None:
        super().__init__(message)
        self.event = event


class UnknownEventError(StreamError):
    """Frame named an event this library does not know."""

    def __init__(self, event: str) -> None:
        super().__init__(f"Unknown event `{event}`", event=event)


class MissingPayloadError(StreamError):
    """Frame named an event that requires a payload but carried none."""

    def __init__(self, event: str) -> None:
        super().__init__(f"Missing `data` line for {event}", event=event)


class StreamDecodeError(StreamError, DecodeError):
    """Frame envelope or payload was not valid for its event."""

    def __init__(self, message: str, event: str | None = None, body: str | None = None) -> None:
        StreamError.__init__(self, message, event=event)
        self.body = body


class ValidationError(SocialError):
    """Invalid client configuration or arguments."""

    pass
