"""Precise unit tests for exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

from laakhay.social.core import (
    ApiError,
    ClientError,
    DecodeError,
    HTTPStatusError,
    MissingPayloadError,
    ServerError,
    SocialError,
    StreamDecodeError,
    StreamError,
    TransportError,
    UnknownEventError,
    ValidationError,
)
from laakhay.social.models import ApiErrorPayload


def test_api_error_message_includes_description():
    """ApiError message joins error and description."""
    payload = ApiErrorPayload(error="invalid_token", error_description="expired")
    error = ApiError(payload, status_code=401)
    assert str(error) == "invalid_token: expired"
    assert error.error == "invalid_token"
    assert error.error_description == "expired"
    assert error.status_code == 401
    assert isinstance(error, SocialError)


def test_api_error_without_description():
    """ApiError message is just the error when there is no description."""
    error = ApiError(ApiErrorPayload(error="Record not found"))
    assert str(error) == "Record not found"
    assert error.error_description is None
    assert error.status_code is None


def test_http_status_errors_carry_status():
    """ClientError and ServerError share HTTPStatusError."""
    client = ClientError("HTTP 404", status_code=404)
    server = ServerError("HTTP 503", status_code=503)
    assert client.status_code == 404
    assert server.status_code == 503
    assert isinstance(client, HTTPStatusError)
    assert isinstance(server, HTTPStatusError)
    assert not isinstance(client, ServerError)


def test_decode_error_keeps_body():
    """DecodeError keeps the offending body."""
    error = DecodeError("bad", body=b"<html>")
    assert error.body == b"<html>"


def test_unknown_event_error_message():
    """UnknownEventError names the event."""
    error = UnknownEventError("bogus")
    assert str(error) == "Unknown event `bogus`"
    assert error.event == "bogus"
    assert isinstance(error, StreamError)


def test_missing_payload_error_message():
    """MissingPayloadError names the event."""
    error = MissingPayloadError("update")
    assert str(error) == "Missing `data` line for update"
    assert error.event == "update"


def test_stream_decode_error_is_both_stream_and_decode_error():
    """StreamDecodeError can be caught as either parent."""
    error = StreamDecodeError("bad payload", event="update", body="{")
    assert isinstance(error, StreamError)
    assert isinstance(error, DecodeError)
    assert error.event == "update"
    assert error.body == "{"


def test_transport_and_validation_errors_are_social_errors():
    """Every library error derives from SocialError."""
    assert issubclass(TransportError, SocialError)
    assert issubclass(ValidationError, SocialError)
