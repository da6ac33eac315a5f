"""JSON entity codec.

Every REST route decodes its body through `decode_body_or_api_error`: the
body is tried as the target type first and, failing that, as an API error
payload. Streaming payloads use `decode` directly, without the fallback.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ...core.exceptions import ApiError, ClientError, DecodeError, ServerError
from ...models.api_error import ApiErrorPayload
from .response import HTTPResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

_BODY_PREVIEW = 200


@lru_cache(maxsize=128)
def _adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


def _type_name(tp: Any) -> str:
    return getattr(tp, "__name__", None) or str(tp)


def _preview(body: bytes | str) -> str:
    text = body.decode("utf-8", errors="replace") if isinstance(body, bytes) else body
    return text if len(text) <= _BODY_PREVIEW else f"{text[:_BODY_PREVIEW]}..."


def decode(tp: type[T] | Any, body: bytes | str) -> T:
    """Decode a JSON document into `tp`.

    Raises:
        DecodeError: If the document is not valid JSON or does not match `tp`
    """
    try:
        return _adapter(tp).validate_json(body)
    except PydanticValidationError as e:
        raise DecodeError(
            f"Failed to decode {_type_name(tp)}: {e.error_count()} validation error(s)",
            body=body,
        ) from e


def try_decode_api_error(body: bytes | str) -> ApiErrorPayload | None:
    """Return the API error payload in `body`, or None if it is not one."""
    if not body:
        return None
    try:
        return ApiErrorPayload.model_validate_json(body)
    except PydanticValidationError:
        return None


def raise_for_error_status(response: HTTPResponse) -> None:
    """Raise for 4xx/5xx responses.

    A recognisable error body becomes `ApiError`; anything else becomes
    `ClientError` or `ServerError` keyed by the status class.
    """
    if not response.is_error:
        return
    payload = try_decode_api_error(response.body)
    if payload is not None:
        raise ApiError(payload, status_code=response.status)
    message = f"HTTP {response.status} for {response.url or 'request'}"
    if response.status >= 500:
        raise ServerError(message, status_code=response.status)
    raise ClientError(message, status_code=response.status)


def decode_body_or_api_error(response: HTTPResponse, tp: type[T] | Any) -> T:
    """Decode a response body as `tp`, falling back to the API error type.

    Raises:
        ApiError: If the body is an API error payload
        ClientError: On 4xx without an error payload
        ServerError: On 5xx without an error payload
        DecodeError: If the body is neither `tp` nor an error payload
    """
    raise_for_error_status(response)
    try:
        value = decode(tp, response.body)
    except DecodeError:
        payload = try_decode_api_error(response.body)
        if payload is not None:
            raise ApiError(payload, status_code=response.status) from None
        logger.error(f"Undecodable {_type_name(tp)} body: {_preview(response.body)}")
        raise
    logger.debug(f"Decoded {_type_name(tp)} from {response.url or 'response'}")
    return value
