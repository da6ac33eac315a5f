"""REST runtime: transport, codec, Link parsing and pagination."""

from .codec import decode, decode_body_or_api_error, raise_for_error_status, try_decode_api_error
from .http_client import HTTPClient
from .line_source import ResponseLineSource
from .links import LinkRelations, parse_link_header
from .page import Page
from .response import HTTPResponse

__all__ = [
    "HTTPClient",
    "HTTPResponse",
    "LinkRelations",
    "Page",
    "ResponseLineSource",
    "decode",
    "decode_body_or_api_error",
    "parse_link_header",
    "raise_for_error_status",
    "try_decode_api_error",
]
