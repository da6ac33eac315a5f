"""Client configuration and API constants.

This module centralizes the paths, defaults and configuration objects used by
the REST and streaming layers so the client itself can stay small.
"""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator

API_V1 = "/api/v1"
API_V2 = "/api/v2"
WS_STREAMING_PATH = f"{API_V1}/streaming"

DEFAULT_USER_AGENT = "laakhay-social/0.1.0"


class ClientData(BaseModel):
    """Instance URL and credentials of an authorized application.

    Registration and credential storage happen elsewhere; this only carries
    what the client needs to issue requests.
    """

    base: str = Field(..., min_length=1)
    token: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    redirect: str | None = None

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @field_validator("base")
    @classmethod
    def normalize_base(cls, v: str) -> str:
        """Default to https and drop the trailing slash."""
        if "://" not in v:
            v = f"https://{v}"
        return v.rstrip("/")


@dataclass(frozen=True)
class HTTPConfig:
    timeout: float = 30.0
    user_agent: str = DEFAULT_USER_AGENT
    # Streaming responses never finish; only the connect phase is bounded.
    stream_connect_timeout: float = 30.0


@dataclass(frozen=True)
class TransportConfig:
    ping_interval: float | None = 30.0
    ping_timeout: float | None = 10.0
    close_timeout: float = 10.0
    max_size: int | None = None  # bytes; None = websockets default
    open_timeout: float = 10.0
