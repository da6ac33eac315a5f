"""Line source over a streaming (chunked) HTTP response."""

from __future__ import annotations

import asyncio
import logging

import aiohttp

from ...core.exceptions import TransportError

logger = logging.getLogger(__name__)


class ResponseLineSource:
    """Reads newline-delimited UTF-8 text from an open aiohttp response.

    `read_line()` returns None at end of input, which is when the body
    reader returns no more bytes. aiohttp marks a response closed as soon
    as the whole body has arrived, while unread lines are still buffered,
    so the response's `closed` flag is not used for that. A read error on a
    body that is still readable raises `TransportError`; once aiohttp has
    marked the body as broken every further read would fail the same way,
    so that is reported as end of input instead.
    """

    def __init__(self, response: aiohttp.ClientResponse) -> None:
        self._response = response
        self._exhausted = False

    @property
    def closed(self) -> bool:
        return self._exhausted

    async def read_line(self) -> str | None:
        if self._exhausted:
            return None
        try:
            raw = await self._response.content.readline()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            if self._response.content.exception() is not None:
                logger.warning(f"Streaming response broken, closing: {e}")
                self._exhausted = True
                self._response.release()
                return None
            raise TransportError(f"Streaming read failed: {e}") from e
        if not raw:
            self._exhausted = True
            return None
        return raw.decode("utf-8", errors="replace")

    async def close(self) -> None:
        self._exhausted = True
        self._response.close()
