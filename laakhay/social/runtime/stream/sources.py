"""Line sources the event reader can consume.

Any object with `async read_line() -> str | None` and `async close()` works;
`None` from `read_line()` means end of input. Concrete sources:

- `ResponseLineSource`: chunked HTTP streaming response
- `WebSocketLineSource`: WebSocket connection, one message per line
- `IteratorLineSource`: in-memory or caller-provided iterables
"""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Iterable
from typing import Protocol, runtime_checkable

from ..rest.line_source import ResponseLineSource
from ..ws.transport import WebSocketLineSource


@runtime_checkable
class LineSource(Protocol):
    async def read_line(self) -> str | None: ...

    async def close(self) -> None: ...


class IteratorLineSource:
    """Line source over a sync or async iterable of strings."""

    def __init__(self, lines: Iterable[str] | AsyncIterable[str]) -> None:
        self._async: AsyncIterator[str] | None = None
        self._sync = None
        if isinstance(lines, AsyncIterable):
            self._async = aiter(lines)
        else:
            self._sync = iter(lines)

    async def read_line(self) -> str | None:
        if self._async is not None:
            try:
                return await anext(self._async)
            except StopAsyncIteration:
                return None
        if self._sync is not None:
            return next(self._sync, None)
        return None

    async def close(self) -> None:
        if self._async is not None and hasattr(self._async, "aclose"):
            await self._async.aclose()
        self._async = None
        self._sync = None


__all__ = [
    "IteratorLineSource",
    "LineSource",
    "ResponseLineSource",
    "WebSocketLineSource",
]
