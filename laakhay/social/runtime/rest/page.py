"""One batch of list results plus navigation to the adjacent batches.

Architecture:
    List endpoints return a JSON array and a `Link` header carrying the
    `next` (older) and `prev` (newer) batch URLs. A `Page` wraps one such
    response. It never changes after construction: following a link
    returns a new `Page` built from the new response.

    `items_iter()` flattens the chain into one async sequence. Each pull past
    the end of a batch awaits a network fetch, so a single pull can take as
    long as the request does.

Concurrency:
    A Page is meant to be driven by one task at a time. Pages share the
    client's HTTPClient, which they only use to issue GETs.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Iterable, Iterator
from contextlib import aclosing
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ...core.exceptions import SocialError
from .codec import decode_body_or_api_error
from .links import LinkRelations
from .response import HTTPResponse
from .telemetry import log_page_fetched

if TYPE_CHECKING:
    from .http_client import HTTPClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Page(Generic[T]):
    """Page of items with `next`/`prev` links."""

    __slots__ = ("_http", "_item_type", "_items", "next_url", "prev_url")

    def __init__(
        self,
        http: HTTPClient,
        item_type: type[T] | Any,
        items: Iterable[T],
        next_url: str | None = None,
        prev_url: str | None = None,
    ) -> None:
        self._http = http
        self._item_type = item_type
        self._items: tuple[T, ...] = tuple(items)
        self.next_url = next_url
        self.prev_url = prev_url

    @classmethod
    def from_response(
        cls,
        http: HTTPClient,
        item_type: type[T] | Any,
        response: HTTPResponse,
    ) -> Page[T]:
        """Build a page from a list endpoint response.

        Raises:
            ApiError, ClientError, ServerError, DecodeError: As raised by
                `decode_body_or_api_error`
        """
        items = decode_body_or_api_error(response, list[item_type])
        links = LinkRelations.from_header(response.header("Link"))
        return cls(http, item_type, items, next_url=links.next, prev_url=links.prev)

    @property
    def items(self) -> tuple[T, ...]:
        """Items of this batch, in server order."""
        return self._items

    @property
    def item_type(self) -> type[T] | Any:
        return self._item_type

    @property
    def has_next(self) -> bool:
        return self.next_url is not None

    @property
    def has_prev(self) -> bool:
        return self.prev_url is not None

    async def next_page(self) -> Page[T] | None:
        """Fetch the batch after this one.

        Returns None without issuing a request when there is no `next` link.
        Errors propagate; nothing is retried.
        """
        return await self._follow(self.next_url, "next")

    async def prev_page(self) -> Page[T] | None:
        """Fetch the batch before this one. Mirror of `next_page`."""
        return await self._follow(self.prev_url, "prev")

    async def _follow(self, url: str | None, direction: str) -> Page[T] | None:
        if url is None:
            return None
        response = await self._http.get(url)
        page = type(self).from_response(self._http, self._item_type, response)
        log_page_fetched(
            direction=direction,
            url=url,
            items=len(page),
            has_next=page.has_next,
            has_prev=page.has_prev,
        )
        return page

    async def items_iter(self) -> AsyncIterator[T]:
        """Yield every item from this page onwards, fetching lazily.

        The next batch is requested only once the consumer asks for an item
        past the end of the current one. Iteration ends at the first page
        without a `next` link or at the first failed fetch; failures are
        logged and otherwise dropped. Use `next_page()` to see them.
        """
        page: Page[T] | None = self
        while page is not None:
            for item in page.items:
                yield item
            if not page.has_next:
                return
            try:
                page = await page.next_page()
            except SocialError as e:
                logger.warning(f"Stopping pagination at {page.next_url}: {e}")
                return

    async def collect(self, limit: int | None = None) -> list[T]:
        """Gather up to `limit` items (all when None) via `items_iter()`."""
        out: list[T] = []
        if limit is not None and limit <= 0:
            return out
        async with aclosing(self.items_iter()) as items:
            async for item in items:
                out.append(item)
                if limit is not None and len(out) >= limit:
                    break
        return out

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return (
            f"Page(items={len(self._items)}, next_url={self.next_url!r}, "
            f"prev_url={self.prev_url!r})"
        )
