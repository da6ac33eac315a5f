"""Mastodon API client.

Architecture:
    `MastodonClient` is a thin route table over `HTTPClient`. List routes
    return a `Page`, single-entity routes return the decoded model, and
    streaming routes return an `EventReader` over either a chunked HTTP
    response or a WebSocket connection.

    Every body goes through `decode_body_or_api_error`, so all routes fail
    the same way: `ApiError` for error payloads, `ClientError`/`ServerError`
    for bare error statuses, `DecodeError` for unexpected bodies and
    `TransportError` for I/O.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, TypeVar
from urllib.parse import urlencode, urlsplit, urlunsplit

from ..config import API_V1, API_V2, WS_STREAMING_PATH, ClientData, HTTPConfig, TransportConfig
from ..core.enums import StreamKind
from ..core.exceptions import ValidationError
from ..models import (
    Account,
    Card,
    Context,
    Emoji,
    Filter,
    Instance,
    Notification,
    Relationship,
    Report,
    SearchResult,
    SearchResultV2,
    Status,
)
from ..runtime.rest import HTTPClient, Page, decode_body_or_api_error
from ..runtime.stream import EventReader
from ..runtime.ws import WebSocketTransport
from .requests import AddFilterRequest, NewStatus, StatusesRequest, UpdateCredsRequest

logger = logging.getLogger(__name__)

T = TypeVar("T")

Empty = dict[str, Any]

_WS_SCHEMES = {"http": "ws", "https": "wss"}


def _route(path: str, version: str = API_V1) -> str:
    return f"{version}/{path}"


def _query(**params: Any) -> dict[str, str]:
    """Drop None values and render booleans the way the API expects."""
    out: dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            out[key] = "true" if value else "false"
        else:
            out[key] = str(value)
    return out


class MastodonClient:
    """Authenticated client for one Mastodon instance."""

    def __init__(
        self,
        data: ClientData,
        *,
        http_config: HTTPConfig | None = None,
        ws_config: TransportConfig | None = None,
        http: HTTPClient | None = None,
        ws: WebSocketTransport | None = None,
    ) -> None:
        self.data = data
        self._http = http or HTTPClient(data, http_config)
        self._ws = ws or WebSocketTransport(ws_config)

    @property
    def http(self) -> HTTPClient:
        return self._http

    # --- plumbing ---------------------------------------------------------

    async def _get(self, path: str, tp: type[T] | Any, params: Any = None) -> T:
        response = await self._http.get(_route(path), params=params)
        return decode_body_or_api_error(response, tp)

    async def _post(
        self, path: str, tp: type[T] | Any, params: Any = None, json: Any = None
    ) -> T:
        response = await self._http.post(_route(path), params=params, json=json)
        return decode_body_or_api_error(response, tp)

    async def _put(self, path: str, tp: type[T] | Any, json: Any = None) -> T:
        response = await self._http.put(_route(path), json=json)
        return decode_body_or_api_error(response, tp)

    async def _patch(self, path: str, tp: type[T] | Any, json: Any = None) -> T:
        response = await self._http.patch(_route(path), json=json)
        return decode_body_or_api_error(response, tp)

    async def _delete(self, path: str, tp: type[T] | Any, params: Any = None) -> T:
        response = await self._http.delete(_route(path), params=params)
        return decode_body_or_api_error(response, tp)

    async def _paged(self, path: str, tp: type[T] | Any, params: Any = None) -> Page[T]:
        response = await self._http.get(_route(path), params=params)
        return Page.from_response(self._http, tp, response)

    # --- paged routes -----------------------------------------------------

    async def favourites(self) -> Page[Status]:
        return await self._paged("favourites", Status)

    async def bookmarks(self) -> Page[Status]:
        return await self._paged("bookmarks", Status)

    async def blocks(self) -> Page[Account]:
        return await self._paged("blocks", Account)

    async def domain_blocks(self) -> Page[str]:
        return await self._paged("domain_blocks", str)

    async def mutes(self) -> Page[Account]:
        return await self._paged("mutes", Account)

    async def follow_requests(self) -> Page[Account]:
        return await self._paged("follow_requests", Account)

    async def endorsements(self) -> Page[Account]:
        return await self._paged("endorsements", Account)

    async def custom_emojis(self) -> Page[Emoji]:
        return await self._paged("custom_emojis", Emoji)

    async def home_timeline(self, *, limit: int | None = None) -> Page[Status]:
        return await self._paged("timelines/home", Status, _query(limit=limit))

    async def public_timeline(
        self, *, local: bool = False, limit: int | None = None
    ) -> Page[Status]:
        return await self._paged("timelines/public", Status, _query(local=local, limit=limit))

    async def hashtag_timeline(
        self, hashtag: str, *, local: bool = False, limit: int | None = None
    ) -> Page[Status]:
        """Statuses tagged `hashtag` (without the leading `#`)."""
        tag = hashtag.lstrip("#")
        if not tag:
            raise ValidationError("hashtag must be a non-empty string")
        return await self._paged(f"timelines/tag/{tag}", Status, _query(local=local, limit=limit))

    async def list_timeline(self, list_id: str, *, limit: int | None = None) -> Page[Status]:
        return await self._paged(f"timelines/list/{list_id}", Status, _query(limit=limit))

    async def notifications(self, *, limit: int | None = None) -> Page[Notification]:
        return await self._paged("notifications", Notification, _query(limit=limit))

    async def search_accounts(
        self, q: str, *, limit: int | None = None, following: bool = False
    ) -> Page[Account]:
        return await self._paged(
            "accounts/search", Account, _query(q=q, limit=limit, following=following)
        )

    async def followers(self, account_id: str) -> Page[Account]:
        return await self._paged(f"accounts/{account_id}/followers", Account)

    async def following(self, account_id: str) -> Page[Account]:
        return await self._paged(f"accounts/{account_id}/following", Account)

    async def reblogged_by(self, status_id: str) -> Page[Account]:
        return await self._paged(f"statuses/{status_id}/reblogged_by", Account)

    async def favourited_by(self, status_id: str) -> Page[Account]:
        return await self._paged(f"statuses/{status_id}/favourited_by", Account)

    async def statuses(
        self, account_id: str, request: StatusesRequest | None = None
    ) -> Page[Status]:
        """Statuses posted by an account, optionally filtered."""
        params = request.to_params() if request is not None else None
        return await self._paged(f"accounts/{account_id}/statuses", Status, params)

    async def relationships(self, ids: Sequence[str]) -> Page[Relationship]:
        """Relationships between the authorized user and each of `ids`."""
        if not ids:
            raise ValidationError("relationships() needs at least one account id")
        params = [("id[]", account_id) for account_id in ids]
        return await self._paged("accounts/relationships", Relationship, params)

    async def follows_me(self) -> Page[Account]:
        """Accounts that follow the authorized user."""
        me = await self.verify_credentials()
        return await self.followers(me.id)

    async def followed_by_me(self) -> Page[Account]:
        """Accounts the authorized user follows."""
        me = await self.verify_credentials()
        return await self.following(me.id)

    async def reports(self) -> Page[Report]:
        """Reports filed by the authorized user."""
        return await self._paged("reports", Report)

    # --- single entity routes ---------------------------------------------

    async def verify_credentials(self) -> Account:
        return await self._get("accounts/verify_credentials", Account)

    async def get_account(self, account_id: str) -> Account:
        return await self._get(f"accounts/{account_id}", Account)

    async def follow(self, account_id: str) -> Relationship:
        return await self._post(f"accounts/{account_id}/follow", Relationship)

    async def unfollow(self, account_id: str) -> Relationship:
        return await self._post(f"accounts/{account_id}/unfollow", Relationship)

    async def block(self, account_id: str) -> Relationship:
        return await self._post(f"accounts/{account_id}/block", Relationship)

    async def unblock(self, account_id: str) -> Relationship:
        return await self._post(f"accounts/{account_id}/unblock", Relationship)

    async def mute(self, account_id: str) -> Relationship:
        return await self._post(f"accounts/{account_id}/mute", Relationship)

    async def unmute(self, account_id: str) -> Relationship:
        return await self._post(f"accounts/{account_id}/unmute", Relationship)

    async def get_status(self, status_id: str) -> Status:
        return await self._get(f"statuses/{status_id}", Status)

    async def get_context(self, status_id: str) -> Context:
        return await self._get(f"statuses/{status_id}/context", Context)

    async def get_card(self, status_id: str) -> Card:
        return await self._get(f"statuses/{status_id}/card", Card)

    async def favourite(self, status_id: str) -> Status:
        return await self._post(f"statuses/{status_id}/favourite", Status)

    async def unfavourite(self, status_id: str) -> Status:
        return await self._post(f"statuses/{status_id}/unfavourite", Status)

    async def reblog(self, status_id: str) -> Status:
        return await self._post(f"statuses/{status_id}/reblog", Status)

    async def unreblog(self, status_id: str) -> Status:
        return await self._post(f"statuses/{status_id}/unreblog", Status)

    async def delete_status(self, status_id: str) -> Empty:
        return await self._delete(f"statuses/{status_id}", Empty)

    async def get_notification(self, notification_id: str) -> Notification:
        return await self._get(f"notifications/{notification_id}", Notification)

    async def dismiss_notification(self, notification_id: str) -> Empty:
        return await self._post(f"notifications/{notification_id}/dismiss", Empty)

    async def clear_notifications(self) -> Empty:
        return await self._post("notifications/clear", Empty)

    async def new_status(self, status: NewStatus) -> Status:
        """Post a status and return it as created."""
        return await self._post("statuses", Status, json=status.to_json())

    async def update_credentials(self, changes: UpdateCredsRequest) -> Account:
        return await self._patch("accounts/update_credentials", Account, json=changes.to_json())

    async def block_domain(self, domain: str) -> Empty:
        return await self._post("domain_blocks", Empty, params=_query(domain=domain))

    async def unblock_domain(self, domain: str) -> Empty:
        return await self._delete("domain_blocks", Empty, params=_query(domain=domain))

    async def authorize_follow_request(self, account_id: str) -> Relationship:
        return await self._post(f"follow_requests/{account_id}/authorize", Relationship)

    async def reject_follow_request(self, account_id: str) -> Relationship:
        return await self._post(f"follow_requests/{account_id}/reject", Relationship)

    async def follows(self, uri: str) -> Account:
        """Follow a remote account by `username@domain`."""
        return await self._post("follows", Account, params=_query(uri=uri))

    async def endorse_user(self, account_id: str) -> Relationship:
        """Feature an account on the authorized user's profile."""
        return await self._post(f"accounts/{account_id}/pin", Relationship)

    async def unendorse_user(self, account_id: str) -> Relationship:
        return await self._post(f"accounts/{account_id}/unpin", Relationship)

    async def get_follow_suggestions(self) -> list[Account]:
        return await self._get("suggestions", list[Account])

    async def delete_from_suggestions(self, account_id: str) -> Empty:
        return await self._delete(f"suggestions/{account_id}", Empty)

    async def report(
        self, account_id: str, status_ids: Sequence[str] = (), comment: str | None = None
    ) -> Report:
        """Report an account, optionally citing some of its statuses."""
        body: dict[str, Any] = {"account_id": account_id, "status_ids": list(status_ids)}
        if comment is not None:
            body["comment"] = comment
        return await self._post("reports", Report, json=body)

    # --- filters ----------------------------------------------------------

    async def get_filters(self) -> list[Filter]:
        return await self._get("filters", list[Filter])

    async def get_filter(self, filter_id: str) -> Filter:
        return await self._get(f"filters/{filter_id}", Filter)

    async def add_filter(self, request: AddFilterRequest) -> Filter:
        return await self._post("filters", Filter, json=request.to_json())

    async def update_filter(self, filter_id: str, request: AddFilterRequest) -> Filter:
        """Replace a filter's phrase, contexts and options."""
        return await self._put(f"filters/{filter_id}", Filter, json=request.to_json())

    async def delete_filter(self, filter_id: str) -> Empty:
        return await self._delete(f"filters/{filter_id}", Empty)

    # --- instance and search ----------------------------------------------

    async def instance(self) -> Instance:
        """Public information about the connected server."""
        return await self._get("instance", Instance)

    async def search(self, q: str, *, resolve: bool = False) -> SearchResult:
        """Search accounts, statuses and hashtag names.

        With `resolve`, the server looks up remote accounts and statuses
        referenced by URL or `user@domain`.
        """
        return await self._get("search", SearchResult, _query(q=q, resolve=resolve))

    async def search_v2(self, q: str, *, resolve: bool = False) -> SearchResultV2:
        """Like `search`, with hashtags returned as full tag entities."""
        response = await self._http.get(
            _route("search", API_V2), params=_query(q=q, resolve=resolve)
        )
        return decode_body_or_api_error(response, SearchResultV2)

    # --- streaming --------------------------------------------------------

    @staticmethod
    def _stream_params(
        kind: StreamKind, tag: str | None, list_id: str | None
    ) -> dict[str, str]:
        if kind in (StreamKind.HASHTAG, StreamKind.HASHTAG_LOCAL):
            if not tag:
                raise ValidationError(f"{kind.value} stream requires a tag")
            return {"tag": tag.lstrip("#")}
        if kind is StreamKind.LIST:
            if not list_id:
                raise ValidationError("list stream requires a list_id")
            return {"list": list_id}
        return {}

    async def stream(
        self,
        kind: StreamKind,
        *,
        tag: str | None = None,
        list_id: str | None = None,
    ) -> EventReader:
        """Open a chunked HTTP stream and return its event reader."""
        params = self._stream_params(kind, tag, list_id)
        source = await self._http.open_line_source(kind.http_path, params=params or None)
        logger.debug(f"Opened {kind.value} HTTP stream")
        return EventReader(source)

    async def streaming_user(self) -> EventReader:
        """Home timeline and notifications of the authorized user."""
        return await self.stream(StreamKind.USER)

    async def streaming_public(self) -> EventReader:
        return await self.stream(StreamKind.PUBLIC)

    async def streaming_local(self) -> EventReader:
        return await self.stream(StreamKind.PUBLIC_LOCAL)

    async def streaming_public_hashtag(self, hashtag: str) -> EventReader:
        return await self.stream(StreamKind.HASHTAG, tag=hashtag)

    async def streaming_local_hashtag(self, hashtag: str) -> EventReader:
        return await self.stream(StreamKind.HASHTAG_LOCAL, tag=hashtag)

    async def streaming_list(self, list_id: str) -> EventReader:
        return await self.stream(StreamKind.LIST, list_id=list_id)

    async def streaming_direct(self) -> EventReader:
        return await self.stream(StreamKind.DIRECT)

    def websocket_url(
        self,
        kind: StreamKind,
        *,
        tag: str | None = None,
        list_id: str | None = None,
    ) -> str:
        """WebSocket streaming URL for `kind`.

        Raises:
            ValidationError: If the base URL is not http(s) or a required
                tag/list id is missing
        """
        parts = urlsplit(f"{self.data.base}{WS_STREAMING_PATH}")
        scheme = _WS_SCHEMES.get(parts.scheme)
        if scheme is None:
            raise ValidationError(f"Bad URL scheme: {parts.scheme}")
        query: dict[str, str] = {}
        if self.data.token:
            query["access_token"] = self.data.token
        query["stream"] = kind.value
        query.update(self._stream_params(kind, tag, list_id))
        return urlunsplit((scheme, parts.netloc, parts.path, urlencode(query), ""))

    async def websocket_stream(
        self,
        kind: StreamKind,
        *,
        tag: str | None = None,
        list_id: str | None = None,
    ) -> EventReader:
        """Open a WebSocket stream and return its event reader."""
        url = self.websocket_url(kind, tag=tag, list_id=list_id)
        source = await self._ws.open_line_source(url)
        logger.debug(f"Opened {kind.value} WebSocket stream")
        return EventReader(source)

    # --- lifecycle --------------------------------------------------------

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> MastodonClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
