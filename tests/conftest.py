"""Shared fixtures: API payloads and canned HTTP responses."""

from __future__ import annotations

import json
from typing import Any

import pytest

from laakhay.social.runtime.rest import HTTPResponse


def _account(account_id: str = "1", username: str = "alice") -> dict[str, Any]:
    return {
        "id": account_id,
        "username": username,
        "acct": username,
        "display_name": username.title(),
        "url": f"https://social.example/@{username}",
        "created_at": "2024-01-01T00:00:00.000Z",
        "followers_count": 3,
        "following_count": 2,
        "statuses_count": 10,
        "emojis": [],
        "fields": [],
    }


def _status(status_id: str = "100", account_id: str = "1") -> dict[str, Any]:
    return {
        "id": status_id,
        "uri": f"https://social.example/users/alice/statuses/{status_id}",
        "url": f"https://social.example/@alice/{status_id}",
        "created_at": "2024-01-02T10:00:00.000Z",
        "account": _account(account_id),
        "content": "<p>hello</p>",
        "visibility": "public",
        "media_attachments": [],
        "mentions": [],
        "tags": [],
        "emojis": [],
        "reblogs_count": 0,
        "favourites_count": 1,
    }


@pytest.fixture
def account_json():
    """Factory for account payloads."""
    return _account


@pytest.fixture
def status_json():
    """Factory for status payloads."""
    return _status


@pytest.fixture
def notification_json():
    """Factory for notification payloads."""

    def make(notification_id: str = "7", kind: str = "mention") -> dict[str, Any]:
        return {
            "id": notification_id,
            "type": kind,
            "created_at": "2024-01-03T08:30:00.000Z",
            "account": _account("2", "bob"),
            "status": _status("101"),
        }

    return make


@pytest.fixture
def make_response():
    """Factory for HTTPResponse objects with a JSON (or raw) body."""

    def make(
        body: Any = None,
        status: int = 200,
        link: str | None = None,
        url: str = "https://social.example/api/v1/test",
    ) -> HTTPResponse:
        if body is None:
            raw = b""
        elif isinstance(body, bytes):
            raw = body
        else:
            raw = json.dumps(body).encode()
        headers = {"Content-Type": "application/json"}
        if link is not None:
            headers["Link"] = link
        return HTTPResponse(status=status, body=raw, headers=headers, url=url)

    return make
