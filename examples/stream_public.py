#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging
import os

from laakhay.social import (
    ClientData,
    DeleteEvent,
    MastodonClient,
    NotificationEvent,
    StreamError,
    StreamKind,
    UpdateEvent,
)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Follow a streaming timeline")
    p.add_argument("instance", nargs="?", default="https://mastodon.social")
    p.add_argument(
        "kind", nargs="?", default="PUBLIC_LOCAL", choices=[k.name for k in StreamKind]
    )
    p.add_argument("--tag", default=None)
    p.add_argument("--list-id", default=None)
    p.add_argument("--websocket", action="store_true", help="stream over WebSocket")
    p.add_argument("--max-events", type=int, default=20)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO)
    data = ClientData(base=args.instance, token=os.environ.get("MASTODON_TOKEN"))
    kind = StreamKind[args.kind]

    async with MastodonClient(data) as client:
        if args.websocket:
            reader = await client.websocket_stream(kind, tag=args.tag, list_id=args.list_id)
        else:
            reader = await client.stream(kind, tag=args.tag, list_id=args.list_id)

        seen = 0
        async with reader:
            while seen < args.max_events:
                try:
                    event = await reader.next_event()
                except StreamError as e:
                    print(f"skipped frame: {e}")
                    continue
                if event is None:
                    break
                seen += 1
                if isinstance(event, UpdateEvent):
                    print(f"update   @{event.status.account.acct}: {event.status.url}")
                elif isinstance(event, NotificationEvent):
                    print(f"notify   {event.notification.type} from @{event.notification.account.acct}")
                elif isinstance(event, DeleteEvent):
                    print(f"delete   {event.status_id}")
                else:
                    print("filters changed")


if __name__ == "__main__":
    asyncio.run(main())
