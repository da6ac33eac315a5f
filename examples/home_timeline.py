#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import os

from laakhay.social import ClientData, MastodonClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Print the newest statuses of a timeline")
    p.add_argument("instance", nargs="?", default="https://mastodon.social")
    p.add_argument("count", nargs="?", type=int, default=20)
    p.add_argument("--home", action="store_true", help="home timeline (needs MASTODON_TOKEN)")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    data = ClientData(base=args.instance, token=os.environ.get("MASTODON_TOKEN"))

    async with MastodonClient(data) as client:
        if args.home:
            page = await client.home_timeline(limit=min(args.count, 40))
        else:
            page = await client.public_timeline(local=True, limit=min(args.count, 40))

        print("=" * 80)
        async for status in page.items_iter():
            print(f"{status.created_at.isoformat():32} @{status.account.acct}")
            print(f"    {status.url or status.uri}")
            args.count -= 1
            if args.count <= 0:
                break
        print("=" * 80)


if __name__ == "__main__":
    asyncio.run(main())
