#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from pagestate import PagedResource, build_pager
from pagestate.utils import HTTPClient, HTTPFetchConfig, http_fetch_command


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Quickstart for PagedResource over a JSON API")
    p.add_argument("base_url", help="API base URL, e.g. https://api.example.com")
    p.add_argument("path", nargs="?", default="/items")
    p.add_argument("--per-page", type=int, default=20)
    p.add_argument("--query", default=None, help="Value for the 'q' query parameter")
    p.add_argument("--pages", type=int, default=3, help="Pages to step through")
    return p.parse_args()


def render_pager(state) -> str:
    parts = []
    for entry in build_pager(state):
        if entry.kind.value == "ellipsis":
            parts.append("...")
        elif entry.kind.value == "page":
            parts.append(f"[{entry.page}]" if entry.is_current else str(entry.page))
    return " ".join(parts)


async def main() -> None:
    args = parse_args()
    context = {"q": args.query} if args.query else {}

    async with HTTPClient(base_url=args.base_url) as client:
        fetch = http_fetch_command(client, HTTPFetchConfig(path=args.path))
        async with PagedResource(fetch, request_context=context, per_page=args.per_page) as pages:
            await pages.wait_idle()
            for _ in range(args.pages):
                state = pages.state
                if state.error is not None:
                    print(f"Page {state.current_page} failed: {state.error}")
                else:
                    print(f"Page {state.current_page}/{state.total_pages}: {len(state.items)} items")
                print("  ", render_pager(state))
                if state.is_last_page:
                    break
                pages.move_next()
                await pages.wait_idle()


if __name__ == "__main__":
    asyncio.run(main())
