#!/usr/bin/env python3
"""Load the remote user list into a fresh store and print it as a table.

Configuration is read from ``USERDESK_*`` environment variables; the
command-line flags below override them.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from userdesk import UserDeskClient, UserDeskConfig  # noqa: E402
from userdesk.ui.table import render_table  # noqa: E402


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--url", help="Override the users endpoint")
    parser.add_argument("--timeout", type=float, help="Request timeout in seconds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


async def _run(args: argparse.Namespace) -> int:
    overrides: dict[str, object] = {"autoload": False}
    if args.url:
        overrides["users_url"] = args.url
    if args.timeout is not None:
        overrides["request_timeout"] = args.timeout
    config = UserDeskConfig.from_env(**overrides)

    async with UserDeskClient(config) as client:
        result = await client.load_users()
        if not result.ok:
            print(f"Seed load failed: {result.error}", file=sys.stderr)
            return 1
        print(render_table(client.users))
        print(f"\n{len(client.users)} users")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return asyncio.run(_run(args))


if __name__ == "__main__":
    raise SystemExit(main())
