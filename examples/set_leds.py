#!/usr/bin/env python
"""Set Zeptrion smartfront LED colours from the command line."""
from __future__ import annotations

import argparse
import asyncio
import logging
import os

from zeptrion import const
from zeptrion.client import DispatchResult, ZeptrionClient


def report(result: DispatchResult) -> None:
    """Print a dispatch outcome."""
    if result.ok:
        print(f"ok: status={result.status}")
    else:
        print(f"failed: status={result.status} error={result.error}")


async def run(args: argparse.Namespace) -> None:
    """Run the LED example."""
    colors = [const.COLORS.get(color.lower(), color) for color in args.colors]
    if len(colors) == 1:
        colors = colors * len(args.leds)

    client = ZeptrionClient(args.host, on_result=report)
    try:
        client.set_leds(args.leds, colors)
        await client.flush()
    finally:
        await client.close()


def parse_args() -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        description="Set front LED colours on a Zeptrion device."
    )
    parser.add_argument(
        "--host",
        default=os.environ.get("ZEPTRION_HOST", "192.168.0.1"),
        help="Zeptrion host or host:port (env: ZEPTRION_HOST)",
    )
    parser.add_argument(
        "--leds",
        type=int,
        nargs="+",
        default=[1],
        help="LED ids",
    )
    parser.add_argument(
        "--colors",
        nargs="+",
        default=["white"],
        help=f"'#RRGGBB' or one of: {', '.join(const.COLORS)}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args()


def main() -> None:
    """Entry point."""
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)
    asyncio.run(run(args))


if __name__ == "__main__":
    main()
