"""Command line entry point that installs a game instance."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from .config import Config
from .errors import GrindstoneError
from .event import CallbackEvent
from .updater import GrindstoneUpdater
from .version import LATEST, MinecraftVersion

log = logging.getLogger(__name__)


def _print_event(event: CallbackEvent) -> None:
    print(f"{event.event_type.name} - {event.message}", flush=True)


def main(argv: list[str] | None = None) -> int:
    """Install the requested game version; return the process exit status."""
    parser = argparse.ArgumentParser(
        prog="grindstone", description="Install or update a Minecraft instance."
    )
    parser.add_argument("--folder", default="./output", help="updater output folder")
    parser.add_argument("--name", default="My example version", help="instance name")
    parser.add_argument(
        "--game-version", default=LATEST, help="game version id, or 'latest'"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    log.info("Hello !")

    try:
        config = Config(
            instance_name=args.name,
            folder_path=args.folder,
            version=MinecraftVersion(id=args.game_version),
            event_callback=_print_event,
        )
        asyncio.run(GrindstoneUpdater(config).update())
    except GrindstoneError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())