from __future__ import annotations

import argparse
import dataclasses
import logging
import sys
from pathlib import Path

from . import __version__
from .app import KittenIdleGame, run_cli
from .exceptions import SettingsError
from .settings import Settings

logger = logging.getLogger(__name__)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="kitten-idle",
        description="Kitten Idle - gather yarn, adopt kittens, buy bowls",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--settings", type=Path, default=None, help="YAML file overriding default settings")
    parser.add_argument("--no-pacing", action="store_true", help="Do not sleep between passive ticks")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity (-v, -vv)")

    args = parser.parse_args(argv)
    _setup_logging(args.verbose)

    try:
        settings = Settings.load(args.settings)
    except SettingsError as e:
        logger.error("%s", e)
        print(f"Could not load settings: {e}", file=sys.stderr)
        return 2

    # Honor CLI over settings file
    if args.no_pacing:
        settings.loop = dataclasses.replace(settings.loop, pacing=False)

    # Undecodable input bytes become U+FFFD, which no command is bound to
    if hasattr(sys.stdin, "reconfigure"):
        sys.stdin.reconfigure(errors="replace")

    return run_cli(KittenIdleGame(settings))


if __name__ == "__main__":
    sys.exit(main())
