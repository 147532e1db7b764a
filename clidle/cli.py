from __future__ import annotations

import argparse
import logging
import sys

from clidle.catalog import Catalog
from clidle.config import GameConfig
from clidle.engine import EconomyEngine
from clidle.errors import CatalogError
from clidle.formatting import format_catalog_table
from clidle.loader import load_catalog


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clidle",
        description="clidle: an idle game about writing code lines",
    )
    sub = parser.add_subparsers(dest="command")

    play = sub.add_parser("play", help="Play in the terminal")
    _add_catalog_argument(play)
    play.add_argument(
        "--tick-interval", type=float, default=1.0, help="Seconds per production tick"
    )
    play.add_argument(
        "--poll-timeout", type=float, default=0.1, help="Seconds to wait for a key"
    )
    play.add_argument("--log-file", default=None, help="Write logs to this file")
    play.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level when --log-file is given (default: INFO)",
    )

    cat = sub.add_parser("catalog", help="List the items for sale")
    _add_catalog_argument(cat)

    return parser


def _add_catalog_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--catalog",
        default=None,
        help="Path to an items JSON file (default: bundled catalog)",
    )


def load_catalog_or_exit(path: str | None) -> Catalog:
    """Load the catalog, printing the problem and exiting on failure."""
    try:
        return load_catalog(path)
    except (CatalogError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def configure_logging(log_file: str | None, level: str) -> None:
    # curses owns the screen, so logs only ever go to a file
    if log_file is None:
        logging.getLogger("clidle").addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "catalog":
        catalog = load_catalog_or_exit(args.catalog)
        print(format_catalog_table(catalog))

    elif args.command == "play":
        config = GameConfig(
            tick_interval=args.tick_interval,
            poll_timeout=args.poll_timeout,
            catalog_path=args.catalog,
        )
        errors = config.validate()
        if errors:
            for e in errors:
                print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        configure_logging(args.log_file, args.log_level)
        catalog = load_catalog_or_exit(config.catalog_path)
        engine = EconomyEngine(catalog)

        from clidle.tui import run_curses
        run_curses(engine, config)
