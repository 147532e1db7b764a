"""CLI entry point: python -m clidle.mcp [--catalog PATH]"""

from __future__ import annotations

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="python -m clidle.mcp")
    parser.add_argument("--catalog", default=None, help="Path to an items JSON file")
    args = parser.parse_args(argv)

    # stdout carries the MCP protocol, so logs go to stderr
    logging.basicConfig(stream=sys.stderr, level=logging.INFO)

    from clidle.cli import load_catalog_or_exit
    from clidle.config import GameConfig
    from clidle.mcp.server import create_server

    config = GameConfig(catalog_path=args.catalog)
    catalog = load_catalog_or_exit(config.catalog_path)
    server = create_server(catalog, config)
    server.run(transport="stdio")


if __name__ == "__main__":
    main()
