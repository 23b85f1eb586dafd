"""Command line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import Config
from .errors import InvalidAddressError, LookupFailedError
from .lookup import fetch_location, parse_address

logger = logging.getLogger(__name__)

DESCRIPTION = "Locate an IP address and plot it on a terminal world map."
EPILOG = (
    "Press <C+c>, <ESC> or q to quit.\n"
    "If no ip is specified, the client's own public address is used."
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ip411",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("ip", nargs="*", help="Optional IP address to locate and plot.")
    parser.add_argument("--config", metavar="PATH", help="Path to a JSON config file.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(config: Config) -> None:
    """Route log records to the configured file; the terminal belongs to the UI."""
    if config.log_file:
        logging.basicConfig(
            filename=config.log_file,
            level=getattr(logging, config.log_level, logging.WARNING),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    else:
        logging.getLogger("ip411").addHandler(logging.NullHandler())


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if len(args.ip) > 1:
        print("Invalid number of arguments: Specify one IP Address.", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    config = Config.load(args.config)
    configure_logging(config)

    try:
        address = parse_address(args.ip[0] if args.ip else None)
    except InvalidAddressError as e:
        print(f"ip411: {e}", file=sys.stderr)
        return 1

    try:
        record = fetch_location(address, config)
    except LookupFailedError as e:
        logger.error("%s", e)
        print(f"ip411: {e}", file=sys.stderr)
        return 1

    from .app import run

    return run(record=record, address=address, config=config)


if __name__ == "__main__":
    sys.exit(main())
