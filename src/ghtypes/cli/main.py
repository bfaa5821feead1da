"""Main CLI entry point for ghtypes."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..codec import decode_datetime, identifier_from_hex
from ..exceptions import GhTypesError
from .summary import summarize_file


def main() -> int:
    """Main entry point for the ghtypes CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="ghtypes: Typed GitHub Webhook Payloads",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ghtypes --event push --payload push.json   Decode a webhook payload
  ghtypes --oid 4b825dc642cb6eb9a060e54bf8d69288fbee4904
  ghtypes --timestamp 1546300800             Show a timestamp as RFC 3339
  ghtypes --version                          Show version
        """,
    )

    parser.add_argument(
        "--event",
        metavar="NAME",
        type=str,
        help="X-GitHub-Event name of the payload (e.g. push)",
    )

    parser.add_argument(
        "--payload",
        metavar="FILE",
        type=str,
        help="JSON payload file to decode (requires --event)",
    )

    parser.add_argument(
        "--oid",
        metavar="HEX",
        type=str,
        help="Validate a 40 character object ID and print its canonical forms",
    )

    parser.add_argument(
        "--timestamp",
        metavar="VALUE",
        type=str,
        help="Decode an RFC 3339 string or unix seconds and print it as RFC 3339",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"ghtypes {__version__}",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.payload:
            if not args.event:
                print("Error: --payload requires --event", file=sys.stderr)
                return 1

            file_path = Path(args.payload)
            if not file_path.exists():
                print(f"Error: File not found: {file_path}", file=sys.stderr)
                return 1

            try:
                summarize_file(file_path, args.event)
            except OSError as e:
                print(f"Error: Cannot read {file_path}: {e.strerror}", file=sys.stderr)
                return 1
            return 0

        if args.oid:
            oid = identifier_from_hex(args.oid)
            print(f"{oid:x}")
            print(f"{oid:X}")
            return 0

        if args.timestamp:
            raw = args.timestamp
            value: str | int = int(raw) if raw.removeprefix("-").isdecimal() else raw
            print(decode_datetime(value).to_rfc3339())
            return 0
    except GhTypesError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
