"""Main CLI entry point for uuidbytes."""

from __future__ import annotations

import argparse
import sys
import uuid

from .. import __version__
from ..codec import decode, encode
from ..exceptions import UuidBytesError


def parse_hex(text: str) -> bytes:
    """Parse hex digits, ignoring whitespace and ':' or '-' separators.

    Raises:
        ValueError: If the cleaned text is not valid hex
    """
    cleaned = "".join(text.split()).replace(":", "").replace("-", "")
    return bytes.fromhex(cleaned)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the uuidbytes CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="uuidbytes",
        description="uuidbytes: 16-byte UUID codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  uuidbytes --encode 01020304-0506-0708-0910-111213141516
  uuidbytes --decode 0102030405060708 0910111213141516
  uuidbytes --version
        """,
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--encode",
        metavar="UUID",
        type=str,
        help="Print the 16 big-endian bytes of UUID as hex",
    )
    group.add_argument(
        "--decode",
        metavar="HEX",
        nargs="+",
        help="Decode 32 hex digits to a UUID and its signed 64-bit halves",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"uuidbytes {__version__}",
    )

    args = parser.parse_args(argv)

    if args.encode is not None:
        try:
            data = encode(uuid.UUID(args.encode))
        except ValueError as e:
            print(f"Error: Invalid UUID {args.encode!r}: {e}", file=sys.stderr)
            return 1

        print(data.hex())
        return 0

    if args.decode is not None:
        try:
            identifier = decode(parse_hex(" ".join(args.decode)))
        except UuidBytesError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        except ValueError as e:
            print(f"Error: Invalid hex input: {e}", file=sys.stderr)
            return 1

        print(identifier)
        print(f"msb={identifier.most_significant}")
        print(f"lsb={identifier.least_significant}")
        return 0

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
