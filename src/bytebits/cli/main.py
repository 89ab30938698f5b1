"""Main CLI entry point for bytebits."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .. import __version__
from ..core import is_set, set_bit, unset_bit
from ..exceptions import BytebitsError
from ..models import BitFieldRequest
from ..utils.formatting import bytes_to_binary_string, bytes_to_hex_string

logger = logging.getLogger(__name__)

DESCRIPTION = "bytebits: Bit-field codec for byte buffers"


def _add_window_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("data", metavar="HEX", help="Buffer as hex digits, e.g. '80 71 6F'")
    parser.add_argument("index", type=int, help="Bit index (0 = LSB of the last byte)")
    parser.add_argument("--offset", type=int, default=None, help="First byte of the window")
    parser.add_argument("--length", type=int, default=None, help="Number of bytes in the window")


def _add_field_args(parser: argparse.ArgumentParser) -> None:
    _add_window_args(parser)
    parser.add_argument("count", type=int, help="Number of bits in the field")
    parser.add_argument("--signed", action="store_true", help="Sign-extend the field")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the bytebits CLI."""
    parser = argparse.ArgumentParser(
        prog="bytebits",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  bytebits extract "80 71 6F 5E" 4 12           Extract 12 bits from bit 4
  bytebits read --signed "F0" 4 4               Read a signed 4-bit field
  bytebits isset "80" 7                         Test a single bit
  bytebits unset "80" 7                         Clear a single bit
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"bytebits {__version__}")

    commands = parser.add_subparsers(dest="command")

    extract_parser = commands.add_parser("extract", help="Extract a bit field as bytes")
    _add_field_args(extract_parser)
    extract_parser.add_argument(
        "--format", choices=["hex", "bin"], default="hex", help="Output rendering (default: hex)"
    )

    read_parser = commands.add_parser("read", help="Read a bit field (up to 64 bits) as an integer")
    _add_field_args(read_parser)

    for name, help_text in (
        ("isset", "Test whether a bit is 1"),
        ("set", "Set a bit to 1 and print the buffer"),
        ("unset", "Set a bit to 0 and print the buffer"),
    ):
        _add_window_args(commands.add_parser(name, help=help_text))

    return parser


def _run(args: argparse.Namespace) -> None:
    data = bytearray.fromhex(args.data)
    logger.debug("Parsed %d-byte buffer for %s", len(data), args.command)

    if args.command in ("extract", "read"):
        request = BitFieldRequest(
            bit_index=args.index,
            bit_count=args.count,
            signed=args.signed,
            offset=args.offset,
            length=args.length,
        )
        if args.command == "read":
            print(request.read(data))
            return
        field = request.extract(data)
        render = bytes_to_binary_string if args.format == "bin" else bytes_to_hex_string
        print(render(field))
    elif args.command == "isset":
        print(str(is_set(data, args.index, offset=args.offset, length=args.length)).lower())
    else:
        mutate = set_bit if args.command == "set" else unset_bit
        print(bytes_to_hex_string(mutate(data, args.index, offset=args.offset, length=args.length)))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the bytebits CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # If no command specified, show help
    if args.command is None:
        parser.print_help()
        return 0

    try:
        _run(args)
    except (BytebitsError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
