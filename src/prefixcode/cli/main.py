"""Main CLI entry point for prefixcode."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..cli.analyze import analyze_table
from ..codec.bitpack import pack_codeword
from ..exceptions import PrefixCodeError, TruncatedCodeError, UnknownElementError
from ..tablefile import TableFileConfig, load_table


def _parse_elements(text: str) -> list[int]:
    """Parse a comma- or space-separated list of integers."""
    parts = text.replace(",", " ").split()
    try:
        return [int(part) for part in parts]
    except ValueError as e:
        raise ValueError(f"Invalid element list {text!r}: {e}") from e


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the prefixcode CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="prefixcode: Prefix Code Tables",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  prefixcode --table tree.txt --inspect             Show table summary
  prefixcode --table tree.txt --decode 0010101100   Decode a bit string
  prefixcode --table tree.txt --encode 2,3,4        Encode elements
  prefixcode --table tree.txt --encode 2,3,4 --hex  Encode to packed bytes
  prefixcode --table tree.txt --decode-hex 58 --bits 5
        """,
    )

    parser.add_argument(
        "--table",
        metavar="FILE",
        type=str,
        help="Table file with one '<element> <bits>' entry per line",
    )

    action = parser.add_mutually_exclusive_group()
    action.add_argument("--decode", metavar="BITS", help="Decode a '0'/'1' string")
    action.add_argument("--decode-hex", metavar="HEX", help="Decode packed bytes given as hex")
    action.add_argument("--encode", metavar="ELEMENTS", help="Encode comma-separated elements")
    action.add_argument("--inspect", action="store_true", help="Show table summary")

    parser.add_argument(
        "--bits",
        metavar="N",
        type=int,
        help="Number of meaningful bits for --decode-hex (default: all)",
    )
    parser.add_argument("--hex", action="store_true", help="Print --encode output as hex bytes")
    parser.add_argument("--max-element", type=int, help="Largest element accepted in the table")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug-level logging")
    parser.add_argument(
        "--version",
        action="version",
        version=f"prefixcode {__version__}",
    )

    args = parser.parse_args(argv)

    if args.hex and args.encode is None:
        parser.error("--hex can only be used with --encode")

    logging.basicConfig(level=logging.WARNING, format="[%(levelname)s] %(name)s: %(message)s")
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    # If no table specified, show help
    if not args.table:
        parser.print_help()
        return 0

    table_path = Path(args.table)
    if not table_path.exists():
        print(f"Error: File not found: {table_path}", file=sys.stderr)
        return 1

    try:
        config = TableFileConfig()
        if args.max_element is not None:
            config = TableFileConfig(max_element=args.max_element)
        table = load_table(table_path, config)
    except (PrefixCodeError, ValueError, OSError) as e:
        print(f"Error loading table: {e}", file=sys.stderr)
        return 1

    try:
        if args.decode is not None or args.decode_hex is not None:
            if args.decode is not None:
                elements = table.decode(args.decode)
            else:
                elements = table.decode_bytes(bytes.fromhex(args.decode_hex), args.bits)
            print(" ".join(str(element) for element in elements))
            return 0

        if args.encode is not None:
            code = table.encode(_parse_elements(args.encode))
            if args.hex:
                print(f"{pack_codeword(code).hex()} ({len(code)} bits)")
            else:
                print(code)
            return 0

        analyze_table(table, table_path)
        return 0
    except TruncatedCodeError as e:
        print(" ".join(str(element) for element in e.partial))
        print(f"Error decoding: {e}", file=sys.stderr)
        return 1
    except UnknownElementError as e:
        print(e.partial)
        print(f"Error encoding: {e}", file=sys.stderr)
        return 1
    except (PrefixCodeError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
