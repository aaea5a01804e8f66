#!/usr/bin/env python3
"""Basic usage example for prefixcode.

This example demonstrates:
1. Building a prefix table by insertion
2. Decoding a bit string, including a truncated one
3. Encoding elements and packing them into bytes
4. Loading the same table from a text file
"""

from __future__ import annotations

from pathlib import Path

from prefixcode import (
    PrefixConflictError,
    PrefixTable,
    TruncatedCodeError,
    kraft_sum,
    load_table,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("prefixcode Basic Usage Example")
    print("=" * 60)
    print()

    # Build a table
    print("1. Building a table...")
    table: PrefixTable[int] = PrefixTable()
    table.insert(2, "0")
    table.insert(3, "10")
    table.insert(4, "11")
    for element, code in table.items():
        print(f"   {element} -> {code}")
    print(f"   Kraft sum: {kraft_sum(table)}")
    print()

    # Rejected insert
    print("2. Inserting a conflicting codeword...")
    try:
        table.insert(5, "101")
    except PrefixConflictError as e:
        print(f"   Rejected: {e}")
    print(f"   Table still has {len(table)} entries")
    print()

    # Decode
    print("3. Decoding...")
    print(f"   0010101100  -> {table.decode('0010101100')}")
    try:
        table.decode("00101011001")
    except TruncatedCodeError as e:
        print(f"   00101011001 -> {e.partial} (then: {e})")
    print()

    # Encode
    print("4. Encoding...")
    message = [2, 2, 3, 3, 4, 2, 2]
    data, bit_length = table.encode_bytes(message)
    print(f"   {message} -> {table.encode(message)}")
    print(f"   Packed: {data.hex()} ({bit_length} bits)")
    print(f"   Round trip: {table.decode_bytes(data, bit_length)}")
    print()

    # Load from file
    print("5. Loading tree.txt...")
    loaded = load_table(Path(__file__).with_name("tree.txt"))
    print(f"   {loaded!r}, decodes 0110 as {loaded.decode('0110')}")
    print()


if __name__ == "__main__":
    main()
