"""Table analysis CLI command."""

from __future__ import annotations

from pathlib import Path

from ..table import PrefixTable
from ..utils.sizing import average_code_length, is_complete, kraft_sum


def analyze_table(table: PrefixTable, source: Path | None = None) -> None:
    """Print a summary of a prefix table and every entry.

    Args:
        table: Table to analyze
        source: File the table was loaded from (shown in the header)
    """
    print("|" * 7, "prefixcode: Prefix Code Tables", "|" * 7)
    if source is not None:
        print(f"Table loaded from {source}")
    print(f"{len(table)} entr{'ies' if len(table) != 1 else 'y'} loaded.")
    print("Codeword lengths are in bits.")
    print()

    if table.is_empty:
        print("Table is empty.")
        return

    total = kraft_sum(table)

    print(f"{'=' * 24} Summary {'=' * 24}")
    print(f"Longest codeword{'.' * 30}{table.max_depth}")
    print(f"Average codeword length{'.' * 23}{average_code_length(table):.2f}")
    print(f"Kraft sum{'.' * 37}{total}")
    if is_complete(table):
        print("Code is complete: every bit sequence splits into codewords.")
    else:
        print(f"Code is incomplete: {1 - total} of the code space is unused.")
    print()

    print(f"{'-' * 26} Entries {'-' * 26}")
    width = max(len(str(element)) for element, _code in table.items())
    for element, code in table.items():
        bits = str(code) or "(empty)"
        dots = "." * max(1, 54 - width - len(bits))
        print(f"        {str(element):>{width}}{dots}{bits}")

    print()
