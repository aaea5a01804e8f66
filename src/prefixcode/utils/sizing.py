"""Code size calculation utilities.

This module provides functions to measure encoded output and the shape of a
prefix code without actually encoding anything.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from fractions import Fraction

from ..codeword import CodeWord
from ..exceptions import UnknownElementError
from ..table import PrefixTable


def encoded_bits(table: PrefixTable, elements: Iterable[Hashable]) -> int:
    """Calculate the encoded size of a message in bits.

    Args:
        table: Table holding the codewords
        elements: Elements to measure

    Returns:
        Total codeword length

    Raises:
        UnknownElementError: If an element is not in the table. ``exc.partial``
            is an empty CodeWord since nothing is encoded here.

    Example:
        >>> table = load_table(["2 0", "3 10", "4 11"])
        >>> encoded_bits(table, [2, 3, 4])
        5
    """
    total = 0
    for position, element in enumerate(elements):
        if element not in table:
            raise UnknownElementError(CodeWord(), element, position)
        total += len(table.codeword_for(element))
    return total


def encoded_size(table: PrefixTable, elements: Iterable[Hashable]) -> int:
    """Calculate the encoded size of a message in bytes (rounded up)."""
    return (encoded_bits(table, elements) + 7) // 8


def kraft_sum(table: PrefixTable) -> Fraction:
    """Sum of 2**-len(codeword) over every entry.

    A prefix code always has a Kraft sum of at most 1. The sum equals 1
    exactly when every internal trie node has two children.
    """
    return sum((Fraction(1, 2 ** len(code)) for _element, code in table.items()), Fraction(0))


def is_complete(table: PrefixTable) -> bool:
    """Return True if every internal trie node has both children (Kraft sum of 1)."""
    return not table.is_empty and kraft_sum(table) == 1


def average_code_length(table: PrefixTable) -> float:
    """Unweighted mean codeword length (0.0 for an empty table)."""
    if not len(table):
        return 0.0
    return sum(len(code) for _element, code in table.items()) / len(table)
