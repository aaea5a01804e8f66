"""Exception hierarchy for prefixcode.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from PrefixCodeError for easy catching of any prefixcode-specific error.

Errors raised part-way through a decode or encode carry the output produced
before the failure point in their ``partial`` attribute.
"""

from __future__ import annotations

from typing import Any


class PrefixCodeError(Exception):
    """Base exception for all prefixcode errors."""

    pass


class DuplicateElementError(PrefixCodeError):
    """Raised when inserting an element that already has a codeword.

    The table is left unchanged.
    """

    def __init__(self, element: Any) -> None:
        super().__init__(f"Element {element!r} is already in the table")
        self.element = element


class PrefixConflictError(PrefixCodeError):
    """Raised when a codeword collides with the existing trie.

    Examples:
        - An existing codeword is a prefix of the new one
        - The new codeword is a prefix of an existing one
        - The new codeword is identical to an existing one
    """

    def __init__(self, element: Any, codeword: Any, reason: str) -> None:
        super().__init__(f"Cannot insert {element!r} with codeword '{codeword}': {reason}")
        self.element = element
        self.codeword = codeword
        self.reason = reason


class AllocationFailureError(PrefixCodeError):
    """Raised when trie nodes could not be allocated during insertion."""

    pass


class UninitializedTableError(PrefixCodeError):
    """Raised when decoding with a table that has never been populated."""

    def __init__(self) -> None:
        super().__init__("Table is not initialized")
        self.partial: list[Any] = []


class TruncatedCodeError(PrefixCodeError):
    """Raised when input bits do not end on a codeword boundary.

    Examples:
        - Input ends in the middle of a codeword
        - Input follows a path that has no branch in the trie

    Attributes:
        partial: Elements decoded before the failure
        position: Bit offset at which decoding stopped
    """

    def __init__(self, partial: list[Any], position: int, message: str) -> None:
        super().__init__(message)
        self.partial = partial
        self.position = position


class UnknownElementError(PrefixCodeError):
    """Raised when encoding an element that has no codeword.

    Attributes:
        partial: CodeWord holding the bits of all preceding elements
        element: The element that could not be encoded
        position: Index of that element in the input sequence
    """

    def __init__(self, partial: Any, element: Any, position: int) -> None:
        super().__init__(f"Element {element!r} at position {position} is not in the table")
        self.partial = partial
        self.element = element
        self.position = position


class MalformedCodeWordError(PrefixCodeError, ValueError):
    """Raised when text or values cannot be converted to a codeword.

    Attributes:
        partial: CodeWord holding the bits parsed before the bad character
        position: Index of the offending character or value
    """

    def __init__(self, partial: Any, position: int, value: Any) -> None:
        super().__init__(f"Invalid bit {value!r} at position {position}")
        self.partial = partial
        self.position = position
        self.value = value


class TableFormatError(PrefixCodeError):
    """Raised when a table file cannot be loaded.

    Examples:
        - Line does not match ``<element> <bits>``
        - Element out of range
        - Entry rejected by the table (duplicate or prefix conflict)
    """

    def __init__(self, message: str, line_number: int | None = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
