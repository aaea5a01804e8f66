"""Codeword value type.

A CodeWord is an immutable sequence of bits used both as a path into the
prefix trie and as the unit of encoded output.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import overload

from .exceptions import MalformedCodeWordError


class CodeWord(Sequence[int]):
    """Immutable ordered sequence of bits (0 or 1).

    Example:
        >>> code = CodeWord.from_string("10")
        >>> code + CodeWord([1, 1])
        CodeWord('1011')
        >>> str(code)
        '10'
        >>> len(CodeWord())
        0
    """

    __slots__ = ("_bits",)

    def __init__(self, bits: Iterable[int | bool] = ()) -> None:
        """Create a codeword from bit values.

        Args:
            bits: Iterable of 0/1 values (bools are accepted)

        Raises:
            MalformedCodeWordError: If any value is not 0 or 1
        """
        collected: list[int] = []
        for index, bit in enumerate(bits):
            if bit is True or bit == 1:
                collected.append(1)
            elif bit is False or bit == 0:
                collected.append(0)
            else:
                raise MalformedCodeWordError(CodeWord._from_trusted(collected), index, bit)
        self._bits: tuple[int, ...] = tuple(collected)

    @classmethod
    def _from_trusted(cls, bits: Iterable[int]) -> CodeWord:
        codeword = cls.__new__(cls)
        codeword._bits = tuple(bits)
        return codeword

    @classmethod
    def from_string(cls, text: str) -> CodeWord:
        """Parse a string of '0'/'1' characters.

        Args:
            text: Bit string, e.g. ``"0110"``

        Returns:
            Parsed codeword

        Raises:
            MalformedCodeWordError: On the first character that is not '0' or '1'.
                The bits parsed before it are available as ``exc.partial``.
        """
        bits: list[int] = []
        for index, char in enumerate(text):
            if char == "1":
                bits.append(1)
            elif char == "0":
                bits.append(0)
            else:
                raise MalformedCodeWordError(cls._from_trusted(bits), index, char)
        return cls._from_trusted(bits)

    def is_prefix_of(self, other: CodeWord) -> bool:
        """Return True if this codeword is a (non-strict) prefix of ``other``."""
        return len(self._bits) <= len(other) and other[: len(self._bits)] == self

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> CodeWord: ...

    def __getitem__(self, index: int | slice) -> int | CodeWord:
        if isinstance(index, slice):
            return CodeWord._from_trusted(self._bits[index])
        return self._bits[index]

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self) -> Iterator[int]:
        return iter(self._bits)

    def __add__(self, other: object) -> CodeWord:
        if not isinstance(other, CodeWord):
            return NotImplemented
        return CodeWord._from_trusted(self._bits + other._bits)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CodeWord):
            return NotImplemented
        return self._bits == other._bits

    def __hash__(self) -> int:
        return hash(self._bits)

    def __str__(self) -> str:
        return "".join("1" if bit else "0" for bit in self._bits)

    def __repr__(self) -> str:
        return f"CodeWord('{self}')"


def string_to_codeword(text: str) -> CodeWord:
    """Convert a '0'/'1' string to a CodeWord.

    Raises:
        MalformedCodeWordError: If the string holds any other character
    """
    return CodeWord.from_string(text)


def codeword_to_string(codeword: Sequence[int]) -> str:
    """Render a codeword (or any bit sequence) as a '0'/'1' string."""
    return "".join("1" if bit else "0" for bit in codeword)


def as_codeword(bits: CodeWord | str | Iterable[int | bool]) -> CodeWord:
    """Coerce a CodeWord, bit string, or iterable of bits to a CodeWord."""
    if isinstance(bits, CodeWord):
        return bits
    if isinstance(bits, str):
        return CodeWord.from_string(bits)
    return CodeWord(bits)
