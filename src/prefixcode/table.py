"""Prefix code table backed by a binary trie.

The table maps elements to codewords and decodes bit streams by walking a
binary trie in which every edge consumes one bit and every leaf holds one
element. Insertion validates the whole path before touching the trie, so a
failed insert never leaves the table half-updated.

The table is not thread-safe. Hosts that share one across threads must hold
an external lock around ``insert`` and ``clear``.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator
from typing import Any, Generic, NoReturn, TypeVar

from .codec.bitpack import pack_codeword, unpack_codeword
from .codeword import CodeWord, as_codeword
from .exceptions import (
    AllocationFailureError,
    DuplicateElementError,
    PrefixConflictError,
    TruncatedCodeError,
    UninitializedTableError,
    UnknownElementError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Hashable)

_NO_ELEMENT: Any = object()


class _TrieNode:
    """Trie node. A node without children is a leaf."""

    __slots__ = ("left", "right", "element")

    def __init__(self, element: Any = _NO_ELEMENT) -> None:
        self.left: _TrieNode | None = None
        self.right: _TrieNode | None = None
        self.element = element

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def child(self, bit: int) -> _TrieNode | None:
        return self.right if bit else self.left

    def set_child(self, bit: int, node: _TrieNode) -> None:
        if bit:
            self.right = node
        else:
            self.left = node


def _build_branch(element: Any, bits: CodeWord) -> _TrieNode:
    """Build a detached chain of nodes following ``bits`` and ending in a leaf."""
    node = _TrieNode(element)
    for bit in reversed(bits):
        parent = _TrieNode()
        parent.set_child(bit, node)
        node = parent
    return node


class PrefixTable(Generic[T]):
    """Prefix code table supporting decode and encode.

    Elements must be hashable. Each element owns exactly one codeword, and no
    codeword may be a prefix of another.

    Example:
        >>> table = PrefixTable()
        >>> table.insert(2, "0")
        >>> table.insert(3, "10")
        >>> table.insert(4, "11")
        >>> table.decode("0010101100")
        [2, 2, 3, 3, 4, 2, 2]
        >>> str(table.encode([3, 4]))
        '1011'
    """

    def __init__(self) -> None:
        """Create an empty table."""
        self._root: _TrieNode | None = None
        self._codes: dict[T, CodeWord] = {}

    def insert(self, element: T, codeword: CodeWord | str | Iterable[int]) -> None:
        """Add an element with its codeword.

        The trie path is validated first and the new nodes are built detached
        from the trie, then attached together with the encoding entry. If any
        check fails the table is unchanged.

        Args:
            element: Hashable element to add
            codeword: CodeWord, '0'/'1' string, or iterable of bits

        Raises:
            DuplicateElementError: If the element already has a codeword
            PrefixConflictError: If the codeword is a prefix of, extends, or
                equals a codeword already in the table
            AllocationFailureError: If memory runs out while building nodes
            MalformedCodeWordError: If ``codeword`` is not a valid bit sequence
        """
        code = as_codeword(codeword)

        if element in self._codes:
            logger.debug("Repeated codeword for element %r", element)
            raise DuplicateElementError(element)

        node = self._root
        depth = 0
        if node is not None:
            while depth < len(code):
                if node.is_leaf():
                    self._conflict(
                        element, code, f"codeword '{code[:depth]}' is already in the table"
                    )
                child = node.child(code[depth])
                if child is None:
                    break
                node = child
                depth += 1
            else:
                if node.is_leaf():
                    self._conflict(element, code, f"codeword is assigned to {node.element!r}")
                self._conflict(element, code, "codeword is a prefix of existing codewords")

        try:
            if node is None:
                branch = _build_branch(element, code)
            else:
                branch = _build_branch(element, code[depth + 1 :])
        except MemoryError as e:
            logger.debug("Not enough memory to insert %r", element)
            raise AllocationFailureError(f"Not enough memory to insert {element!r}") from e

        if node is None:
            self._root = branch
        else:
            node.set_child(code[depth], branch)
        self._codes[element] = code

    @staticmethod
    def _conflict(element: Any, code: CodeWord, reason: str) -> NoReturn:
        logger.debug("Inconsistent prefix table: %s", reason)
        raise PrefixConflictError(element, code, reason)

    def decode(self, bits: CodeWord | str | Iterable[int]) -> list[T]:
        """Decode a bit sequence into elements.

        Decoding is greedy: each time a leaf is reached its element is emitted
        and the walk restarts at the root.

        Args:
            bits: CodeWord, '0'/'1' string, or iterable of bits

        Returns:
            Decoded elements in order

        Raises:
            UninitializedTableError: If nothing was ever inserted
            TruncatedCodeError: If the input ends mid-codeword or follows a path
                the trie does not have. ``exc.partial`` holds the elements
                decoded so far.
        """
        root = self._root
        if root is None:
            logger.debug("Table is not initialized")
            raise UninitializedTableError()

        data = as_codeword(bits)
        result: list[T] = []
        node = root
        for position, bit in enumerate(data):
            child = node.child(bit)
            if child is None:
                logger.debug("No codeword matches bit %d at position %d", bit, position)
                raise TruncatedCodeError(
                    result, position, f"No codeword matches input at bit {position}"
                )
            if child.is_leaf():
                result.append(child.element)
                node = root
            else:
                node = child

        if node is not root:
            logger.debug("Data to decode doesn't match table: input ends mid-codeword")
            raise TruncatedCodeError(result, len(data), "Input ends in the middle of a codeword")

        return result

    def encode(self, elements: Iterable[T]) -> CodeWord:
        """Encode elements as the concatenation of their codewords.

        Args:
            elements: Elements to encode, in order

        Returns:
            Encoded bits

        Raises:
            UnknownElementError: If an element is not in the table.
                ``exc.partial`` holds the bits of the preceding elements.
        """
        bits: list[int] = []
        for position, element in enumerate(elements):
            try:
                code = self._codes.get(element)
            except TypeError:
                # Unhashable values are never in the table
                code = None
            if code is None:
                logger.debug("Cannot encode message: %r is not in table", element)
                raise UnknownElementError(CodeWord(bits), element, position)
            bits.extend(code)
        return CodeWord(bits)

    def decode_bytes(self, data: bytes, bit_length: int | None = None) -> list[T]:
        """Decode packed bytes, ignoring padding beyond ``bit_length``."""
        return self.decode(unpack_codeword(data, bit_length))

    def encode_bytes(self, elements: Iterable[T]) -> tuple[bytes, int]:
        """Encode elements and pack the result.

        Returns:
            Tuple of (packed bytes, number of meaningful bits)
        """
        code = self.encode(elements)
        return pack_codeword(code), len(code)

    def clear(self) -> None:
        """Discard every node and codeword, returning to the empty state."""
        stack: list[_TrieNode] = []
        if self._root is not None:
            stack.append(self._root)
        self._root = None

        while stack:
            node = stack.pop()
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
            node.left = None
            node.right = None

        self._codes.clear()

    def codeword_for(self, element: T) -> CodeWord:
        """Return the codeword of an element.

        Raises:
            KeyError: If the element is not in the table
        """
        return self._codes[element]

    def items(self) -> Iterator[tuple[T, CodeWord]]:
        """Iterate (element, codeword) pairs in insertion order."""
        return iter(list(self._codes.items()))

    @property
    def is_empty(self) -> bool:
        return self._root is None

    @property
    def max_depth(self) -> int:
        """Length of the longest codeword (0 for an empty table)."""
        return max((len(code) for code in self._codes.values()), default=0)

    def __len__(self) -> int:
        return len(self._codes)

    def __contains__(self, element: object) -> bool:
        try:
            return element in self._codes
        except TypeError:
            return False

    def __repr__(self) -> str:
        return f"PrefixTable({len(self._codes)} entries)"
