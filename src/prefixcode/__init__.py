"""prefixcode: Prefix Code Tables

A Python library for decoding and encoding bit streams with a pre-built
prefix code (Huffman-style) table. The table is supplied as (element, codeword)
pairs, checked for prefix conflicts as it is built, and stored as a binary trie.

Key Features:
- Atomic insertion: a rejected entry never leaves the table half-updated
- Greedy bit-stream decoding with partial results on error
- Encoding from the reverse element -> codeword map
- Text table files and byte packing of encoded output

Quick Start:
    >>> from prefixcode import PrefixTable
    >>>
    >>> table = PrefixTable()
    >>> table.insert(2, "0")
    >>> table.insert(3, "10")
    >>> table.insert(4, "11")
    >>>
    >>> table.decode("0010101100")
    [2, 2, 3, 3, 4, 2, 2]
    >>> str(table.encode([2, 3, 4]))
    '01011'
"""

from __future__ import annotations

from .codec import pack_codeword, unpack_codeword
from .codeword import CodeWord, codeword_to_string, string_to_codeword
from .exceptions import (
    AllocationFailureError,
    DuplicateElementError,
    MalformedCodeWordError,
    PrefixCodeError,
    PrefixConflictError,
    TableFormatError,
    TruncatedCodeError,
    UninitializedTableError,
    UnknownElementError,
)
from .models import TableEntry
from .table import PrefixTable
from .tablefile import TableFileConfig, dump_table, load_table
from .utils import average_code_length, encoded_bits, encoded_size, is_complete, kraft_sum

__version__ = "0.1.0"

__all__ = [
    # Core API
    "PrefixTable",
    "CodeWord",
    "string_to_codeword",
    "codeword_to_string",
    # Exceptions
    "PrefixCodeError",
    "DuplicateElementError",
    "PrefixConflictError",
    "AllocationFailureError",
    "UninitializedTableError",
    "TruncatedCodeError",
    "UnknownElementError",
    "MalformedCodeWordError",
    "TableFormatError",
    # Table files
    "TableEntry",
    "TableFileConfig",
    "load_table",
    "dump_table",
    # Byte packing
    "pack_codeword",
    "unpack_codeword",
    # Sizing
    "encoded_bits",
    "encoded_size",
    "kraft_sum",
    "is_complete",
    "average_code_length",
    # Version
    "__version__",
]
