"""Byte packing for codeword streams.

This module converts bit sequences to bytes and back so encoded output can be
stored or transmitted.
"""

from __future__ import annotations

from .bitpack import BitPacker, BitUnpacker, pack_codeword, unpack_codeword

__all__ = [
    "BitPacker",
    "BitUnpacker",
    "pack_codeword",
    "unpack_codeword",
]
