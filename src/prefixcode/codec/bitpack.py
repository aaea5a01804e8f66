"""Bit-level packing and unpacking of codewords.

This module converts bit sequences to and from bytes for transport.
All operations are deterministic and MSB-first.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..codeword import CodeWord


class BitPacker:
    """Packs bits into a byte buffer.

    Example:
        >>> packer = BitPacker()
        >>> packer.write_codeword(CodeWord.from_string("10"))
        >>> packer.write_bit(1)
        >>> packer.to_bytes()
        b'\\xa0'
    """

    def __init__(self) -> None:
        """Initialize an empty bit packer."""
        self._bits: list[int] = []

    def write_bit(self, value: int | bool) -> None:
        """Write a single bit (any truthy value is written as 1)."""
        self._bits.append(1 if value else 0)

    def write_codeword(self, codeword: Iterable[int]) -> None:
        """Append every bit of a codeword."""
        for bit in codeword:
            self.write_bit(bit)

    def bit_length(self) -> int:
        """Return the current number of bits written."""
        return len(self._bits)

    def to_bytes(self) -> bytes:
        """Convert the bit buffer to bytes.

        If the number of bits is not a multiple of 8, the last byte
        is padded with zeros on the right (LSB side).

        Returns:
            Packed bytes
        """
        if not self._bits:
            return b""

        padded_bits = self._bits + [0] * ((-len(self._bits)) % 8)

        result = bytearray()
        for i in range(0, len(padded_bits), 8):
            byte = 0
            for j in range(8):
                byte = (byte << 1) | padded_bits[i + j]
            result.append(byte)

        return bytes(result)


class BitUnpacker:
    """Reads bits one at a time from a byte buffer.

    Example:
        >>> unpacker = BitUnpacker(b"\\xa0", bit_length=3)
        >>> unpacker.read_codeword(3)
        CodeWord('101')
    """

    def __init__(self, data: bytes, bit_length: int | None = None) -> None:
        """Initialize a bit unpacker.

        Args:
            data: Byte buffer to unpack
            bit_length: Number of meaningful bits (defaults to all of ``data``)

        Raises:
            ValueError: If bit_length is negative or exceeds the buffer
        """
        available = len(data) * 8
        if bit_length is None:
            bit_length = available
        if bit_length < 0 or bit_length > available:
            raise ValueError(f"bit_length must be 0-{available}, got {bit_length}")

        self._bits: list[int] = []
        for byte in data:
            for i in range(7, -1, -1):
                self._bits.append((byte >> i) & 1)
        del self._bits[bit_length:]
        self._position = 0

    def read_bit(self) -> int:
        """Read a single bit.

        Raises:
            IndexError: If no more bits are available
        """
        if self._position >= len(self._bits):
            raise IndexError("Attempted to read past end of bit buffer")

        value = self._bits[self._position]
        self._position += 1
        return value

    def read_codeword(self, num_bits: int) -> CodeWord:
        """Read the next ``num_bits`` bits as a CodeWord.

        Raises:
            IndexError: If not enough bits are available
        """
        if self._position + num_bits > len(self._bits):
            raise IndexError(
                f"Not enough bits: need {num_bits}, have {len(self._bits) - self._position}"
            )
        start = self._position
        self._position += num_bits
        return CodeWord(self._bits[start : self._position])

    def bits_remaining(self) -> int:
        """Return the number of unread bits."""
        return len(self._bits) - self._position

    def position(self) -> int:
        """Return the current read position in bits."""
        return self._position


def pack_codeword(codeword: Iterable[int]) -> bytes:
    """Pack a bit sequence into bytes, zero-padding the final byte."""
    packer = BitPacker()
    packer.write_codeword(codeword)
    return packer.to_bytes()


def unpack_codeword(data: bytes, bit_length: int | None = None) -> CodeWord:
    """Unpack bytes produced by :func:`pack_codeword`.

    Args:
        data: Packed bytes
        bit_length: Number of meaningful bits; padding beyond it is dropped.
            Defaults to every bit in ``data``.

    Raises:
        ValueError: If bit_length exceeds the bits available
    """
    unpacker = BitUnpacker(data, bit_length)
    return unpacker.read_codeword(unpacker.bits_remaining())
