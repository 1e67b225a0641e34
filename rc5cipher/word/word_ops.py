"""
Word-Width Primitives

This module provides the fixed-width unsigned word arithmetic RC5 is built
on: modular addition and subtraction, rotations by a data-dependent amount
and little-endian conversion between bytes and words. A single WordSpec
instance exists per supported width and is shared by every cipher context.
"""

import math
from dataclasses import dataclass, field
from decimal import Decimal, localcontext
from typing import Dict, Tuple

from ..config import SUPPORTED_WORD_SIZES
from ..errors import UnsupportedWordWidth

# Magic constants P_w = Odd((e - 2) * 2^w) and Q_w = Odd((phi - 1) * 2^w)
MAGIC_CONSTANTS: Dict[int, Tuple[int, int]] = {
    16: (0xB7E1, 0x9E37),
    32: (0xB7E15163, 0x9E3779B9),
    64: (0xB7E151628AED2A6B, 0x9E3779B97F4A7C15),
}


def rotate_left(value: int, shift: int, size: int = 32) -> int:
    """
    Rotate a value left by the specified number of bits.

    Args:
        value: The value to rotate
        shift: The number of bits to rotate by (taken modulo size)
        size: The bit size of the value

    Returns:
        The rotated value
    """
    mask = (1 << size) - 1
    value &= mask
    shift %= size
    return ((value << shift) | (value >> (size - shift))) & mask


def rotate_right(value: int, shift: int, size: int = 32) -> int:
    """
    Rotate a value right by the specified number of bits.

    Args:
        value: The value to rotate
        shift: The number of bits to rotate by (taken modulo size)
        size: The bit size of the value

    Returns:
        The rotated value
    """
    mask = (1 << size) - 1
    value &= mask
    shift %= size
    return ((value >> shift) | (value << (size - shift))) & mask


def derive_magic_constants(word_size: int) -> Tuple[int, int]:
    """
    Compute (P_w, Q_w) from the binary expansions of e and the golden ratio.

    Args:
        word_size: Word size in bits

    Returns:
        A tuple of (P_w, Q_w)
    """
    def odd(d: Decimal) -> int:
        x = math.floor(d)
        return x if x % 2 else x + 1

    with localcontext() as ctx:
        ctx.prec = word_size
        e_frac = Decimal(1).exp() - 2
        phi_frac = (1 + Decimal(5).sqrt()) / 2 - 1
        scale = 1 << word_size
        return odd(e_frac * scale), odd(phi_frac * scale)


@dataclass(frozen=True)
class WordSpec:
    """Arithmetic on unsigned words of a fixed bit width."""
    bits: int
    p: int
    q: int
    mask: int = field(init=False)
    byte_size: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, 'mask', (1 << self.bits) - 1)
        object.__setattr__(self, 'byte_size', self.bits // 8)

    @property
    def block_size(self) -> int:
        """Size of one two-word block in bytes."""
        return 2 * self.byte_size

    def add(self, a: int, b: int) -> int:
        return (a + b) & self.mask

    def sub(self, a: int, b: int) -> int:
        return (a - b) & self.mask

    def rotate_left(self, value: int, shift: int) -> int:
        return rotate_left(value, shift, self.bits)

    def rotate_right(self, value: int, shift: int) -> int:
        return rotate_right(value, shift, self.bits)

    def from_le_bytes(self, data: bytes) -> int:
        """
        Convert up to byte_size little-endian bytes to a word.

        Short input is treated as zero-padded on its high-order bytes.
        """
        if len(data) > self.byte_size:
            raise ValueError(f"A {self.bits}-bit word holds at most {self.byte_size} bytes")
        return int.from_bytes(data, byteorder='little')

    def to_le_bytes(self, value: int) -> bytes:
        return (value & self.mask).to_bytes(self.byte_size, byteorder='little')


WORD_SPECS: Dict[int, WordSpec] = {
    bits: WordSpec(bits, *MAGIC_CONSTANTS[bits]) for bits in SUPPORTED_WORD_SIZES
}


def get_word_spec(word_size: int) -> WordSpec:
    """
    Look up the word arithmetic for a word size.

    Args:
        word_size: Word size in bits (16, 32 or 64)

    Returns:
        The shared WordSpec for that width

    Raises:
        UnsupportedWordWidth: If the width is not one RC5 defines
    """
    # bool is an int subclass and 16.0 hashes like 16; reject both
    if isinstance(word_size, bool) or not isinstance(word_size, int):
        raise UnsupportedWordWidth(word_size)
    spec = WORD_SPECS.get(word_size)
    if spec is None:
        raise UnsupportedWordWidth(word_size)
    return spec
