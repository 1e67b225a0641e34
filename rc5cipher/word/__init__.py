"""
Word Package

This package implements the fixed-width word arithmetic shared by the
key schedule and the block cipher for every supported word size.
"""

from .word_ops import (
    WordSpec,
    MAGIC_CONSTANTS,
    WORD_SPECS,
    get_word_spec,
    derive_magic_constants,
    rotate_left,
    rotate_right,
)

__all__ = [
    'WordSpec',
    'MAGIC_CONSTANTS',
    'WORD_SPECS',
    'get_word_spec',
    'derive_magic_constants',
    'rotate_left',
    'rotate_right',
]
