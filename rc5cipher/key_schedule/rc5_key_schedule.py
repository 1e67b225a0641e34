"""
RC5 Key Schedule Implementation

This module implements the RC5 key expansion, which turns a variable-length
secret key into the table S[0..2r+1] of round keys consumed by the block
cipher. The expansion mixes the key words into a key-independent table
seeded with the magic constants P_w and Q_w.
"""

import logging
import secrets
from typing import List, Tuple, Union

from ..config import MAX_KEY_SIZE, MAX_ROUNDS, RC5_DEFAULT_PARAMS
from ..errors import KeyTooLong, InvalidRoundCount
from ..word.word_ops import WordSpec, get_word_spec

logger = logging.getLogger(__name__)

KeyBytes = Union[bytes, bytearray, memoryview]


def generate_key(key_size: int = RC5_DEFAULT_PARAMS['key_size']) -> bytes:
    """
    Generate a cryptographically secure random key.

    Args:
        key_size: Size of the key in bytes (default: 16)

    Returns:
        A random key as bytes
    """
    if isinstance(key_size, bool) or not isinstance(key_size, int) or key_size < 0:
        raise ValueError(f"Key size must be a non-negative integer, got {key_size!r}")
    if key_size > MAX_KEY_SIZE:
        raise KeyTooLong(key_size, MAX_KEY_SIZE)
    return secrets.token_bytes(key_size)


def validate_rounds(rounds: int) -> int:
    """Return rounds unchanged, or raise InvalidRoundCount."""
    if isinstance(rounds, bool) or not isinstance(rounds, int):
        raise InvalidRoundCount(rounds, MAX_ROUNDS)
    if rounds < 0 or rounds > MAX_ROUNDS:
        raise InvalidRoundCount(rounds, MAX_ROUNDS)
    return rounds


def key_to_words(key: KeyBytes, spec: WordSpec) -> List[int]:
    """
    Pack key bytes into little-endian words.

    The last word is zero-padded on its high-order bytes. An empty key
    yields a single zero word so that the mixing loop stays well defined.

    Args:
        key: The secret key
        spec: Word arithmetic for the chosen width

    Returns:
        The list L of key words
    """
    u = spec.byte_size
    key = bytes(key)
    if not key:
        return [0]
    return [spec.from_le_bytes(key[i:i + u]) for i in range(0, len(key), u)]


def initialize_table(rounds: int, spec: WordSpec) -> List[int]:
    """
    Build the key-independent table S[i] = P_w + i * Q_w.

    Args:
        rounds: Number of rounds
        spec: Word arithmetic for the chosen width

    Returns:
        A list of 2 * (rounds + 1) words
    """
    table = [spec.p]
    for _ in range(1, 2 * (rounds + 1)):
        table.append(spec.add(table[-1], spec.q))
    return table


def mix_key(table: List[int], words: List[int], spec: WordSpec) -> None:
    """
    Mix the key words into the table in place.

    Runs 3 * max(t, c) steps over S (length t) and L (length c), starting
    from A = B = 0.
    """
    t = len(table)
    c = len(words)
    w = spec.bits
    i = j = 0
    a = b = 0
    for _ in range(3 * max(t, c)):
        a = table[i] = spec.rotate_left(spec.add(table[i], a + b), 3)
        b = words[j] = spec.rotate_left(spec.add(words[j], a + b), (a + b) % w)
        i = (i + 1) % t
        j = (j + 1) % c


def expand_key(key: KeyBytes,
               word_size: int = RC5_DEFAULT_PARAMS['word_size'],
               rounds: int = RC5_DEFAULT_PARAMS['rounds']) -> Tuple[int, ...]:
    """
    Expand a secret key into the RC5 round-key table.

    Args:
        key: The secret key (0 to 255 bytes)
        word_size: Word size in bits (16, 32 or 64)
        rounds: Number of rounds (0 to 255)

    Returns:
        The expanded key table S as a tuple of 2 * (rounds + 1) words

    Raises:
        UnsupportedWordWidth: If word_size is not 16, 32 or 64
        KeyTooLong: If the key is longer than 255 bytes
        InvalidRoundCount: If rounds is not an integer in 0..255
    """
    spec = get_word_spec(word_size)
    key = bytes(key)
    if len(key) > MAX_KEY_SIZE:
        raise KeyTooLong(len(key), MAX_KEY_SIZE)
    validate_rounds(rounds)

    words = key_to_words(key, spec)
    table = initialize_table(rounds, spec)
    mix_key(table, words, spec)

    logger.debug("Expanded %d-byte key into %d words (w=%d, r=%d)",
                 len(key), len(table), word_size, rounds)
    return tuple(table)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    for size in (16, 32, 64):
        table = expand_key(bytes(16), size, 12)
        print(f"w={size}: S[0]={table[0]:#x} S[1]={table[1]:#x} ({len(table)} words)")
