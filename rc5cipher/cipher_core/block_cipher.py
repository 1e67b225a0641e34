"""
Block Cipher Implementation

This module provides the core RC5 block transform and RC5BlockCipher, the
context object that pairs a word size and round count with the expanded
key table built for them.

A block is two w-bit words (A, B). Encryption whitens both words with
S[0] and S[1] and then applies r rounds of XOR, data-dependent rotation
and modular addition of a round key. Decryption runs the inverse rounds
in reverse order.
"""

import logging
from typing import Sequence, Tuple, Union

from ..config import RC5_DEFAULT_PARAMS
from ..errors import InvalidBlockLength, InvalidInputLength
from ..key_schedule.rc5_key_schedule import expand_key
from ..word.word_ops import WordSpec, get_word_spec

logger = logging.getLogger(__name__)

Block = Tuple[int, int]
BufferLike = Union[bytes, bytearray, memoryview]


def encrypt_words(block: Block, expanded_key: Sequence[int], spec: WordSpec) -> Block:
    """
    Encrypt one block of two words.

    The round count is taken from the table length, 2 * (r + 1).

    Args:
        block: The plaintext words (A, B)
        expanded_key: The expanded key table S
        spec: Word arithmetic for the table's width

    Returns:
        The ciphertext words (A', B')
    """
    S = expanded_key
    w = spec.bits
    M = spec.mask
    A = (block[0] + S[0]) & M
    B = (block[1] + S[1]) & M
    for i in range(1, len(S) // 2):
        A = (spec.rotate_left(A ^ B, B % w) + S[2 * i]) & M
        B = (spec.rotate_left(B ^ A, A % w) + S[2 * i + 1]) & M
    return A, B


def decrypt_words(block: Block, expanded_key: Sequence[int], spec: WordSpec) -> Block:
    """
    Decrypt one block of two words; the inverse of encrypt_words.

    Args:
        block: The ciphertext words (A, B)
        expanded_key: The expanded key table S
        spec: Word arithmetic for the table's width

    Returns:
        The plaintext words (A, B)
    """
    S = expanded_key
    w = spec.bits
    A = block[0] & spec.mask
    B = block[1] & spec.mask
    for i in range(len(S) // 2 - 1, 0, -1):
        B = spec.rotate_right(spec.sub(B, S[2 * i + 1]), A % w) ^ A
        A = spec.rotate_right(spec.sub(A, S[2 * i]), B % w) ^ B
    A = spec.sub(A, S[0])
    B = spec.sub(B, S[1])
    return A, B


class RC5BlockCipher:
    """
    RC5 cipher context.

    Runs the key schedule once and keeps the resulting table for any number
    of block operations. The context is immutable after construction and can
    be shared between threads.
    """

    def __init__(self,
                 key: BufferLike,
                 word_size: int = RC5_DEFAULT_PARAMS['word_size'],
                 rounds: int = RC5_DEFAULT_PARAMS['rounds']):
        """
        Initialize the cipher with a key.

        Args:
            key: The secret key (0 to 255 bytes)
            word_size: Word size in bits (16, 32 or 64; default: 32)
            rounds: Number of rounds (0 to 255; default: 12)

        Raises:
            UnsupportedWordWidth: If word_size is not 16, 32 or 64
            KeyTooLong: If the key is longer than 255 bytes
            InvalidRoundCount: If rounds is out of range
        """
        self._spec = get_word_spec(word_size)
        key = bytes(key)
        self._expanded_key = expand_key(key, word_size, rounds)
        self._rounds = rounds
        logger.debug("Built RC5-%d/%d/%d context", word_size, rounds, len(key))

    @property
    def word_size(self) -> int:
        return self._spec.bits

    @property
    def rounds(self) -> int:
        return self._rounds

    @property
    def block_size(self) -> int:
        """Block size in bytes."""
        return self._spec.block_size

    @property
    def expanded_key(self) -> Tuple[int, ...]:
        return self._expanded_key

    def __repr__(self):
        return f"RC5BlockCipher(word_size={self.word_size}, rounds={self.rounds})"

    def encrypt_block(self, block: Block) -> Block:
        """Encrypt one (A, B) word pair."""
        return encrypt_words(block, self._expanded_key, self._spec)

    def decrypt_block(self, block: Block) -> Block:
        """Decrypt one (A, B) word pair."""
        return decrypt_words(block, self._expanded_key, self._spec)

    def _unpack(self, data: BufferLike) -> Block:
        u = self._spec.byte_size
        return self._spec.from_le_bytes(data[:u]), self._spec.from_le_bytes(data[u:2 * u])

    def _pack(self, block: Block) -> bytes:
        return self._spec.to_le_bytes(block[0]) + self._spec.to_le_bytes(block[1])

    def encrypt_block_bytes(self, block: BufferLike) -> bytes:
        """
        Encrypt a single block given as bytes.

        Args:
            block: Exactly block_size bytes, two little-endian words

        Returns:
            The ciphertext block
        """
        block = bytes(block)
        if len(block) != self.block_size:
            raise InvalidBlockLength(len(block), self.block_size)
        return self._pack(self.encrypt_block(self._unpack(block)))

    def decrypt_block_bytes(self, block: BufferLike) -> bytes:
        """
        Decrypt a single block given as bytes.

        Args:
            block: Exactly block_size bytes, two little-endian words

        Returns:
            The plaintext block
        """
        block = bytes(block)
        if len(block) != self.block_size:
            raise InvalidBlockLength(len(block), self.block_size)
        return self._pack(self.decrypt_block(self._unpack(block)))

    def _transform(self, data: BufferLike, encrypt: bool) -> bytes:
        data = bytes(data)
        block_size = self.block_size
        if len(data) % block_size != 0:
            raise InvalidInputLength(len(data), block_size)

        transform = encrypt_words if encrypt else decrypt_words
        result = bytearray()
        for i in range(0, len(data), block_size):
            words = self._unpack(data[i:i + block_size])
            result.extend(self._pack(transform(words, self._expanded_key, self._spec)))
        return bytes(result)

    def encrypt(self, plaintext: BufferLike) -> bytes:
        """
        Encrypt a block-aligned buffer, each block independently.

        Args:
            plaintext: Data whose length is a multiple of block_size

        Returns:
            The ciphertext, same length as the input

        Raises:
            InvalidInputLength: If the input is not block aligned
        """
        return self._transform(plaintext, encrypt=True)

    def decrypt(self, ciphertext: BufferLike) -> bytes:
        """
        Decrypt a block-aligned buffer, each block independently.

        Args:
            ciphertext: Data whose length is a multiple of block_size

        Returns:
            The plaintext, same length as the input

        Raises:
            InvalidInputLength: If the input is not block aligned
        """
        return self._transform(ciphertext, encrypt=False)


def encrypt_block(block: BufferLike, key: BufferLike,
                  word_size: int = RC5_DEFAULT_PARAMS['word_size'],
                  rounds: int = RC5_DEFAULT_PARAMS['rounds']) -> bytes:
    """
    Convenience function to encrypt a single block.

    Args:
        block: The plaintext block (2 * word_size / 8 bytes)
        key: The secret key
        word_size: Word size in bits (default: 32)
        rounds: Number of rounds (default: 12)

    Returns:
        The encrypted ciphertext block
    """
    cipher = RC5BlockCipher(key, word_size=word_size, rounds=rounds)
    return cipher.encrypt_block_bytes(block)


def decrypt_block(block: BufferLike, key: BufferLike,
                  word_size: int = RC5_DEFAULT_PARAMS['word_size'],
                  rounds: int = RC5_DEFAULT_PARAMS['rounds']) -> bytes:
    """
    Convenience function to decrypt a single block.

    Args:
        block: The ciphertext block (2 * word_size / 8 bytes)
        key: The secret key
        word_size: Word size in bits (default: 32)
        rounds: Number of rounds (default: 12)

    Returns:
        The decrypted plaintext block
    """
    cipher = RC5BlockCipher(key, word_size=word_size, rounds=rounds)
    return cipher.decrypt_block_bytes(block)
