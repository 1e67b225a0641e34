"""
Cipher Core Package

This package implements the RC5 block transform and the cipher context
that owns an expanded key table.
"""

from .block_cipher import (
    RC5BlockCipher,
    encrypt_words,
    decrypt_words,
    encrypt_block,
    decrypt_block,
)

__all__ = ['RC5BlockCipher', 'encrypt_words', 'decrypt_words', 'encrypt_block', 'decrypt_block']
