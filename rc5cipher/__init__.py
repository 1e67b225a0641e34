"""
rc5cipher - RC5 Block Cipher Library

This library implements RC5-w/r/b, Rivest's parameterized block cipher,
for word sizes of 16, 32 and 64 bits, 0 to 255 rounds and keys of 0 to
255 bytes.

Key Features:
- Key expansion with the canonical P_w / Q_w magic constants
- Reusable, immutable cipher contexts safe to share between threads
- Independent per-block transform of whole buffers with PKCS#7 padding
- RC5-32/12/16 convenience functions
- Avalanche measurement for diffusion checks
"""

from .cipher_core.block_cipher import RC5BlockCipher, encrypt_block, decrypt_block
from .errors import (
    RC5Error,
    ConfigError,
    InputError,
    UnsupportedWordWidth,
    KeyTooLong,
    InvalidRoundCount,
    InvalidKeyLength,
    InvalidInputLength,
    InvalidBlockLength,
    InvalidPadding,
)
from .key_schedule.rc5_key_schedule import expand_key, generate_key
from .stream_mode.codec import RC5Codec, encrypt, decrypt, encrypt_default, decrypt_default

__version__ = '0.1.0'
__author__ = 'rc5cipher Team'

__all__ = [
    'RC5BlockCipher',
    'RC5Codec',
    'encrypt_block',
    'decrypt_block',
    'encrypt',
    'decrypt',
    'encrypt_default',
    'decrypt_default',
    'expand_key',
    'generate_key',
    'RC5Error',
    'ConfigError',
    'InputError',
    'UnsupportedWordWidth',
    'KeyTooLong',
    'InvalidRoundCount',
    'InvalidKeyLength',
    'InvalidInputLength',
    'InvalidBlockLength',
    'InvalidPadding',
]
