"""
Stream Mode Package

This package splits arbitrary-length buffers into RC5 blocks, handles
padding of the final block, and provides the RC5-32/12/16 shortcuts.
"""

from .codec import RC5Codec, encrypt, decrypt, encrypt_default, decrypt_default

__all__ = ['RC5Codec', 'encrypt', 'decrypt', 'encrypt_default', 'decrypt_default']
