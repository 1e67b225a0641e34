"""
Whole-Buffer Encryption

This module chunks arbitrary-length buffers into RC5 blocks and transforms
each block independently with a shared cipher context.

Plaintext that is not a multiple of the block size is padded before
encryption. PKCS#7 is the default; ISO 7816-4 and ANSI X.923 are also
available, and padding=None turns padding off so that the caller must
supply block-aligned data.
"""

from typing import Optional, Union

from Cryptodome.Util.Padding import pad, unpad

from ..cipher_core.block_cipher import RC5BlockCipher
from ..config import PADDING_STYLES, RC5_DEFAULT_PARAMS
from ..errors import InvalidKeyLength, InvalidPadding


BufferLike = Union[bytes, bytearray, memoryview]


def _check_padding_style(padding: Optional[str]) -> Optional[str]:
    if padding is None or padding in PADDING_STYLES:
        return padding
    raise InvalidPadding(
        f"rc5: unknown padding style {padding!r}, expected one of {', '.join(PADDING_STYLES)} or None"
    )


class RC5Codec:
    """
    Encrypts and decrypts whole buffers with a single RC5 context.
    """

    def __init__(self,
                 key: BufferLike,
                 rounds: int = RC5_DEFAULT_PARAMS['rounds'],
                 word_size: int = RC5_DEFAULT_PARAMS['word_size'],
                 padding: Optional[str] = RC5_DEFAULT_PARAMS['padding'],
                 block_cipher: Optional[RC5BlockCipher] = None):
        """
        Initialize the codec with a key.

        Args:
            key: The secret key (ignored when block_cipher is given)
            rounds: Number of rounds
            word_size: Word size in bits
            padding: 'pkcs7', 'iso7816', 'x923' or None for block-aligned input
            block_cipher: Optional pre-initialized cipher context
        """
        self.padding = _check_padding_style(padding)
        if block_cipher is None:
            self.cipher = RC5BlockCipher(key, word_size=word_size, rounds=rounds)
        else:
            self.cipher = block_cipher

    @property
    def block_size(self) -> int:
        return self.cipher.block_size

    def encrypt(self, plaintext: BufferLike) -> bytes:
        """
        Encrypt a buffer of any length.

        Args:
            plaintext: The plaintext to encrypt

        Returns:
            The ciphertext, a multiple of the block size

        Raises:
            InvalidInputLength: If padding is None and the input is not block aligned
        """
        data = bytes(plaintext)
        if self.padding is not None:
            data = pad(data, self.block_size, style=self.padding)
        return self.cipher.encrypt(data)

    def decrypt(self, ciphertext: BufferLike) -> bytes:
        """
        Decrypt a buffer and strip its padding.

        Args:
            ciphertext: The ciphertext to decrypt

        Returns:
            The plaintext

        Raises:
            InvalidInputLength: If the ciphertext is not block aligned
            InvalidPadding: If the decrypted padding is malformed
        """
        data = self.cipher.decrypt(ciphertext)
        if self.padding is None:
            return data
        try:
            return unpad(data, self.block_size, style=self.padding)
        except ValueError as e:
            raise InvalidPadding(f"rc5: padding is incorrect ({e})") from e


def encrypt(key: BufferLike,
            rounds: int,
            plaintext: BufferLike,
            word_size: int = RC5_DEFAULT_PARAMS['word_size'],
            padding: Optional[str] = RC5_DEFAULT_PARAMS['padding']) -> bytes:
    """
    Encrypt data with a parameterized RC5.

    Args:
        key: The secret key
        rounds: Number of rounds
        plaintext: The plaintext to encrypt
        word_size: Word size in bits (default: 32)
        padding: Padding style, or None for block-aligned input

    Returns:
        The ciphertext
    """
    return RC5Codec(key, rounds, word_size, padding).encrypt(plaintext)


def decrypt(key: BufferLike,
            rounds: int,
            ciphertext: BufferLike,
            word_size: int = RC5_DEFAULT_PARAMS['word_size'],
            padding: Optional[str] = RC5_DEFAULT_PARAMS['padding']) -> bytes:
    """
    Decrypt data with a parameterized RC5.

    Args:
        key: The secret key
        rounds: Number of rounds
        ciphertext: The ciphertext to decrypt
        word_size: Word size in bits (default: 32)
        padding: Padding style used at encryption, or None

    Returns:
        The plaintext
    """
    return RC5Codec(key, rounds, word_size, padding).decrypt(ciphertext)


def _check_default_key(key: BufferLike) -> None:
    expected = RC5_DEFAULT_PARAMS['key_size']
    length = memoryview(key).nbytes
    if length != expected:
        raise InvalidKeyLength(length, expected)


def encrypt_default(key: BufferLike,
                    plaintext: BufferLike,
                    padding: Optional[str] = RC5_DEFAULT_PARAMS['padding']) -> bytes:
    """
    Encrypt data with RC5-32/12/16.

    Args:
        key: The secret key (exactly 16 bytes)
        plaintext: The plaintext to encrypt
        padding: Padding style, or None for block-aligned input

    Returns:
        The ciphertext
    """
    _check_default_key(key)
    return encrypt(key, RC5_DEFAULT_PARAMS['rounds'], plaintext,
                   RC5_DEFAULT_PARAMS['word_size'], padding)


def decrypt_default(key: BufferLike,
                    ciphertext: BufferLike,
                    padding: Optional[str] = RC5_DEFAULT_PARAMS['padding']) -> bytes:
    """
    Decrypt data with RC5-32/12/16.

    Args:
        key: The secret key (exactly 16 bytes)
        ciphertext: The ciphertext to decrypt
        padding: Padding style used at encryption, or None

    Returns:
        The plaintext
    """
    _check_default_key(key)
    return decrypt(key, RC5_DEFAULT_PARAMS['rounds'], ciphertext,
                   RC5_DEFAULT_PARAMS['word_size'], padding)


if __name__ == "__main__":
    from ..key_schedule.rc5_key_schedule import generate_key

    key = generate_key(16)
    plaintext = b"This is a test message for RC5."

    ciphertext = encrypt_default(key, plaintext)
    print(f"Key: {key.hex()}")
    print(f"Plaintext: {plaintext}")
    print(f"Ciphertext: {ciphertext.hex()}")

    decrypted = decrypt_default(key, ciphertext)
    print(f"Decrypted: {decrypted}")
    assert decrypted == plaintext
