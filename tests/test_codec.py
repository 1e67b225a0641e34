import array

import pytest

from rc5cipher import (
    RC5BlockCipher,
    RC5Codec,
    decrypt,
    decrypt_default,
    encrypt,
    encrypt_default,
)
from rc5cipher.errors import (
    ConfigError,
    InputError,
    InvalidInputLength,
    InvalidKeyLength,
    InvalidPadding,
    UnsupportedWordWidth,
)

KEY = bytes.fromhex("2BD6459F82C5B300952C49104881FF48")


def _boundary_lengths(block_size):
    return [0, 1, block_size - 1, block_size, block_size + 1, 2 * block_size + 3]


@pytest.mark.parametrize("word_size", [16, 32, 64])
@pytest.mark.parametrize("padding", ["pkcs7", "iso7816", "x923"])
def test_padded_roundtrip_at_boundaries(word_size, padding):
    block_size = word_size // 4
    for length in _boundary_lengths(block_size):
        plaintext = bytes((i * 37) & 0xFF for i in range(length))
        ciphertext = encrypt(KEY, 12, plaintext, word_size=word_size, padding=padding)
        assert len(ciphertext) % block_size == 0
        assert len(ciphertext) > length
        assert decrypt(KEY, 12, ciphertext, word_size=word_size, padding=padding) == plaintext


def test_pkcs7_adds_full_block_when_aligned():
    ct = encrypt(KEY, 12, bytes(8))
    assert len(ct) == 16


def test_unpadded_mode_matches_raw_ecb():
    pt = bytes.fromhex("EA024714AD5C4D84")
    ct = encrypt(KEY, 12, pt, padding=None)
    assert ct == bytes.fromhex("11E43B86D231EA64")
    assert decrypt(KEY, 12, ct, padding=None) == pt


@pytest.mark.parametrize("length", [1, 7, 9])
def test_unpadded_mode_rejects_unaligned(length):
    with pytest.raises(InvalidInputLength):
        encrypt(KEY, 12, bytes(length), padding=None)


def test_unaligned_ciphertext_rejected():
    with pytest.raises(InvalidInputLength):
        decrypt(KEY, 12, bytes(12))


def test_bad_padding_detected():
    # Encrypts a zero block, whose last byte is not valid PKCS#7 padding
    ciphertext = RC5BlockCipher(KEY).encrypt(bytes(8))
    with pytest.raises(InvalidPadding) as excinfo:
        decrypt(KEY, 12, ciphertext)
    assert isinstance(excinfo.value, InputError)


def test_empty_ciphertext_has_no_padding():
    with pytest.raises(InvalidPadding):
        decrypt(KEY, 12, b"")


def test_unknown_padding_style():
    with pytest.raises(InvalidPadding):
        RC5Codec(KEY, padding="zeros")


def test_config_errors_distinct_from_input_errors():
    with pytest.raises(UnsupportedWordWidth) as excinfo:
        encrypt(KEY, 12, b"data", word_size=24)
    assert isinstance(excinfo.value, ConfigError)
    assert not isinstance(excinfo.value, InputError)


def test_default_variant():
    pt = bytes.fromhex("EA024714AD5C4D84")
    assert encrypt_default(KEY, pt, padding=None) == bytes.fromhex("11E43B86D231EA64")

    key = bytes.fromhex("000102030405060708090A0B0C0D0E0F")
    ct = bytes.fromhex("0011223344556677")
    assert decrypt_default(key, ct, padding=None) == bytes.fromhex("96950DDA654A3D62")


def test_default_variant_padded_roundtrip():
    message = b"The quick brown fox jumps over the lazy dog"
    ct = encrypt_default(KEY, message)
    assert ct == encrypt(KEY, 12, message, word_size=32)
    assert decrypt_default(KEY, ct) == message


@pytest.mark.parametrize("key_len", [0, 15, 17, 32])
def test_default_variant_requires_16_byte_key(key_len):
    with pytest.raises(InvalidKeyLength):
        encrypt_default(bytes(key_len), b"data")
    with pytest.raises(InvalidKeyLength):
        decrypt_default(bytes(key_len), bytes(8))


def test_codec_reuses_given_context():
    cipher = RC5BlockCipher(KEY, word_size=64, rounds=16)
    codec = RC5Codec(b"ignored", block_cipher=cipher)
    assert codec.cipher is cipher
    assert codec.block_size == 16
    assert codec.decrypt(codec.encrypt(b"hello")) == b"hello"


def test_accepts_bytearray_and_memoryview():
    data = bytearray(b"mutable input")
    ct = encrypt(bytearray(KEY), 12, memoryview(data))
    assert decrypt(memoryview(KEY), 12, ct) == bytes(data)


def test_default_variant_key_length_counts_bytes():
    # four 4-byte items make a valid 16-byte key
    key = memoryview(array.array('I', [0] * 4))
    assert decrypt_default(key, encrypt_default(key, b"data")) == b"data"
    with pytest.raises(InvalidKeyLength):
        encrypt_default(memoryview(array.array('I', [0] * 16)), b"data")
