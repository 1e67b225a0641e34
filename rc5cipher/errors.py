"""
RC5 Error Types

This module defines the exceptions raised by the RC5 library. Errors are
split into two families so callers can tell bad parameters apart from bad
input data without inspecting message text:

- ConfigError: raised while building a cipher context (word size, key,
  round count).
- InputError: raised by the buffer-level operations (length, padding).

Every error derives from ValueError.
"""


class RC5Error(ValueError):
    """Base class for rc5cipher errors"""


class ConfigError(RC5Error):
    """Invalid cipher parameters, detected at construction time"""


class InputError(RC5Error):
    """Invalid plaintext or ciphertext buffer"""


class UnsupportedWordWidth(ConfigError):
    def __init__(self, word_size):
        self.word_size = word_size
        super().__init__(
            f"rc5: unsupported word size {word_size!r}, must be one of 16, 32, 64"
        )


class KeyTooLong(ConfigError):
    def __init__(self, key_length: int, max_length: int = 255):
        self.key_length = key_length
        super().__init__(
            f"rc5: key is {key_length} bytes long, at most {max_length} bytes are supported"
        )


class InvalidRoundCount(ConfigError):
    def __init__(self, rounds, max_rounds: int = 255):
        self.rounds = rounds
        super().__init__(
            f"rc5: invalid number of rounds {rounds!r}, must be an integer between 0 and {max_rounds}"
        )


class InvalidKeyLength(ConfigError):
    def __init__(self, key_length: int, expected: int):
        self.key_length = key_length
        super().__init__(
            f"rc5: key must be {expected} bytes long, got {key_length}"
        )


class InvalidInputLength(InputError):
    def __init__(self, length: int, block_size: int):
        self.length = length
        super().__init__(
            f"rc5: input length {length} is not a multiple of the block size ({block_size} bytes)"
        )


class InvalidBlockLength(InputError):
    def __init__(self, length: int, block_size: int):
        self.length = length
        super().__init__(
            f"rc5: block must be exactly {block_size} bytes, got {length}"
        )


class InvalidPadding(InputError):
    def __init__(self, message: str = "rc5: padding is incorrect"):
        super().__init__(message)
