"""
Key Schedule Package

This package implements the RC5 key expansion algorithm that transforms
a secret key into the table of round keys used by the block cipher.
"""

from .rc5_key_schedule import (
    expand_key,
    generate_key,
    key_to_words,
    initialize_table,
    validate_rounds,
)

__all__ = ['expand_key', 'generate_key', 'key_to_words', 'initialize_table', 'validate_rounds']
