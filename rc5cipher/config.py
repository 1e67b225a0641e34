"""
Library Defaults and Limits

Default parameters for the RC5-32/12/16 variant together with the limits
enforced when a cipher context is built.
"""

# Default parameters for RC5 (the RC5-32/12/16 variant)
RC5_DEFAULT_PARAMS = {
    'word_size': 32,      # Bits per word
    'rounds': 12,         # Number of rounds
    'key_size': 16,       # Key length in bytes
    'padding': 'pkcs7'    # Padding style for whole-buffer operations
}

SUPPORTED_WORD_SIZES = (16, 32, 64)

# Limits from the RC5 paper: b and r are both one-byte fields
MAX_KEY_SIZE = 255
MAX_ROUNDS = 255

# Styles understood by Cryptodome.Util.Padding
PADDING_STYLES = ('pkcs7', 'iso7816', 'x923')

# Environment variable read by the command-line front end
LOG_LEVEL_ENV = 'RC5_LOG_LEVEL'
