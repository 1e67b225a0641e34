"""Command-line front end for rc5cipher.

Usage:
    python -m rc5cipher keygen --size 16
    python -m rc5cipher encrypt --key 000102030405060708090a0b0c0d0e0f < plain > cipher
    python -m rc5cipher decrypt --key 0001...0e0f --rounds 20 --word-size 64 < cipher
    python -m rc5cipher encrypt --key 00... --padding none --hex < aligned
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from .config import LOG_LEVEL_ENV, PADDING_STYLES, RC5_DEFAULT_PARAMS, SUPPORTED_WORD_SIZES
from .errors import ConfigError, InputError
from .key_schedule.rc5_key_schedule import generate_key
from .stream_mode.codec import RC5Codec

logger = logging.getLogger("rc5cipher")

EXIT_INPUT_ERROR = 1
EXIT_CONFIG_ERROR = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rc5cipher",
        description="RC5 block encryption of stdin to stdout.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    keygen = sub.add_parser("keygen", help="Print a random hex key")
    keygen.add_argument("--size", type=int, default=RC5_DEFAULT_PARAMS['key_size'],
                        help="Key length in bytes (default: %(default)s)")

    for name in ("encrypt", "decrypt"):
        p = sub.add_parser(name, help=f"{name.capitalize()} stdin")
        p.add_argument("--key", required=True, help="Key as hex")
        p.add_argument("--rounds", type=int, default=RC5_DEFAULT_PARAMS['rounds'],
                       help="Number of rounds (default: %(default)s)")
        p.add_argument("--word-size", type=int, default=RC5_DEFAULT_PARAMS['word_size'],
                       choices=SUPPORTED_WORD_SIZES, help="Word size in bits (default: %(default)s)")
        p.add_argument("--padding", default=RC5_DEFAULT_PARAMS['padding'],
                       choices=PADDING_STYLES + ("none",),
                       help="Padding style (default: %(default)s)")
        p.add_argument("--hex", action="store_true",
                       help="Read and write hex text instead of raw bytes")
    return parser


def _configure_logging(verbose: bool) -> None:
    if verbose:
        level = logging.DEBUG
    else:
        # Unknown names map to a "Level x" string; fall back to WARNING
        level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    if args.command == "keygen":
        try:
            key = generate_key(args.size)
        except ValueError as e:
            print(f"error: {e}", file=sys.stderr)
            return EXIT_CONFIG_ERROR
        print(key.hex())
        return 0

    try:
        key = bytes.fromhex(args.key)
    except ValueError:
        print("error: --key must be a hex string", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    padding = None if args.padding == "none" else args.padding
    try:
        codec = RC5Codec(key, rounds=args.rounds, word_size=args.word_size, padding=padding)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR

    data = sys.stdin.buffer.read()
    if args.hex:
        try:
            data = bytes.fromhex(data.decode("ascii"))
        except ValueError:
            print("error: input is not valid hex", file=sys.stderr)
            return EXIT_INPUT_ERROR

    logger.debug("%s %d bytes with %r", args.command, len(data), codec.cipher)
    try:
        out = codec.encrypt(data) if args.command == "encrypt" else codec.decrypt(data)
    except InputError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_INPUT_ERROR

    if args.hex:
        sys.stdout.write(out.hex() + "\n")
    else:
        sys.stdout.buffer.write(out)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
