"""
Avalanche Measurement

Measures how many ciphertext bits change when a single plaintext or key
bit is flipped. A well-mixed cipher flips about half of the output bits
on average; a broken key schedule or round function shows up as a mean
far from 0.5.
"""

import random
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List

import numpy as np

from ..cipher_core.block_cipher import RC5BlockCipher
from ..config import RC5_DEFAULT_PARAMS


@dataclass
class AvalancheResult:
    """Output bit-flip statistics for one input type."""
    word_size: int
    rounds: int
    input_type: str             # "plaintext" or "key"
    num_trials: int
    num_output_bits: int
    fractions: List[float] = field(default_factory=list)

    mean_fraction: float = 0.0
    std_fraction: float = 0.0
    min_fraction: float = 0.0
    max_fraction: float = 0.0

    @property
    def passes(self) -> bool:
        """Heuristic: mean flip fraction within 0.05 of 0.5."""
        return abs(self.mean_fraction - 0.5) < 0.05

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["passes"] = self.passes
        return d

    def summary(self) -> str:
        status = "PASS" if self.passes else "FAIL"
        return (
            f"[{status}] avalanche({self.input_type}) RC5-{self.word_size}/{self.rounds}: "
            f"mean={self.mean_fraction:.4f}, std={self.std_fraction:.4f}, "
            f"min={self.min_fraction:.4f}, max={self.max_fraction:.4f}"
        )


def _flip_bit(data: bytes, bit: int) -> bytes:
    out = bytearray(data)
    out[bit // 8] ^= 1 << (bit % 8)
    return bytes(out)


def hamming_distance(a: bytes, b: bytes) -> int:
    """Count the differing bits between two equal-length byte strings."""
    x = np.frombuffer(a, dtype=np.uint8) ^ np.frombuffer(b, dtype=np.uint8)
    return int(np.unpackbits(x).sum())


def measure_avalanche(word_size: int = RC5_DEFAULT_PARAMS['word_size'],
                      rounds: int = RC5_DEFAULT_PARAMS['rounds'],
                      key_size: int = RC5_DEFAULT_PARAMS['key_size'],
                      trials: int = 200,
                      input_type: str = "plaintext",
                      seed: int = 1337) -> AvalancheResult:
    """
    Measure the avalanche effect of RC5 for one parameter set.

    Each trial draws a random key and block, flips one random bit of the
    chosen input, and records the fraction of ciphertext bits that differ.

    Args:
        word_size: Word size in bits
        rounds: Number of rounds
        key_size: Key length in bytes
        trials: Number of random trials
        input_type: "plaintext" or "key", the input to perturb
        seed: Random seed for reproducibility

    Returns:
        AvalancheResult with per-trial fractions and aggregate statistics
    """
    if input_type not in ("plaintext", "key"):
        raise ValueError(f"input_type must be 'plaintext' or 'key', got '{input_type}'")
    if input_type == "key" and key_size == 0:
        raise ValueError("Cannot flip a key bit with an empty key")

    rng = random.Random(seed)
    block_bytes = 2 * (word_size // 8)
    num_output_bits = block_bytes * 8
    fractions = np.empty(trials, dtype=np.float64)

    for n in range(trials):
        key = bytes(rng.randrange(256) for _ in range(key_size))
        block = bytes(rng.randrange(256) for _ in range(block_bytes))
        cipher = RC5BlockCipher(key, word_size=word_size, rounds=rounds)
        ct1 = cipher.encrypt_block_bytes(block)

        if input_type == "plaintext":
            ct2 = cipher.encrypt_block_bytes(_flip_bit(block, rng.randrange(num_output_bits)))
        else:
            key2 = _flip_bit(key, rng.randrange(key_size * 8))
            ct2 = RC5BlockCipher(key2, word_size=word_size, rounds=rounds).encrypt_block_bytes(block)

        fractions[n] = hamming_distance(ct1, ct2) / num_output_bits

    return AvalancheResult(
        word_size=word_size,
        rounds=rounds,
        input_type=input_type,
        num_trials=trials,
        num_output_bits=num_output_bits,
        fractions=fractions.tolist(),
        mean_fraction=round(float(fractions.mean()), 6) if trials else 0.0,
        std_fraction=round(float(fractions.std()), 6) if trials else 0.0,
        min_fraction=float(fractions.min()) if trials else 0.0,
        max_fraction=float(fractions.max()) if trials else 0.0,
    )


if __name__ == "__main__":
    for size in (16, 32, 64):
        for kind in ("plaintext", "key"):
            print(measure_avalanche(word_size=size, input_type=kind).summary())
