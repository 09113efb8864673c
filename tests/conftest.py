"""Pytest configuration for the wideint test suite."""

import random
import sys
from pathlib import Path

# Add repository root to path for wideint imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from wideint.words import MASK64, WideInt  # noqa: E402

ROUNDS = 20_000
SEED = 0x128256


def to_int(value: WideInt) -> int:
    """Reference: word-model value to a Python int."""
    u = 0
    for w in value.words():
        u = (u << 64) | w
    if value.SIGNED and (u >> (value.BITS - 1)) & 1:
        u -= 1 << value.BITS
    return u


def from_int(cls: type, n: int) -> WideInt:
    """Reference: Python int to a word-model value, wrapping to cls.BITS."""
    u = n & ((1 << cls.BITS) - 1)
    words = []
    k = cls.WORDS - 1
    while k >= 0:
        words.append((u >> (64 * k)) & MASK64)
        k -= 1
    return cls.from_words(words)


# ---------------------------------------------------------------------------
# Weighted random generation
# ---------------------------------------------------------------------------

# Words likely to trigger carry, sign and digit-boundary edge cases
SPECIAL_WORDS = [
    0x0000000000000000,  # zero
    0x0000000000000001,
    0x0000000000000009,
    0x000000000000000A,  # ten
    0x7FFFFFFFFFFFFFFF,  # largest positive high word
    0x8000000000000000,  # sign bit alone
    0x8000000000000001,
    0xFFFFFFFFFFFFFFFE,
    0xFFFFFFFFFFFFFFFF,  # all ones
    0x8AC7230489E80000,  # 10^19
    0x8AC7230489E7FFFF,  # 10^19 - 1
    0x0DE0B6B3A7640000,  # 10^18
]


def weighted_word(rng: random.Random) -> int:
    r = rng.randint(0, 99)
    if r < 40:
        return rng.choice(SPECIAL_WORDS)
    if r < 55:
        # short values exercise the small-magnitude paths
        return rng.randint(0, 0xFFFF)
    return rng.randint(0, MASK64)


def weighted_value(rng: random.Random, cls: type) -> WideInt:
    """Generate a value whose words are weighted toward boundary patterns."""
    words = [weighted_word(rng) for _ in range(cls.WORDS)]
    if rng.randint(0, 3) == 0:
        # leading zero words
        cut = rng.randint(1, cls.WORDS)
        words = [0] * cut + words[cut:]
    return cls.from_words(words)
