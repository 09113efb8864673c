"""Word model: 128/256-bit integers as tuples of 64-bit words."""

from __future__ import annotations

from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Layer 1: Constants and word primitives
# ---------------------------------------------------------------------------

WORD_BITS: int = 64
MASK64: int = 0xFFFFFFFFFFFFFFFF
SIGN64: int = 0x8000000000000000


def check_word(w: int, name: str) -> None:
    if not isinstance(w, int) or isinstance(w, bool):
        raise TypeError(name + " must be an int, got " + type(w).__name__)
    if w < 0 or w > MASK64:
        raise ValueError(name + " out of range (0..2^64-1): " + str(w))


def is_zero_words(words: tuple[int, ...]) -> bool:
    for w in words:
        if w != 0:
            return False
    return True


def negate_words(words: tuple[int, ...]) -> tuple[int, ...]:
    """Two's-complement negation: complement every word, add 1, carry upward.

    Words are most-significant first. The carry starts at the least
    significant word and stops propagating at the first word that does not
    wrap to zero.
    """
    out: list[int] = [0] * len(words)
    carry: int = 1
    i: int = len(words) - 1
    while i >= 0:
        t: int = (~words[i] & MASK64) + carry
        out[i] = t & MASK64
        carry = t >> WORD_BITS
        i -= 1
    return tuple(out)


def divmod_small(words: tuple[int, ...], divisor: int) -> tuple[tuple[int, ...], int]:
    """Long division by divisor < 2^64. Returns (quotient words, remainder).

    Walks most- to least-significant; the remainder of each word is shifted
    into the top of the next one, so every partial dividend is below
    divisor * 2^64 and every partial quotient fits a word.
    """
    out: list[int] = []
    rem: int = 0
    for w in words:
        cur: int = (rem << WORD_BITS) | w
        out.append(cur // divisor)
        rem = cur - out[-1] * divisor
    return (tuple(out), rem)


def mul_add_small(words: tuple[int, ...], factor: int, addend: int) -> tuple[tuple[int, ...], int]:
    """words * factor + addend, both < 2^64. Returns (words, carry out)."""
    out: list[int] = [0] * len(words)
    carry: int = addend
    i: int = len(words) - 1
    while i >= 0:
        t: int = words[i] * factor + carry
        out[i] = t & MASK64
        carry = t >> WORD_BITS
        i -= 1
    return (tuple(out), carry)


def add_words(a: tuple[int, ...], b: tuple[int, ...]) -> tuple[tuple[int, ...], int]:
    """a + b over equal widths. Returns (words, carry out)."""
    if len(a) != len(b):
        raise ValueError("add_words: width mismatch")
    out: list[int] = [0] * len(a)
    carry: int = 0
    i: int = len(a) - 1
    while i >= 0:
        t: int = a[i] + b[i] + carry
        out[i] = t & MASK64
        carry = t >> WORD_BITS
        i -= 1
    return (tuple(out), carry)


# ---------------------------------------------------------------------------
# Layer 2: Value types
# ---------------------------------------------------------------------------


class WideInt:
    """Shared behaviour of the four word-model types.

    Subclasses define BITS, SIGNED, WORDS, words() and from_words().
    """

    BITS: int = 0
    SIGNED: bool = False
    WORDS: int = 0

    def words(self) -> tuple[int, ...]:
        raise NotImplementedError

    @classmethod
    def from_words(cls, words: tuple[int, ...] | list[int]) -> WideInt:
        raise NotImplementedError

    def is_zero(self) -> bool:
        return is_zero_words(self.words())

    def is_negative(self) -> bool:
        if not self.SIGNED:
            return False
        return (self.words()[0] & SIGN64) != 0

    def negate(self) -> WideInt:
        return self.from_words(negate_words(self.words()))

    def magnitude_words(self) -> tuple[int, ...]:
        """Unsigned words of |self|.

        The minimum signed value negates to itself; read as unsigned that
        bit pattern is exactly 2^(BITS-1), which is its magnitude.
        """
        if self.is_negative():
            return negate_words(self.words())
        return self.words()


def _check_word_count(cls: type, words: tuple[int, ...] | list[int]) -> tuple[int, ...]:
    ws = tuple(words)
    if len(ws) != cls.WORDS:
        raise ValueError(
            cls.__name__ + " needs " + str(cls.WORDS) + " words, got " + str(len(ws))
        )
    return ws


@dataclass(frozen=True)
class UInt128(WideInt):
    high: int
    low: int

    BITS = 128
    SIGNED = False
    WORDS = 2

    def __post_init__(self) -> None:
        check_word(self.high, "high")
        check_word(self.low, "low")

    def words(self) -> tuple[int, ...]:
        return (self.high, self.low)

    @classmethod
    def from_words(cls, words: tuple[int, ...] | list[int]) -> UInt128:
        ws = _check_word_count(cls, words)
        return cls(ws[0], ws[1])


@dataclass(frozen=True)
class Int128(WideInt):
    """Signed 128-bit; high and low hold the raw two's-complement words."""

    high: int
    low: int

    BITS = 128
    SIGNED = True
    WORDS = 2

    def __post_init__(self) -> None:
        check_word(self.high, "high")
        check_word(self.low, "low")

    def words(self) -> tuple[int, ...]:
        return (self.high, self.low)

    @classmethod
    def from_words(cls, words: tuple[int, ...] | list[int]) -> Int128:
        ws = _check_word_count(cls, words)
        return cls(ws[0], ws[1])


@dataclass(frozen=True)
class UInt256(WideInt):
    high: UInt128
    low: UInt128

    BITS = 256
    SIGNED = False
    WORDS = 4

    def __post_init__(self) -> None:
        if type(self.high) is not UInt128 or type(self.low) is not UInt128:
            raise TypeError("UInt256 halves must both be UInt128")

    def words(self) -> tuple[int, ...]:
        return self.high.words() + self.low.words()

    @classmethod
    def from_words(cls, words: tuple[int, ...] | list[int]) -> UInt256:
        ws = _check_word_count(cls, words)
        return cls(UInt128(ws[0], ws[1]), UInt128(ws[2], ws[3]))


@dataclass(frozen=True)
class Int256(WideInt):
    """Signed 256-bit; the sign lives in high, low is an unsigned contribution."""

    high: Int128
    low: UInt128

    BITS = 256
    SIGNED = True
    WORDS = 4

    def __post_init__(self) -> None:
        if type(self.high) is not Int128:
            raise TypeError("Int256 high must be Int128")
        if type(self.low) is not UInt128:
            raise TypeError("Int256 low must be UInt128")

    def words(self) -> tuple[int, ...]:
        return self.high.words() + self.low.words()

    @classmethod
    def from_words(cls, words: tuple[int, ...] | list[int]) -> Int256:
        ws = _check_word_count(cls, words)
        return cls(Int128(ws[0], ws[1]), UInt128(ws[2], ws[3]))


WIDE_TYPES: tuple[type, ...] = (UInt128, Int128, UInt256, Int256)

# A UUID is a bare 128-bit pattern; only word access is meaningful.
UUID = UInt128

UINT128_MAX: UInt128 = UInt128(MASK64, MASK64)
INT128_MIN: Int128 = Int128(SIGN64, 0)
INT128_MAX: Int128 = Int128(SIGN64 - 1, MASK64)
UINT256_MAX: UInt256 = UInt256(UINT128_MAX, UINT128_MAX)
INT256_MIN: Int256 = Int256(INT128_MIN, UInt128(0, 0))
INT256_MAX: Int256 = Int256(INT128_MAX, UINT128_MAX)


def check_wide(value: object) -> None:
    if type(value) not in WIDE_TYPES:
        raise TypeError("expected UInt128, Int128, UInt256 or Int256, got " + type(value).__name__)
