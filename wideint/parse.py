"""Decimal decoder: base-10 text to word-model values."""

from __future__ import annotations

import logging

from .words import (
    SIGN64,
    WIDE_TYPES,
    WideInt,
    add_words,
    mul_add_small,
    negate_words,
)

logger = logging.getLogger(__name__)

# Low chunk widths: 20 digits bound a 128-bit word pair, 40 a 256-bit quad.
CHUNK_DIGITS_128: int = 20
CHUNK_DIGITS_256: int = 40
# Largest digit count whose value always fits a 64-bit accumulator.
PIECE_DIGITS: int = 19

POW10: list[int] = [10**k for k in range(PIECE_DIGITS + 1)]


class DecodeError(Exception):
    """Decimal decode failure with the offending input and column."""

    def __init__(self, msg: str, text: str, col: int = -1):
        self.msg: str = msg
        self.text: str = text
        self.col: int = col
        if col < 0:
            super().__init__(msg)
        else:
            super().__init__(msg + " at col " + str(col))


class MalformedInput(DecodeError):
    """Empty input, misplaced sign, or a non-digit character."""


class Overflow(DecodeError):
    """Magnitude outside the target type's range."""


def _malformed(msg: str, text: str, col: int = -1) -> MalformedInput:
    logger.debug("malformed decimal %r: %s (col %d)", text, msg, col)
    return MalformedInput(msg, text, col)


def _overflow(target: type, text: str) -> Overflow:
    logger.debug("decimal %r overflows %s", text, target.__name__)
    return Overflow("value out of range for " + target.__name__, text)


def chunk_digits(target: type) -> int:
    if target.BITS == 256:
        return CHUNK_DIGITS_256
    return CHUNK_DIGITS_128


def parse_chunk(digits: str, width: int) -> tuple[tuple[int, ...], int]:
    """Parse an all-digit string into width words. Returns (words, carry out).

    Digits are consumed in pieces of at most PIECE_DIGITS so that each
    piece accumulates in a native 64-bit range before being folded into the
    words with a single multiply-add.
    """
    words: tuple[int, ...] = (0,) * width
    n: int = len(digits)
    first: int = n % PIECE_DIGITS
    if first == 0:
        first = PIECE_DIGITS
    i: int = 0
    end: int = first
    while i < n:
        acc: int = 0
        j: int = i
        while j < end:
            acc = acc * 10 + (ord(digits[j]) - 48)
            j += 1
        step: tuple[tuple[int, ...], int] = mul_add_small(words, POW10[end - i], acc)
        if step[1] != 0:
            return step
        words = step[0]
        i = end
        end = end + PIECE_DIGITS
    return (words, 0)


def scale_pow10(words: tuple[int, ...], exp: int) -> tuple[tuple[int, ...], int]:
    """words * 10^exp. Returns (words, carry out); stops at the first carry."""
    while exp > 0:
        k: int = exp if exp < PIECE_DIGITS else PIECE_DIGITS
        step: tuple[tuple[int, ...], int] = mul_add_small(words, POW10[k], 0)
        if step[1] != 0:
            return step
        words = step[0]
        exp -= k
    return (words, 0)


def decode_decimal(text: str, target: type) -> WideInt:
    """Parse -?[0-9]+ into a value of target, which must be a word-model type.

    Raises MalformedInput for syntax errors and Overflow for values outside
    the target's range; never truncates or wraps.
    """
    if target not in WIDE_TYPES:
        raise TypeError("unsupported target type: " + repr(target))
    if not isinstance(text, str):
        raise TypeError("decode_decimal expects str, got " + type(text).__name__)
    if text == "":
        raise _malformed("empty input", text)
    negative: bool = False
    start: int = 0
    if text[0] == "-":
        if not target.SIGNED:
            raise _malformed("sign not allowed for " + target.__name__, text, 0)
        negative = True
        start = 1
    if start == len(text):
        raise _malformed("missing digits after sign", text, start)
    i: int = start
    while i < len(text):
        c: str = text[i]
        if c < "0" or c > "9":
            raise _malformed("invalid digit " + repr(c), text, i)
        i += 1
    digits: str = text[start:]
    width: int = target.WORDS
    chunk: int = chunk_digits(target)
    split: int = len(digits) - chunk
    if split < 0:
        split = 0
    low: tuple[tuple[int, ...], int] = parse_chunk(digits[split:], width)
    if low[1] != 0:
        raise _overflow(target, text)
    mag: tuple[int, ...] = low[0]
    if split > 0:
        high: tuple[tuple[int, ...], int] = parse_chunk(digits[:split], width)
        if high[1] != 0:
            raise _overflow(target, text)
        scaled: tuple[tuple[int, ...], int] = scale_pow10(high[0], chunk)
        if scaled[1] != 0:
            raise _overflow(target, text)
        total: tuple[tuple[int, ...], int] = add_words(scaled[0], mag)
        if total[1] != 0:
            raise _overflow(target, text)
        mag = total[0]
    if target.SIGNED and (mag[0] & SIGN64) != 0:
        # Only -2^(N-1) may set the top bit of the magnitude.
        min_mag: tuple[int, ...] = (SIGN64,) + (0,) * (width - 1)
        if not negative or mag != min_mag:
            raise _overflow(target, text)
    if negative:
        return target.from_words(negate_words(mag))
    return target.from_words(mag)
