"""Decimal encoder: word-model value to canonical base-10 text."""

from __future__ import annotations

from .words import WideInt, check_wide, divmod_small, is_zero_words

DIGITS: str = "0123456789"


def words_to_decimal(words: tuple[int, ...]) -> str:
    """Unsigned decimal text of a most-significant-first word tuple.

    Repeated long division by 10: each pass yields the next digit (least
    significant first) and the quotient words for the following pass.
    """
    if is_zero_words(words):
        return "0"
    digits: list[str] = []
    cur: tuple[int, ...] = words
    while not is_zero_words(cur):
        step: tuple[tuple[int, ...], int] = divmod_small(cur, 10)
        cur = step[0]
        digits.append(DIGITS[step[1]])
    digits.reverse()
    return "".join(digits)


def encode_decimal(value: WideInt) -> str:
    """Shortest decimal text for value; '-' prefix only when negative."""
    check_wide(value)
    text: str = words_to_decimal(value.magnitude_words())
    if value.is_negative():
        return "-" + text
    return text
