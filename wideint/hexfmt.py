"""Hex encoder: debug rendering of word-model values."""

from __future__ import annotations

from .words import WideInt, check_wide


def word_to_hex(w: int, pad: bool) -> str:
    """Uppercase hex for one 64-bit word, zero-padded to 16 digits if pad."""
    if pad:
        return "%016X" % w
    return "%X" % w


def encode_hex(value: WideInt) -> str:
    """'0x' plus uppercase hex digits, most-significant word first.

    Signed values always show every word padded, so the sign bit is the top
    bit of the first digit. Unsigned values drop leading zero words and
    leading zeros of the first word shown.
    """
    check_wide(value)
    words: tuple[int, ...] = value.words()
    if value.SIGNED:
        return "0x" + "".join(word_to_hex(w, True) for w in words)
    start: int = 0
    while start < len(words) - 1 and words[start] == 0:
        start += 1
    parts: list[str] = [word_to_hex(words[start], False)]
    for w in words[start + 1 :]:
        parts.append(word_to_hex(w, True))
    return "0x" + "".join(parts)
