"""wideint CLI: decode, re-encode and inspect wide integers."""

from __future__ import annotations

import logging
import sys

from . import TYPES
from .emit import encode_decimal
from .hexfmt import encode_hex, word_to_hex
from .parse import DecodeError, decode_decimal
from .words import MASK64, WideInt

logger = logging.getLogger("wideint")

USAGE: str = """\
wideint [OPTIONS] [VALUE ...]

Decode decimal VALUEs (or stdin lines) and print their canonical form.

Options:
  --type TYPE     Value type: u128, i128, u256, i256 (default: i128)
  --hex           Also print the hex encoding
  --words         Also print the 64-bit words, most-significant first
  --from-words    Treat VALUEs as 64-bit words, most-significant first,
                  and encode them. A word is decimal digits (255) or
                  0x followed by hex digits (0xFF); no sign, spaces,
                  underscores or other prefixes
  -v, --verbose   Debug logging on stderr
  -h, --help      Show this help message
"""

DEC_CHARS: str = "0123456789"
HEX_CHARS: str = "0123456789abcdefABCDEF"
LOG_FORMAT: str = "%(name)s: %(levelname)s: %(message)s"


def attach_log_handler(verbose: bool) -> tuple[logging.Handler, int]:
    """Send wideint.* records to the current stderr for one main() call.

    Returns the handler and the previous logger level for detach_log_handler.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    previous = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return (handler, previous)


def detach_log_handler(handler: logging.Handler, previous: int) -> None:
    logger.removeHandler(handler)
    logger.setLevel(previous)


def format_value(value: WideInt, show_hex: bool, show_words: bool) -> str:
    fields: list[str] = [encode_decimal(value)]
    if show_hex:
        fields.append(encode_hex(value))
    if show_words:
        fields.append(" ".join("0x" + word_to_hex(w, True) for w in value.words()))
    return "\t".join(fields)


def parse_word(arg: str) -> int:
    """Parse [0-9]+ or 0x[0-9A-Fa-f]+ into a u64; raises ValueError otherwise."""
    body: str = arg
    allowed: str = DEC_CHARS
    base: int = 10
    if arg[:2] == "0x" or arg[:2] == "0X":
        body = arg[2:]
        allowed = HEX_CHARS
        base = 16
    if body == "":
        raise ValueError("invalid word literal: " + repr(arg))
    for c in body:
        if c not in allowed:
            raise ValueError("invalid word literal: " + repr(arg))
    w: int = int(body, base)
    if w > MASK64:
        raise ValueError("word out of range (0..2^64-1): " + arg)
    return w


def run(
    target: type,
    values: list[str],
    from_words: bool,
    show_hex: bool,
    show_words: bool,
) -> int:
    logger.debug("target type %s", target.__name__)
    if from_words:
        if len(values) != target.WORDS:
            print(
                "wideint: "
                + target.__name__
                + " needs "
                + str(target.WORDS)
                + " words, got "
                + str(len(values)),
                file=sys.stderr,
            )
            return 2
        try:
            words = [parse_word(v) for v in values]
        except ValueError as e:
            print("wideint: error: " + str(e), file=sys.stderr)
            return 2
        print(format_value(target.from_words(words), show_hex, show_words))
        return 0

    if len(values) == 0:
        values = [line.strip() for line in sys.stdin.read().split("\n") if line.strip() != ""]
    exit_code = 0
    for text in values:
        try:
            value = decode_decimal(text, target)
        except DecodeError as e:
            print("wideint: error: " + str(e), file=sys.stderr)
            exit_code = 1
            continue
        print(format_value(value, show_hex, show_words))
    return exit_code


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]
    type_name: str = "i128"
    show_hex = False
    show_words = False
    from_words = False
    verbose = False
    values: list[str] = []
    i = 0
    while i < len(args):
        arg = args[i]
        if arg == "--help" or arg == "-h":
            print(USAGE, end="")
            return 0
        elif arg == "--type":
            if i + 1 >= len(args):
                print("wideint: --type requires an argument", file=sys.stderr)
                return 2
            type_name = args[i + 1]
            i += 2
        elif arg == "--hex":
            show_hex = True
            i += 1
        elif arg == "--words":
            show_words = True
            i += 1
        elif arg == "--from-words":
            from_words = True
            i += 1
        elif arg == "--verbose" or arg == "-v":
            verbose = True
            i += 1
        elif arg.startswith("-") and len(arg) > 1 and not arg[1].isdigit():
            print("wideint: unknown flag '" + arg + "'", file=sys.stderr)
            return 2
        else:
            values.append(arg)
            i += 1
    if type_name not in TYPES:
        print("wideint: unknown type '" + type_name + "'", file=sys.stderr)
        return 2

    handler, previous = attach_log_handler(verbose)
    try:
        return run(TYPES[type_name], values, from_words, show_hex, show_words)
    finally:
        detach_log_handler(handler, previous)


if __name__ == "__main__":
    sys.exit(main())
