"""Fixed-width 128/256-bit integer codec: public API."""

from __future__ import annotations

from .emit import encode_decimal as encode_decimal
from .hexfmt import encode_hex as encode_hex
from .parse import (
    DecodeError as DecodeError,
    MalformedInput as MalformedInput,
    Overflow as Overflow,
    decode_decimal as decode_decimal,
)
from .words import (
    INT128_MAX as INT128_MAX,
    INT128_MIN as INT128_MIN,
    INT256_MAX as INT256_MAX,
    INT256_MIN as INT256_MIN,
    UINT128_MAX as UINT128_MAX,
    UINT256_MAX as UINT256_MAX,
    UUID as UUID,
    Int128 as Int128,
    Int256 as Int256,
    UInt128 as UInt128,
    UInt256 as UInt256,
    WideInt as WideInt,
)

TYPES: dict[str, type] = {
    "u128": UInt128,
    "i128": Int128,
    "u256": UInt256,
    "i256": Int256,
}
