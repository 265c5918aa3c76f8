"""Value → word encoder.

Layout per variant:
- u32, field, bool:      1 word
- u256:                  4 words, most significant first
- address, hash:         the 4 words of the FixedWord4, in order
- string:                N || one word per code point
- fields:                N || N words
- T[]:                   N || enc(e_0) .. enc(e_N-1)
- T[K]:                  enc(e_0) .. enc(e_K-1)       (no length word)
- tuple:                 enc(f_0) .. enc(f_M-1)       (no length word)

Top-level:
- encode_value(value) -> list[int]
- encode_values(values) -> list[int]
"""

from __future__ import annotations

from collections.abc import Iterable

from fieldabi.codec.types import Type, render_type
from fieldabi.codec.values import Value, Values, type_of
from fieldabi.constants import U32_MAX, WORD_MAX
from fieldabi.core.models import FixedWord4, check_word
from fieldabi.errors import CodecError

__all__ = [
    "encode_value",
    "encode_values",
]


def _int_in_range(v: object, hi: int, kind: str) -> int:
    if isinstance(v, bool) or not isinstance(v, int):
        raise CodecError(f"{kind} must be an int, got {type(v).__name__}")
    if v < 0 or v > hi:
        raise CodecError(f"{kind} value {v} out of range [0, {hi}]")
    return v


def _fixed_word4(v: object, kind: str) -> FixedWord4:
    if not isinstance(v, FixedWord4):
        raise CodecError(f"{kind} must hold a FixedWord4, got {type(v).__name__}")
    return v


def _encode_elements(values: tuple[Value, ...], element_type: Type, out: list[int]) -> None:
    for v in values:
        try:
            actual = type_of(v)
        except TypeError as exc:
            raise CodecError(str(exc)) from exc
        if actual != element_type:
            raise CodecError(
                f"array element of type {render_type(actual)} does not match {render_type(element_type)}"
            )
        _encode_into(v, out)


def _encode_into(value: Value, out: list[int]) -> None:
    match value:
        case Values.U32(value=v):
            out.append(_int_in_range(v, U32_MAX, "u32"))
        case Values.Field(value=v):
            out.append(_int_in_range(v, WORD_MAX, "field"))
        case Values.Bool(value=v):
            if not isinstance(v, bool):
                raise CodecError(f"bool must be True/False, got {v!r}")
            out.append(int(v))
        case Values.U256(value=v):
            out.extend(FixedWord4.from_int(v))
        case Values.Address(value=v):
            out.extend(_fixed_word4(v, "address"))
        case Values.Hash(value=v):
            out.extend(_fixed_word4(v, "hash"))
        case Values.String(value=v):
            if not isinstance(v, str):
                raise CodecError(f"string must be a str, got {type(v).__name__}")
            out.append(len(v))
            out.extend(ord(ch) for ch in v)
        case Values.Fields(value=v):
            out.append(len(v))
            out.extend(check_word(w) for w in v)
        case Values.Array(values=values, element_type=element_type):
            out.append(len(values))
            _encode_elements(values, element_type, out)
        case Values.FixedArray(values=values, element_type=element_type):
            _encode_elements(values, element_type, out)
        case Values.Tuple(fields=fields):
            for _name, v in fields:
                _encode_into(v, out)
        case _:
            raise CodecError(f"not an ABI value: {value!r}")


def encode_value(value: Value) -> list[int]:
    """Encode one value into words."""
    out: list[int] = []
    _encode_into(value, out)
    return out


def encode_values(values: Iterable[Value]) -> list[int]:
    """Concatenate the encodings of `values` in order, without separators."""
    out: list[int] = []
    for v in values:
        _encode_into(v, out)
    return out
