"""Word → value decoder, the inverse of encoding.py.

Decoding walks the word stream left to right in lock-step with the expected
types. Words remaining after the last type are left untouched.

Top-level:
- decode_value(words, ty, offset=0) -> (value, new_offset)
- decode_values(words, types) -> list[Value]
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from fieldabi.codec.types import Type, Types
from fieldabi.codec.values import Value, Values
from fieldabi.constants import FIXED_WORD4_LEN, MAX_CODE_POINT, U32_MAX
from fieldabi.core.models import FixedWord4, check_word
from fieldabi.errors import CodecError

__all__ = [
    "decode_value",
    "decode_values",
]


def _read_word(words: Sequence[int], offset: int) -> tuple[int, int]:
    if offset >= len(words):
        raise CodecError(f"word stream exhausted at offset {offset}")
    return check_word(words[offset]), offset + 1


def _read_fixed_word4(words: Sequence[int], offset: int) -> tuple[FixedWord4, int]:
    end = offset + FIXED_WORD4_LEN
    if end > len(words):
        raise CodecError(f"word stream exhausted: need {FIXED_WORD4_LEN} words at offset {offset}")
    return FixedWord4(words[offset:end]), end


def _read_length(words: Sequence[int], offset: int, min_words_per_item: int) -> tuple[int, int]:
    # zero-width items still count as one word, so a length can never exceed the stream
    n, offset = _read_word(words, offset)
    if n * max(min_words_per_item, 1) > len(words) - offset:
        raise CodecError(f"length word {n} exceeds the {len(words) - offset} remaining words")
    return n, offset


def _min_width(ty: Type) -> int:
    """Lower bound on the words one value of `ty` occupies."""
    match ty:
        case Types.U256() | Types.Address() | Types.Hash():
            return FIXED_WORD4_LEN
        case Types.FixedArray(element=element, size=size):
            return size * _min_width(element)
        case Types.Tuple(fields=fields):
            return sum(_min_width(t) for _, t in fields)
    return 1


def _decode_elements(
    words: Sequence[int], element: Type, count: int, offset: int
) -> tuple[list[Value], int]:
    out: list[Value] = []
    for _ in range(count):
        v, offset = decode_value(words, element, offset)
        out.append(v)
    return out, offset


def decode_value(words: Sequence[int], ty: Type, offset: int = 0) -> tuple[Value, int]:
    """Decode one value of type `ty` starting at `offset`; return it with the next offset."""
    match ty:
        case Types.U32():
            w, offset = _read_word(words, offset)
            if w > U32_MAX:
                raise CodecError(f"word {w} does not fit u32")
            return Values.U32(w), offset
        case Types.Field():
            w, offset = _read_word(words, offset)
            return Values.Field(w), offset
        case Types.Bool():
            w, offset = _read_word(words, offset)
            if w not in (0, 1):
                raise CodecError(f"word {w} is not a bool (0 or 1)")
            return Values.Bool(w == 1), offset
        case Types.U256():
            fw, offset = _read_fixed_word4(words, offset)
            return Values.U256(fw.to_int()), offset
        case Types.Address():
            fw, offset = _read_fixed_word4(words, offset)
            return Values.Address(fw), offset
        case Types.Hash():
            fw, offset = _read_fixed_word4(words, offset)
            return Values.Hash(fw), offset
        case Types.String():
            n, offset = _read_length(words, offset, 1)
            chars = []
            for _ in range(n):
                w, offset = _read_word(words, offset)
                if w > MAX_CODE_POINT:
                    raise CodecError(f"word {w} is not a unicode code point")
                chars.append(chr(w))
            return Values.String("".join(chars)), offset
        case Types.Fields():
            n, offset = _read_length(words, offset, 1)
            out = [check_word(w) for w in words[offset : offset + n]]
            return Values.Fields(out), offset + n
        case Types.Array(element=element):
            n, offset = _read_length(words, offset, _min_width(element))
            values, offset = _decode_elements(words, element, n, offset)
            return Values.Array(values, element), offset
        case Types.FixedArray(element=element, size=size):
            values, offset = _decode_elements(words, element, size, offset)
            return Values.FixedArray(values, element), offset
        case Types.Tuple(fields=fields):
            decoded: list[tuple[str, Value]] = []
            for name, field_ty in fields:
                v, offset = decode_value(words, field_ty, offset)
                decoded.append((name, v))
            return Values.Tuple(decoded), offset
    raise CodecError(f"not an ABI type: {ty!r}")


def decode_values(words: Sequence[int], types: Iterable[Type]) -> list[Value]:
    """Decode one value per type from the start of `words`."""
    offset = 0
    out: list[Value] = []
    for ty in types:
        v, offset = decode_value(words, ty, offset)
        out.append(v)
    return out
