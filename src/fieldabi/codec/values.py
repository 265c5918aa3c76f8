"""ABI value tree, one variant per `Types` variant.

Arrays keep their element type so that an empty array still knows what it
holds. `type_of` recovers the exact type a value was built against.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from fieldabi.codec.types import Type, Types
from fieldabi.core.models import FixedWord4


class Values:
    @dataclass(frozen=True, slots=True)
    class U32:
        value: int

    @dataclass(frozen=True, slots=True)
    class U256:
        value: int

    @dataclass(frozen=True, slots=True)
    class Field:
        value: int

    @dataclass(frozen=True, slots=True)
    class Address:
        value: FixedWord4

    @dataclass(frozen=True, slots=True)
    class Hash:
        value: FixedWord4

    @dataclass(frozen=True, slots=True)
    class Bool:
        value: bool

    @dataclass(frozen=True, slots=True)
    class String:
        value: str

    @dataclass(frozen=True, slots=True)
    class Fields:
        value: tuple[int, ...]

        def __init__(self, value: Iterable[int]) -> None:
            object.__setattr__(self, "value", tuple(value))

    @dataclass(frozen=True, slots=True)
    class Array:
        values: tuple[Value, ...]
        element_type: Type

        def __init__(self, values: Iterable[Value], element_type: Type) -> None:
            object.__setattr__(self, "values", tuple(values))
            object.__setattr__(self, "element_type", element_type)

    @dataclass(frozen=True, slots=True)
    class FixedArray:
        values: tuple[Value, ...]
        element_type: Type

        def __init__(self, values: Iterable[Value], element_type: Type) -> None:
            object.__setattr__(self, "values", tuple(values))
            object.__setattr__(self, "element_type", element_type)

    @dataclass(frozen=True, slots=True)
    class Tuple:
        fields: tuple[tuple[str, Value], ...]

        def __init__(self, fields: Iterable[tuple[str, Value]]) -> None:
            object.__setattr__(self, "fields", tuple((name, v) for name, v in fields))


Value = (
    Values.U32
    | Values.U256
    | Values.Field
    | Values.Address
    | Values.Hash
    | Values.Bool
    | Values.String
    | Values.Fields
    | Values.Array
    | Values.FixedArray
    | Values.Tuple
)

_SCALARS: dict[type, Type] = {
    Values.U32: Types.U32(),
    Values.U256: Types.U256(),
    Values.Field: Types.Field(),
    Values.Address: Types.Address(),
    Values.Hash: Types.Hash(),
    Values.Bool: Types.Bool(),
    Values.String: Types.String(),
    Values.Fields: Types.Fields(),
}


def type_of(value: Value) -> Type:
    """Return the type `value` was produced against."""
    match value:
        case Values.Array(element_type=element_type):
            return Types.Array(element_type)
        case Values.FixedArray(values=values, element_type=element_type):
            return Types.FixedArray(element_type, len(values))
        case Values.Tuple(fields=fields):
            return Types.Tuple((name, type_of(v)) for name, v in fields)
    ty = _SCALARS.get(type(value))
    if ty is None:
        raise TypeError(f"not an ABI value: {value!r}")
    return ty
