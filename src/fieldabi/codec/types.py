"""ABI type tree.

Every variant is a frozen dataclass grouped under the `Types` namespace:
- scalar kinds: `U32`, `U256`, `Field`, `Address`, `Hash`, `Bool`
- variable-length primitives: `String`, `Fields`
- composites: `Array(element)`, `FixedArray(element, size)`, `Tuple(fields)`

`render_type` produces the canonical signature string used for selectors.
Tuples render as the bare word `tuple`; their fields travel out-of-band as
`components` in the JSON schema.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


class _TypeNode:
    __slots__ = ()

    def __str__(self) -> str:
        return render_type(self)  # type: ignore[arg-type]


class Types:
    @dataclass(frozen=True, slots=True)
    class U32(_TypeNode):
        pass

    @dataclass(frozen=True, slots=True)
    class U256(_TypeNode):
        pass

    @dataclass(frozen=True, slots=True)
    class Field(_TypeNode):
        pass

    @dataclass(frozen=True, slots=True)
    class Address(_TypeNode):
        pass

    @dataclass(frozen=True, slots=True)
    class Hash(_TypeNode):
        pass

    @dataclass(frozen=True, slots=True)
    class Bool(_TypeNode):
        pass

    @dataclass(frozen=True, slots=True)
    class String(_TypeNode):
        pass

    @dataclass(frozen=True, slots=True)
    class Fields(_TypeNode):
        pass

    @dataclass(frozen=True, slots=True)
    class Array(_TypeNode):
        """Dynamic-length array; encoded with a leading length word."""

        element: Type

    @dataclass(frozen=True, slots=True)
    class FixedArray(_TypeNode):
        """Static-length array; the size lives in the type, not on the wire."""

        element: Type
        size: int

    @dataclass(frozen=True, slots=True)
    class Tuple(_TypeNode):
        """Ordered named fields. Field order is part of the type."""

        fields: tuple[tuple[str, Type], ...]

        def __init__(self, fields: Iterable[tuple[str, Type]]) -> None:
            object.__setattr__(self, "fields", tuple((name, ty) for name, ty in fields))


Type = (
    Types.U32
    | Types.U256
    | Types.Field
    | Types.Address
    | Types.Hash
    | Types.Bool
    | Types.String
    | Types.Fields
    | Types.Array
    | Types.FixedArray
    | Types.Tuple
)

# keyword → type, in the order the grammar tries them
KEYWORDS: dict[str, Type] = {
    "fields": Types.Fields(),
    "u32": Types.U32(),
    "u256": Types.U256(),
    "field": Types.Field(),
    "address": Types.Address(),
    "hash": Types.Hash(),
    "bool": Types.Bool(),
    "string": Types.String(),
}

_NAMES: dict[type, str] = {type(ty): kw for kw, ty in KEYWORDS.items()}


def render_type(ty: Type) -> str:
    """Render a type tree as its canonical signature string."""
    match ty:
        case Types.Tuple():
            return "tuple"
        case Types.Array(element=element):
            return f"{render_type(element)}[]"
        case Types.FixedArray(element=element, size=size):
            return f"{render_type(element)}[{size}]"
    name = _NAMES.get(type(ty))
    if name is None:
        raise TypeError(f"not an ABI type: {ty!r}")
    return name


def is_compatible(expected: Type, actual: Type) -> bool:
    """Structural equality that ignores tuple field names."""
    match expected:
        case Types.Array(element=element):
            return isinstance(actual, Types.Array) and is_compatible(element, actual.element)
        case Types.FixedArray(element=element, size=size):
            return (
                isinstance(actual, Types.FixedArray)
                and actual.size == size
                and is_compatible(element, actual.element)
            )
        case Types.Tuple(fields=fields):
            return (
                isinstance(actual, Types.Tuple)
                and len(actual.fields) == len(fields)
                and all(is_compatible(e, a) for (_, e), (_, a) in zip(fields, actual.fields))
            )
    return expected == actual


def is_hashed_in_topic(ty: Type) -> bool:
    """Types that an indexed event parameter carries as a hash of their encoding."""
    return isinstance(ty, (Types.String, Types.Fields, Types.Array, Types.FixedArray, Types.Tuple))
