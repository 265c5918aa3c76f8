"""Recursive-descent parser for ABI type strings.

Grammar (alternatives in priority order):

    type        := array | simple_type
    array       := simple_type bracket+
    bracket     := "[" integer? "]"
    simple_type := "tuple" | "fields" | "u32" | "u256" | "field"
                 | "address" | "hash" | "bool" | "string"

`tuple` carries no field detail in the string itself. Its fields come from the
out-of-band `components` list: every component's own `type` is parsed with
that component's own nested `components`, never the parent's.

Brackets fold left to right: the first bracket wraps the simple type, each
later bracket wraps the result so far. `"string[2][]"` is a dynamic array of
fixed-2 string arrays.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from fieldabi.codec.types import KEYWORDS, Type, Types
from fieldabi.constants import WORD_MAX
from fieldabi.errors import GrammarError


@runtime_checkable
class Component(Protocol):
    """Anything shaped like a JSON `ParamEntry`: name, type string, nested components."""

    @property
    def name(self) -> str: ...

    @property
    def type(self) -> str: ...

    @property
    def components(self) -> Sequence[Component] | None: ...


class _Parser:
    def __init__(self, text: str, components: Sequence[Component] | None) -> None:
        self.text = text
        self.components = components
        self.pos = 0

    def error(self, message: str) -> GrammarError:
        return GrammarError(message, self.text, self.pos)

    def parse(self) -> Type:
        ty = self.simple_type()
        while self.peek("["):
            ty = self.bracket(ty)
        if self.pos != len(self.text):
            raise self.error("unexpected trailing input")
        return ty

    def peek(self, token: str) -> bool:
        return self.text.startswith(token, self.pos)

    def simple_type(self) -> Type:
        if self.peek("tuple"):
            self.pos += len("tuple")
            return self.tuple_type()
        for keyword, ty in KEYWORDS.items():
            if self.peek(keyword):
                self.pos += len(keyword)
                return ty
        raise self.error("unknown type")

    def tuple_type(self) -> Types.Tuple:
        if self.components is None:
            raise self.error("tuple without components")
        fields: list[tuple[str, Type]] = []
        for component in self.components:
            try:
                ty = parse_type(component.type, component.components)
            except GrammarError as exc:
                raise self.error(f"invalid component {component.name!r}: {exc}") from exc
            fields.append((component.name, ty))
        return Types.Tuple(fields)

    def bracket(self, inner: Type) -> Type:
        self.pos += 1  # "["
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos].isdigit():
            self.pos += 1
        digits = self.text[start : self.pos]
        if not self.peek("]"):
            raise self.error("expected ']'")
        self.pos += 1
        if not digits:
            return Types.Array(inner)
        if not digits.isascii():
            raise GrammarError("array size must use ASCII digits", self.text, start)
        size = int(digits)
        if size > WORD_MAX:
            raise GrammarError("array size does not fit u64", self.text, start)
        return Types.FixedArray(inner, size)


def parse_type(type_string: str, components: Sequence[Component] | None = None) -> Type:
    """Parse a full type string; `components` resolves any `tuple` it contains."""
    if not isinstance(type_string, str):
        raise GrammarError(f"type must be a string, got {type(type_string).__name__}")
    return _Parser(type_string, components).parse()
