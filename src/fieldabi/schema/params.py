"""Parameter definitions and their JSON form.

A `Param` holds the parsed type tree. Its JSON form (`ParamEntry`) keeps the
type as a signature string and surfaces tuple fields as a `components` list,
the usual ABI-JSON convention:

    {"name": "s", "type": "tuple[]", "components": [{"name": "x", "type": "u32"}]}

Only one array layer is unwrapped when looking for tuple components. A
`tuple[][]` parameter therefore serializes without `components` and cannot be
loaded back.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from fieldabi.codec.grammar import parse_type
from fieldabi.codec.types import Type, Types, render_type
from fieldabi.errors import SchemaError


class ParamEntry(BaseModel):
    name: str
    type: str
    indexed: bool | None = None
    components: list[ParamEntry] | None = None


ParamEntry.model_rebuild()


def _tuple_fields(ty: Type) -> tuple[tuple[str, Type], ...] | None:
    match ty:
        case Types.Tuple(fields=fields):
            return fields
        case Types.Array(element=Types.Tuple(fields=fields)):
            return fields
        case Types.FixedArray(element=Types.Tuple(fields=fields)):
            return fields
    return None


@dataclass(frozen=True, slots=True)
class Param:
    """A named, typed function or event parameter."""

    name: str
    type: Type
    # events only
    indexed: bool | None = None

    @property
    def is_indexed(self) -> bool:
        return bool(self.indexed)

    def to_entry(self) -> ParamEntry:
        fields = _tuple_fields(self.type)
        components = None
        if fields is not None:
            components = [Param(name, ty).to_entry() for name, ty in fields]
        return ParamEntry(
            name=self.name,
            type=render_type(self.type),
            indexed=self.indexed,
            components=components,
        )

    def to_json(self) -> dict[str, Any]:
        """Serialize to an ABI-JSON mapping, omitting unset keys."""
        return self.to_entry().model_dump(exclude_none=True)

    @classmethod
    def from_entry(cls, entry: ParamEntry) -> Param:
        return cls(
            name=entry.name,
            type=parse_type(entry.type, entry.components),
            indexed=entry.indexed,
        )

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> Param:
        """Build a Param from an ABI-JSON mapping (extra keys such as `internalType` are ignored)."""
        try:
            entry = ParamEntry.model_validate(data)
        except ValidationError as exc:
            raise SchemaError(f"invalid parameter entry: {exc}") from exc
        return cls.from_entry(entry)
