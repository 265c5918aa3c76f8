"""Decoded parameters with access by position and by name.

`DecodedParams` is built once per decode call and never changes. `reader()`
indexes it:
- `by_index`: every decoded param, in declaration order
- `by_name`: params with a non-empty name; on duplicate names the later
  param wins
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import overload

from fieldabi.codec.values import Value
from fieldabi.schema.params import Param


@dataclass(frozen=True, slots=True)
class DecodedParam:
    param: Param
    value: Value

    @property
    def name(self) -> str:
        return self.param.name


class DecodedParams(Sequence[DecodedParam]):
    """Immutable ordered list of decoded params."""

    __slots__ = ("_items",)

    def __init__(self, pairs: Iterable[tuple[Param, Value]] = ()) -> None:
        self._items: tuple[DecodedParam, ...] = tuple(DecodedParam(p, v) for p, v in pairs)

    @overload
    def __getitem__(self, i: int) -> DecodedParam: ...

    @overload
    def __getitem__(self, i: slice) -> tuple[DecodedParam, ...]: ...

    def __getitem__(self, i):
        return self._items[i]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[DecodedParam]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecodedParams):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"DecodedParams({list(self._items)!r})"

    def values(self) -> tuple[Value, ...]:
        return tuple(dp.value for dp in self._items)

    def reader(self) -> DecodedParamsReader:
        """Index the params by position and name."""
        return DecodedParamsReader(self)


class DecodedParamsReader:
    """Read-only views over a `DecodedParams`; holds references, copies no values."""

    __slots__ = ("by_index", "by_name")

    by_index: tuple[DecodedParam, ...]
    by_name: Mapping[str, DecodedParam]

    def __init__(self, decoded: DecodedParams) -> None:
        self.by_index = tuple(decoded)
        # later duplicates overwrite earlier ones
        by_name = {dp.param.name: dp for dp in decoded if dp.param.name}
        self.by_name = MappingProxyType(by_name)
