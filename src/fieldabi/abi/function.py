"""Contract function definition, signature and selector."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from eth_utils import keccak

from fieldabi.codec.decoding import decode_values
from fieldabi.codec.encoding import encode_values
from fieldabi.codec.types import is_compatible, render_type
from fieldabi.codec.values import Value, type_of
from fieldabi.constants import SELECTOR_BYTES
from fieldabi.errors import CodecError
from fieldabi.schema.decoded import DecodedParams
from fieldabi.schema.params import Param


def signature_of(name: str, params: Iterable[Param]) -> str:
    """Canonical `name(t1,t2,...)`; parameter names never take part."""
    return f"{name}({','.join(render_type(p.type) for p in params)})"


def decode_params(params: Sequence[Param], words: Sequence[int]) -> DecodedParams:
    """Decode `words` against the types of `params`, pairing each value with its param."""
    values = decode_values(words, [p.type for p in params])
    return DecodedParams(zip(params, values))


def check_values(params: Sequence[Param], values: Sequence[Value]) -> None:
    """Raise CodecError unless `values` line up with the declared parameter types."""
    if len(values) != len(params):
        raise CodecError(f"expected {len(params)} values, got {len(values)}")
    for p, v in zip(params, values):
        try:
            actual = type_of(v)
        except TypeError as exc:
            raise CodecError(str(exc)) from exc
        if not is_compatible(p.type, actual):
            raise CodecError(
                f"value for {p.name or '<unnamed>'} has type {render_type(actual)}, "
                f"expected {render_type(p.type)}"
            )


@dataclass(frozen=True, slots=True)
class Function:
    """A contract function: name, ordered inputs and ordered outputs."""

    name: str
    inputs: tuple[Param, ...]
    outputs: tuple[Param, ...]

    def __init__(self, name: str, inputs: Iterable[Param] = (), outputs: Iterable[Param] = ()) -> None:
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "inputs", tuple(inputs))
        object.__setattr__(self, "outputs", tuple(outputs))

    def signature(self) -> str:
        return signature_of(self.name, self.inputs)

    def method_id(self) -> int:
        """Selector: leading four bytes of keccak256(signature), big-endian, as a word."""
        digest = keccak(text=self.signature())
        return int.from_bytes(digest[:SELECTOR_BYTES], "big")

    def decode_input(self, words: Sequence[int]) -> DecodedParams:
        """Decode an input payload (framing words already stripped)."""
        return decode_params(self.inputs, words)

    def decode_output(self, words: Sequence[int]) -> DecodedParams:
        """Decode an output payload (length word already stripped)."""
        return decode_params(self.outputs, words)

    def encode_input(self, values: Sequence[Value]) -> list[int]:
        """Encode a call: params || word count || method id."""
        check_values(self.inputs, values)
        words = encode_values(values)
        words.append(len(words))
        words.append(self.method_id())
        return words

    def encode_output(self, values: Sequence[Value]) -> list[int]:
        """Encode return values: params || word count."""
        check_values(self.outputs, values)
        words = encode_values(values)
        words.append(len(words))
        return words
