"""Contract event definition, topic and log data codec.

Log layout
----------
- topics[0]: `Event.topic()` (absent for anonymous events)
- topics[1..]: one topic per indexed parameter, in declaration order
- data: encoded non-indexed parameters, followed by their word count

An indexed parameter is stored in its topic as:
- string, fields, arrays, tuples: keccak256 of the encoded words (each word
  as 8 big-endian bytes); decodes back to a `Hash` value
- u256, address, hash: the four encoded words
- u32, field, bool: the last topic word, the other three are zero
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from eth_utils import keccak

from fieldabi.abi.function import check_values, signature_of
from fieldabi.codec.decoding import decode_value, decode_values
from fieldabi.codec.encoding import encode_value, encode_values
from fieldabi.codec.types import Type, Types, is_hashed_in_topic
from fieldabi.codec.values import Value, Values
from fieldabi.constants import WORD_BYTES
from fieldabi.core.models import FixedWord4
from fieldabi.errors import CodecError
from fieldabi.schema.decoded import DecodedParams
from fieldabi.schema.params import Param


def _hash_words(words: Iterable[int]) -> FixedWord4:
    return FixedWord4.from_bytes(keccak(b"".join(w.to_bytes(WORD_BYTES, "big") for w in words)))


def _is_wide(ty: Type) -> bool:
    return isinstance(ty, (Types.U256, Types.Address, Types.Hash))


def _topic_for(value: Value, ty: Type) -> FixedWord4:
    words = encode_value(value)
    if is_hashed_in_topic(ty):
        return _hash_words(words)
    if _is_wide(ty):
        return FixedWord4(words)
    return FixedWord4((0, 0, 0, words[0]))


def _value_from_topic(topic: FixedWord4, ty: Type) -> Value:
    if is_hashed_in_topic(ty):
        return Values.Hash(topic)
    if _is_wide(ty):
        value, _ = decode_value(topic.words, ty)
    else:
        if any(topic.words[:-1]):
            raise CodecError(f"topic {topic.hex()} does not hold a single-word {ty}")
        value, _ = decode_value(topic.words[-1:], ty)
    return value


@dataclass(frozen=True, slots=True)
class Event:
    """A contract event: name, ordered inputs, anonymous flag."""

    name: str
    inputs: tuple[Param, ...]
    anonymous: bool

    def __init__(self, name: str, inputs: Iterable[Param] = (), anonymous: bool = False) -> None:
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "inputs", tuple(inputs))
        object.__setattr__(self, "anonymous", anonymous)

    def signature(self) -> str:
        return signature_of(self.name, self.inputs)

    def topic(self) -> FixedWord4:
        """Full keccak256 of the signature, packed into four words."""
        return FixedWord4.from_bytes(keccak(text=self.signature()))

    def decode_data(self, topics: Sequence[FixedWord4], data: Sequence[int]) -> DecodedParams:
        """Decode a log: indexed params from `topics`, the rest from `data`."""
        if not self.anonymous:
            if not topics:
                raise CodecError("missing event topic")
            topics = topics[1:]

        data_values = iter(decode_values(data, [p.type for p in self.inputs if not p.is_indexed]))
        topic_iter = iter(topics)

        pairs: list[tuple[Param, Value]] = []
        for p in self.inputs:
            if p.is_indexed:
                topic = next(topic_iter, None)
                if topic is None:
                    raise CodecError(f"insufficient topics for indexed parameter {p.name!r}")
                pairs.append((p, _value_from_topic(topic, p.type)))
            else:
                pairs.append((p, next(data_values)))
        return DecodedParams(pairs)

    def encode_log(self, values: Sequence[Value]) -> tuple[list[FixedWord4], list[int]]:
        """Build `(topics, data)` for a log carrying `values`."""
        check_values(self.inputs, values)
        topics: list[FixedWord4] = [] if self.anonymous else [self.topic()]
        data_values: list[Value] = []
        for p, v in zip(self.inputs, values):
            if p.is_indexed:
                topics.append(_topic_for(v, p.type))
            else:
                data_values.append(v)
        data = encode_values(data_values)
        data.append(len(data))
        return topics, data
