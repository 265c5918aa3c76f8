"""Contract ABI: schema loading and word-stream dispatch.

Stream framing
--------------
- function input:  params || param word count || method id
- function output: params || param word count
- event log:       topics (topic0 = event topic) + data words

All lookups are linear scans; ABIs are small and built once.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ValidationError

from fieldabi.abi.event import Event
from fieldabi.abi.function import Function
from fieldabi.codec.encoding import encode_values
from fieldabi.codec.values import Value
from fieldabi.core.config import AbiConfig
from fieldabi.core.models import FixedWord4
from fieldabi.errors import CodecError, MissingTopic, NotFound, SchemaError
from fieldabi.schema.decoded import DecodedParams
from fieldabi.schema.params import Param, ParamEntry

logger = logging.getLogger(__name__)


class AbiEntry(BaseModel):
    type: str
    name: str | None = None
    inputs: list[ParamEntry] | None = None
    outputs: list[ParamEntry] | None = None
    anonymous: bool | None = None


AbiJson = Iterable[Mapping[str, Any]]
AbiSpec = AbiJson | Path


def _load_abi(abi: AbiSpec) -> AbiJson:
    if isinstance(abi, Path):
        return json.loads(abi.read_text())
    return abi


def _params(entries: list[ParamEntry] | None) -> list[Param]:
    return [Param.from_entry(e) for e in entries or []]


def _as_topic(topic: FixedWord4 | Iterable[int]) -> FixedWord4:
    return topic if isinstance(topic, FixedWord4) else FixedWord4(topic)


@dataclass(frozen=True, slots=True)
class Abi:
    """Functions and events of one contract."""

    functions: tuple[Function, ...] = ()
    events: tuple[Event, ...] = ()
    config: AbiConfig = field(default=AbiConfig(), compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "functions", tuple(self.functions))
        object.__setattr__(self, "events", tuple(self.events))

    # ---------- loading ----------

    @classmethod
    def from_json(cls, source: AbiSpec, config: AbiConfig | None = None) -> Abi:
        """Build an Abi from parsed ABI JSON entries or a path to a JSON file."""
        config = config or AbiConfig()
        raw = _load_abi(source)
        if isinstance(raw, Mapping) or not isinstance(raw, Iterable):
            raise SchemaError("ABI must be a list of entries")

        functions: list[Function] = []
        events: list[Event] = []
        for i, item in enumerate(raw):
            try:
                entry = AbiEntry.model_validate(item)
            except ValidationError as exc:
                raise SchemaError(f"invalid ABI entry #{i}: {exc}") from exc

            if entry.type == "function":
                if entry.name is None:
                    raise SchemaError(f"missing function name in entry #{i}")
                functions.append(Function(entry.name, _params(entry.inputs), _params(entry.outputs)))
            elif entry.type == "event":
                if entry.name is None:
                    raise SchemaError(f"missing event name in entry #{i}")
                if entry.anonymous is None:
                    raise SchemaError(f"missing event anonymous field in entry #{i}")
                events.append(Event(entry.name, _params(entry.inputs), entry.anonymous))
            elif config.skip_unknown_entries:
                logger.warning("skipping ABI entry #%d of type %r", i, entry.type)
            else:
                raise SchemaError(f"invalid ABI entry type: {entry.type}")

        logger.debug("loaded ABI: %d functions, %d events", len(functions), len(events))
        return cls(tuple(functions), tuple(events), config)

    def to_json(self) -> list[dict[str, Any]]:
        """Serialize back to ABI JSON entries: functions first, then events."""
        entries: list[dict[str, Any]] = []
        for f in self.functions:
            entries.append(
                {
                    "type": "function",
                    "name": f.name,
                    "inputs": [p.to_json() for p in f.inputs],
                    "outputs": [p.to_json() for p in f.outputs],
                }
            )
        for e in self.events:
            entries.append(
                {
                    "type": "event",
                    "name": e.name,
                    "inputs": [p.to_json() for p in e.inputs],
                    "anonymous": e.anonymous,
                }
            )
        return entries

    # ---------- lookups ----------

    def function(self, signature: str) -> Function:
        """Find a function by exact signature."""
        for f in self.functions:
            if f.signature() == signature:
                return f
        raise NotFound(f"ABI function not found: {signature}")

    def function_by_method_id(self, method_id: int) -> Function:
        for f in self.functions:
            if f.method_id() == method_id:
                return f
        raise NotFound(f"ABI function not found for method id {method_id:#x}")

    def event(self, topic: FixedWord4 | Iterable[int]) -> Event:
        topic = _as_topic(topic)
        for e in self.events:
            if e.topic() == topic:
                return e
        raise NotFound(f"ABI event not found for topic {topic.hex()}")

    # ---------- decoding ----------

    def _check_length_marker(self, marker: int, payload: Sequence[int]) -> None:
        if self.config.strict_length_marker and marker != len(payload):
            raise CodecError(f"length word {marker} does not match payload of {len(payload)} words")

    def decode_input(self, words: Sequence[int]) -> tuple[Function, DecodedParams]:
        """Identify the called function from the trailing method id and decode its inputs."""
        words = list(words)
        if len(words) < 2:
            raise CodecError("input stream needs at least a length word and a method id")
        f = self.function_by_method_id(words[-1])
        payload = words[:-2]
        self._check_length_marker(words[-2], payload)
        logger.debug("decoding input for %s", f.signature())
        return f, f.decode_input(payload)

    def decode_output(self, signature: str, words: Sequence[int]) -> tuple[Function, DecodedParams]:
        """Decode return words of the function with `signature`."""
        f = self.function(signature)
        words = list(words)
        if not words:
            raise CodecError("output stream needs a trailing length word")
        payload = words[:-1]
        self._check_length_marker(words[-1], payload)
        return f, f.decode_output(payload)

    def decode_log(
        self, topics: Sequence[FixedWord4 | Iterable[int]], data: Sequence[int]
    ) -> tuple[Event, DecodedParams]:
        """Identify the event from topics[0] and decode its parameters."""
        if not topics:
            raise MissingTopic("missing event topic id")
        topics = [_as_topic(t) for t in topics]
        e = self.event(topics[0])
        logger.debug("decoding log for %s", e.signature())
        return e, e.decode_data(topics, data)

    # ---------- encoding ----------

    def encode_input(self, signature: str, values: Sequence[Value]) -> list[int]:
        """Encode a call to the function with `signature`."""
        return self.function(signature).encode_input(values)

    def encode_values(self, values: Sequence[Value]) -> list[int]:
        """Encode a raw parameter block: params || word count."""
        words = encode_values(values)
        words.append(len(words))
        return words
