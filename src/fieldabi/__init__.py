from __future__ import annotations

from .abi import Abi, Event, Function
from .codec import Type, Types, Value, Values, decode_values, encode_values, parse_type, render_type, type_of
from .core import AbiConfig, FixedWord4
from .errors import AbiError, CodecError, GrammarError, MissingTopic, NotFound, SchemaError
from .schema import DecodedParam, DecodedParams, DecodedParamsReader, Param, ParamEntry

__version__ = "0.1.0"

__all__ = [
    "Abi",
    "Event",
    "Function",
    "Type",
    "Types",
    "Value",
    "Values",
    "decode_values",
    "encode_values",
    "parse_type",
    "render_type",
    "type_of",
    "AbiConfig",
    "FixedWord4",
    "AbiError",
    "CodecError",
    "GrammarError",
    "MissingTopic",
    "NotFound",
    "SchemaError",
    "DecodedParam",
    "DecodedParams",
    "DecodedParamsReader",
    "Param",
    "ParamEntry",
]
