"""Type grammar and word codec.

This package provides:
- Type tree (`Types`, `Type`) and its canonical rendering (`render_type`)
- Type-string parser (`parse_type`) with out-of-band tuple components
- Value tree (`Values`, `Value`, `type_of`)
- Word encoder/decoder (`encode_values`, `decode_values`)
"""

from fieldabi.codec.decoding import decode_value, decode_values
from fieldabi.codec.encoding import encode_value, encode_values
from fieldabi.codec.grammar import Component, parse_type
from fieldabi.codec.types import Type, Types, is_compatible, is_hashed_in_topic, render_type
from fieldabi.codec.values import Value, Values, type_of

__all__ = [
    "decode_value",
    "decode_values",
    "encode_value",
    "encode_values",
    "Component",
    "parse_type",
    "Type",
    "Types",
    "is_compatible",
    "is_hashed_in_topic",
    "render_type",
    "Value",
    "Values",
    "type_of",
]
