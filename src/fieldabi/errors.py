"""Error taxonomy shared by the grammar, codec and dispatch layers.

- `GrammarError`: malformed type signature or `tuple` without components
- `SchemaError`: missing JSON field or unsupported ABI entry type
- `CodecError`: word stream / value mismatch during encode or decode
- `NotFound`: no function or event matches a selector, signature or topic
- `MissingTopic`: log decoding called with an empty topic list
"""

from __future__ import annotations


class AbiError(Exception):
    """Base class for every error raised by fieldabi."""


class GrammarError(AbiError, ValueError):
    """Raised when a type string is not fully consumed by a valid production."""

    def __init__(self, message: str, type_string: str | None = None, position: int | None = None) -> None:
        if type_string is not None:
            message = f"{message} in {type_string!r}"
            if position is not None:
                message = f"{message} at position {position}"
        super().__init__(message)
        self.type_string = type_string
        self.position = position


class SchemaError(AbiError, ValueError):
    """Raised while loading an ABI schema."""


class CodecError(AbiError, ValueError):
    """Raised when values cannot be encoded or words cannot be decoded."""


class NotFound(AbiError, LookupError):
    """Raised when no function or event matches the lookup key."""


class MissingTopic(AbiError, LookupError):
    """Raised when log decoding receives no topics."""


__all__ = [
    "AbiError",
    "GrammarError",
    "SchemaError",
    "CodecError",
    "NotFound",
    "MissingTopic",
]
