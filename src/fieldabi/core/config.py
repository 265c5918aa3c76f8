from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AbiConfig:
    """Behaviour switches for schema loading and dispatch."""

    # Skip entries such as "constructor" or "error" instead of rejecting the schema
    skip_unknown_entries: bool = False
    # Check the trailing length word of input/output streams against the payload
    strict_length_marker: bool = False
