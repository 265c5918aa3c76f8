"""Core word primitives and configuration.

This package provides:
- `FixedWord4`: four-word container for 256-bit quantities
- `AbiConfig`: loading and dispatch switches
"""

from fieldabi.core.config import AbiConfig
from fieldabi.core.models import FixedWord4, check_word

__all__ = [
    "AbiConfig",
    "FixedWord4",
    "check_word",
]
