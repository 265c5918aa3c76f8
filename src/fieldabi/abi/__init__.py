"""Contract ABI: functions, events and word-stream dispatch.

This package provides:
- `Function`: signature, method id, input/output codec
- `Event`: signature, topic, log codec
- `Abi`: JSON loading/serialization and selector/topic dispatch
"""

from fieldabi.abi.function import Function
from fieldabi.abi.event import Event
from fieldabi.abi.contract import Abi, AbiEntry

__all__ = [
    "Abi",
    "AbiEntry",
    "Event",
    "Function",
]
