"""Parameter schema and decoded-parameter index.

This package provides:
- `ParamEntry`: pydantic model of a JSON parameter entry
- `Param`: parsed parameter (name, type tree, indexed flag)
- `DecodedParam`, `DecodedParams`, `DecodedParamsReader`: decode results
"""

from fieldabi.schema.decoded import DecodedParam, DecodedParams, DecodedParamsReader
from fieldabi.schema.params import Param, ParamEntry

__all__ = [
    "DecodedParam",
    "DecodedParams",
    "DecodedParamsReader",
    "Param",
    "ParamEntry",
]
