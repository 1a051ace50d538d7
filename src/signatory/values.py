"""Value kinds of a parameter set, mirroring the JSON types."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

__all__ = ["ParameterSet", "ValueKind", "kind_of"]

ParameterSet = Mapping[str, Any]


class ValueKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value: Any) -> ValueKind | None:
    """Classify a parameter value, or return None if it has no JSON shape.

    bool is checked before int because it is an int subclass.
    """
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if value is None:
        return ValueKind.NULL
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    return None
