"""Utility functions for the deepmatch engine."""

from __future__ import annotations

import dataclasses
import re
from typing import Any, Mapping, Optional


PRIMITIVE_TYPES = (str, bool, int, float)

# Types whose < is a partial order (subset), compared by equality instead
UNORDERED_LEAF_TYPES = (set, frozenset)


def is_primitive(value: Any) -> bool:
    """Check if a value is a primitive leaf (string, boolean, integer, float)."""
    return isinstance(value, PRIMITIVE_TYPES)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping) or (
        dataclasses.is_dataclass(value) and not isinstance(value, type)
    )


def is_ordered(value: Any) -> bool:
    """
    Check if a value is an ordered leaf: not primitive, not composite, and
    of a type that defines its own ordering (Decimal, datetime, bytes, ...).
    """
    if value is None or is_primitive(value) or is_array(value) or is_object(value):
        return False
    if isinstance(value, UNORDERED_LEAF_TYPES):
        return False
    return type(value).__lt__ is not object.__lt__


def is_unordered_leaf(value: Any) -> bool:
    return isinstance(value, UNORDERED_LEAF_TYPES)


def is_leaf(value: Any) -> bool:
    return is_primitive(value) or is_ordered(value) or is_unordered_leaf(value)


def as_object(value: Any) -> Optional[Mapping]:
    """Coerce a value into the Object shape, or None when it has no such shape."""
    if isinstance(value, Mapping):
        return value
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return None


def build_path(parent_path: str, key: str | int) -> str:
    """Build a JSONPath from parent path and key."""
    if isinstance(key, int):
        return f"{parent_path}[{key}]"
    else:
        # Handle special characters in key names
        if re.match(r'^[a-zA-Z_][a-zA-Z0-9_]*$', str(key)):
            return f"{parent_path}.{key}"
        else:
            return f"{parent_path}['{key}']"


def get_type_name(value: Any) -> str:
    """Get a friendly type name for a value."""
    if value is None:
        return "null"
    elif isinstance(value, bool):
        return "boolean"
    elif isinstance(value, int):
        return "integer"
    elif isinstance(value, float):
        return "number"
    elif isinstance(value, str):
        return "string"
    elif is_array(value):
        return "array"
    elif is_object(value):
        return "object"
    else:
        return type(value).__name__
