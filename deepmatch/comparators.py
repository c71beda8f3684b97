"""Comparison functions for leaf values."""

from __future__ import annotations

from typing import Any

from .utils import is_ordered, is_primitive, is_unordered_leaf


def compare_primitives(expected: Any, actual: Any) -> bool:
    """
    Compare two primitive values by exact equality.

    Booleans only ever equal booleans; integers and floats compare by value.
    """
    if isinstance(expected, bool) or isinstance(actual, bool):
        return type(expected) is type(actual) and expected == actual
    return expected == actual


def three_way(expected: Any, actual: Any) -> int:
    """Return -1, 0 or 1 following the natural order of the two values."""
    return (expected > actual) - (expected < actual)


def compare_ordered(expected: Any, actual: Any) -> bool:
    """
    Compare two ordered values: equal iff the three-way comparison is zero.

    Values whose types cannot be ordered against each other never match.
    """
    try:
        return three_way(expected, actual) == 0
    except TypeError:
        return False


def compare_leaves(expected: Any, actual: Any) -> bool:
    """Compare two leaf values: primitive, ordered, or a set compared by equality."""
    if is_primitive(expected) and is_primitive(actual):
        return compare_primitives(expected, actual)
    if is_ordered(expected) and is_ordered(actual):
        return compare_ordered(expected, actual)
    if is_unordered_leaf(expected) and is_unordered_leaf(actual):
        return expected == actual
    return False
