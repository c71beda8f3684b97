"""Recursive value comparison and per-attribute object diffing."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from .models import (
    EngineConfig,
    MatchingAlgo,
    MatchingResult,
    MatchingStatus,
    ResultBuilder,
)
from .config import ConfigNode, EMPTY
from .comparators import compare_leaves
from .exceptions import DepthExceededError
from .matcher import ArrayMatcher
from .utils import as_object, build_path, is_array, is_leaf, is_object


class ValueComparator:
    """
    Compares two values of any shape and produces a MatchingResult tree.

    Dispatch order:
    - null handling
    - primitive and ordered leaves
    - array vs non-array mismatch
    - arrays (ArrayMatcher) and objects (ObjectDiffer)
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self.objects = ObjectDiffer(self)
        self.arrays = ArrayMatcher(self)

    def check_depth(self, depth: int, path: str):
        if depth > self.config.max_depth:
            raise DepthExceededError(self.config.max_depth, path)

    def compare(
        self,
        expected: Any,
        actual: Any,
        ignored: ConfigNode = EMPTY,
        business_key: ConfigNode = EMPTY,
        path: str = "$",
        depth: int = 0
    ) -> MatchingResult:
        """
        Compare two values.

        Args:
            expected: The reference value
            actual: The value under test
            ignored: Ignore tree for this level
            business_key: Business-key tree for this level
            path: Current JSONPath
            depth: Current nesting depth

        Returns:
            The result node for this pair of values
        """
        self.check_depth(depth, path)
        result = ResultBuilder()

        if expected is None and actual is None:
            return result.build()

        if expected is None or actual is None:
            result.mark(MatchingStatus.FAIL, expected, actual)
            result.match_index = -1
            return result.build()

        if is_leaf(expected) and is_leaf(actual):
            if not compare_leaves(expected, actual):
                result.mark(MatchingStatus.FAIL, expected, actual)
                result.count = 1
            return result.build()

        if is_array(expected) != is_array(actual):
            return result.mark(MatchingStatus.OBJECT_MISMATCH, expected, actual).build()

        if is_array(expected):
            return self.arrays.match(
                expected, actual, ignored, business_key, path, depth + 1
            )

        expected_obj = as_object(expected)
        actual_obj = as_object(actual)
        if expected_obj is None or actual_obj is None:
            result.mark(MatchingStatus.FAIL, expected, actual)
            result.count = 0
            return result.build()

        return self.objects.diff(
            expected_obj, actual_obj, ignored, business_key, path, depth + 1
        )


class ObjectDiffer:
    """
    Compares two objects attribute by attribute.

    The match count of a failing object is the number of credited
    attributes: equal leaves, null on both sides, and one credit per
    nested object or array that matched.
    """

    def __init__(self, comparator: ValueComparator):
        self.comparator = comparator

    def diff(
        self,
        expected: Mapping,
        actual: Mapping,
        ignored: ConfigNode = EMPTY,
        business_key: ConfigNode = EMPTY,
        path: str = "$",
        depth: int = 0
    ) -> MatchingResult:
        self.comparator.check_depth(depth, path)
        result = ResultBuilder()
        matching_count = 0

        for attr, exp_val in expected.items():
            act_val = actual.get(attr)
            entry = ResultBuilder(
                algo=MatchingAlgo.BUSINESS_KEY if business_key.has(attr) else MatchingAlgo.MAX_COUNT
            )
            if self._diff_attribute(
                entry, attr, exp_val, act_val, ignored, business_key,
                build_path(path, attr), depth
            ):
                matching_count += 1
            if entry.status not in (
                MatchingStatus.PASS, MatchingStatus.IGNORED, MatchingStatus.KEY_MATCH
            ):
                result.status = MatchingStatus.FAIL
            result.diff[attr] = entry.build()

        for attr, act_val in actual.items():
            if attr in expected:
                continue
            entry = ResultBuilder(
                algo=MatchingAlgo.BUSINESS_KEY if business_key.has(attr) else MatchingAlgo.MAX_COUNT
            )
            if ignored.has(attr):
                entry.mark(MatchingStatus.IGNORED, None, act_val)
            else:
                entry.mark(MatchingStatus.NEW, None, act_val)
                result.status = MatchingStatus.FAIL
            result.diff[attr] = entry.build()

        if result.status is MatchingStatus.FAIL:
            result.status = self._resolve_business_key(expected, result.diff, business_key)

        if result.is_passing:
            result.diff = {}
        else:
            result.expected = expected
            result.actual = actual
            result.count = matching_count
        return result.build()

    def _diff_attribute(
        self,
        entry: ResultBuilder,
        attr: str,
        exp_val: Any,
        act_val: Any,
        ignored: ConfigNode,
        business_key: ConfigNode,
        path: str,
        depth: int
    ) -> bool:
        """Fill in the entry for one attribute; return True when it earns a credit."""
        is_ignored = ignored.has(attr)

        if exp_val is None and act_val is None:
            if is_ignored:
                entry.mark(MatchingStatus.IGNORED, None, None)
                return False
            return True

        if exp_val is None or act_val is None:
            entry.mark(
                MatchingStatus.IGNORED if is_ignored else MatchingStatus.FAIL,
                exp_val,
                act_val
            )
            return False

        if is_leaf(exp_val) and is_leaf(act_val):
            if is_ignored:
                entry.mark(MatchingStatus.IGNORED, exp_val, act_val)
                return False
            if compare_leaves(exp_val, act_val):
                return True
            entry.mark(MatchingStatus.FAIL, exp_val, act_val)
            return False

        both_objects = is_object(exp_val) and is_object(act_val)
        both_arrays = is_array(exp_val) and is_array(act_val)

        if both_objects or both_arrays:
            if ignored.is_leaf(attr):
                entry.mark(MatchingStatus.IGNORED, exp_val, act_val)
                return False
            if both_objects:
                nested = self.diff(
                    as_object(exp_val), as_object(act_val),
                    ignored.child(attr), business_key.child(attr), path, depth + 1
                )
                credited = (MatchingStatus.PASS, MatchingStatus.KEY_MATCH)
            else:
                nested = self.comparator.arrays.match(
                    exp_val, act_val,
                    ignored.child(attr), business_key.child(attr), path, depth + 1
                )
                credited = (MatchingStatus.PASS,)
            if nested.status is not MatchingStatus.PASS:
                entry.mark(nested.status, exp_val, act_val)
                entry.diff = dict(nested.diff or {})
            return nested.status in credited

        if is_ignored:
            entry.mark(MatchingStatus.IGNORED, exp_val, act_val)
            return False

        if is_array(exp_val) != is_array(act_val):
            entry.mark(MatchingStatus.OBJECT_MISMATCH, exp_val, act_val)
        else:
            entry.mark(MatchingStatus.FAIL, exp_val, act_val)
        return False

    def _resolve_business_key(
        self,
        expected: Mapping,
        entries: Mapping[str, MatchingResult],
        business_key: ConfigNode
    ) -> MatchingStatus:
        """
        Decide what a failing object means under a business key.

        If every key attribute passed the objects share an identity and only
        differ in content (KEY_MATCH); otherwise the pairing does not hold
        at all (NOT_EXISTS). Without an applicable key the object just fails.

        Array-valued attributes only carry keys for their own elements and
        take no part in the identity of this object.
        """
        if not business_key or not set(business_key.keys()) <= set(expected.keys()):
            return MatchingStatus.FAIL

        key_entries = [
            entry for attr, entry in entries.items()
            if entry.algo is MatchingAlgo.BUSINESS_KEY and not is_array(expected.get(attr))
        ]
        if not key_entries:
            return MatchingStatus.FAIL
        if all(e.status is MatchingStatus.PASS for e in key_entries):
            return MatchingStatus.KEY_MATCH
        return MatchingStatus.NOT_EXISTS
