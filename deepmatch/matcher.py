"""Best-effort matching of unordered arrays."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any, Sequence

from .models import NEG_INFINITY, MatchingResult, MatchingStatus, ResultBuilder
from .config import ConfigNode, EMPTY
from .exceptions import UnsupportedComparisonError
from .utils import build_path, is_array

if TYPE_CHECKING:
    from .differ import ValueComparator


def _score(cell: MatchingResult) -> int:
    return cell.count if cell.count is not None else NEG_INFINITY


def _cell_rank(cell: MatchingResult) -> tuple:
    """Sort key putting the most promising candidate first."""
    return (
        cell.status is not MatchingStatus.PASS,
        cell.status is not MatchingStatus.KEY_MATCH,
        -_score(cell),
        cell.match_index,
    )


class ArrayMatcher:
    """
    Matches the elements of two arrays regardless of order.

    Every expected element is compared with every actual element, then
    candidates are claimed greedily; a claimed actual element is blocked
    for all other expected elements. This is a deterministic heuristic,
    not an optimal assignment.

    Stages:
    1. Scoring: full cross matrix of comparison results
    2. Exact pass: rows with a passing candidate claim the first free one
    3. Ordering: remaining rows sorted by business-key match, then count
    4. Greedy claim: each remaining row takes its best free candidate
    """

    def __init__(self, comparator: ValueComparator):
        self.comparator = comparator

    def match(
        self,
        expected: Sequence,
        actual: Sequence,
        ignored: ConfigNode = EMPTY,
        business_key: ConfigNode = EMPTY,
        path: str = "$",
        depth: int = 0
    ) -> MatchingResult:
        self.comparator.check_depth(depth, path)
        result = ResultBuilder()

        if expected is None and actual is None:
            return result.build()
        if expected is None or actual is None:
            result.mark(MatchingStatus.FAIL, expected, actual)
            result.match_index = -1
            return result.build()
        if not expected:
            return result.build()

        if business_key and any(is_array(item) for item in [*expected, *actual]):
            raise UnsupportedComparisonError(path)

        result.mark(MatchingStatus.FAIL, expected, actual)

        if not actual:
            for i, item in enumerate(expected):
                result.diff[str(i)] = MatchingResult(
                    status=MatchingStatus.NOT_EXISTS,
                    expected=item,
                    element_index=i,
                )
            return result.build()

        rows = [
            [
                self._score_pair(i, exp_item, j, act_item, ignored, business_key, path, depth)
                for j, act_item in enumerate(actual)
            ]
            for i, exp_item in enumerate(expected)
        ]

        blocked = [False] * len(actual)
        deferred = []
        for i, cells in enumerate(rows):
            passing = next(
                (c for c in cells
                 if c.status is MatchingStatus.PASS and not blocked[c.match_index]),
                None
            )
            if passing is None:
                deferred.append(i)
                continue
            blocked[passing.match_index] = True
            result.diff[str(i)] = passing

        if not deferred:
            return ResultBuilder().build()

        ranked = {i: sorted(rows[i], key=_cell_rank) for i in deferred}

        def row_priority(i: int) -> tuple:
            best = next((c for c in ranked[i] if not blocked[c.match_index]), None)
            if best is None:
                return (True, -NEG_INFINITY, i)
            return (best.status is not MatchingStatus.KEY_MATCH, -_score(best), i)

        for i in sorted(deferred, key=row_priority):
            claimed = next((c for c in ranked[i] if not blocked[c.match_index]), None)
            if claimed is None:
                result.diff[str(i)] = MatchingResult(
                    status=MatchingStatus.NOT_EXISTS,
                    expected=expected[i],
                )
                continue
            blocked[claimed.match_index] = True
            result.diff[str(i)] = claimed

        return result.build()

    def _score_pair(
        self,
        i: int,
        exp_item: Any,
        j: int,
        act_item: Any,
        ignored: ConfigNode,
        business_key: ConfigNode,
        path: str,
        depth: int
    ) -> MatchingResult:
        cell = self.comparator.compare(
            exp_item, act_item, ignored, business_key, build_path(path, i), depth + 1
        )
        return replace(cell, element_index=i, match_index=j)
