"""Data models for the deepmatch engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

from .utils import build_path, is_array


# Count sentinel: the count carries no ranking meaning for this node.
NEG_INFINITY = -(2 ** 31)


class MatchingStatus(Enum):
    PASS = "PASS"
    FAIL = "FAIL"
    NOT_EXISTS = "NOT_EXISTS"
    NEW = "NEW"
    OBJECT_MISMATCH = "OBJECT_MISMATCH"
    KEY_MATCH = "KEY_MATCH"
    IGNORED = "IGNORED"


class MatchingAlgo(Enum):
    MAX_COUNT = "MAX_COUNT"
    BUSINESS_KEY = "BUSINESS_KEY"


@dataclass
class EngineConfig:
    """Global configuration for the comparison engine."""
    max_depth: int = 100


@dataclass(frozen=True)
class MatchingResult:
    """
    One node of the diff tree.

    Object nodes key their ``diff`` by attribute name, array nodes by the
    decimal index of the expected element. ``element_index`` and
    ``match_index`` are only set on candidates produced by array matching.
    """
    status: MatchingStatus
    expected: Any = None
    actual: Any = None
    count: Optional[int] = None
    element_index: Optional[int] = None
    match_index: Optional[int] = None
    diff: Optional[Mapping[str, MatchingResult]] = None
    algo: Optional[MatchingAlgo] = None

    @property
    def is_match(self) -> bool:
        return self.status is MatchingStatus.PASS

    @property
    def is_key_match(self) -> bool:
        return self.status is MatchingStatus.KEY_MATCH

    def get(self, key: str | int, default: Any = None) -> Optional[MatchingResult]:
        """Look up a child entry by attribute name or array index."""
        if not self.diff:
            return default
        return self.diff.get(str(key), default)

    def __getitem__(self, key: str | int) -> MatchingResult:
        if not self.diff:
            raise KeyError(key)
        return self.diff[str(key)]

    def walk(self, path: str = "$") -> Iterator[tuple[str, MatchingResult]]:
        """Yield ``(path, node)`` for this node and every nested entry, depth-first."""
        yield path, self
        if not self.diff:
            return
        indexed = is_array(self.expected)
        for key, child in self.diff.items():
            child_path = f"{path}[{key}]" if indexed else build_path(path, key)
            yield from child.walk(child_path)

    def to_dict(self) -> dict:
        result = {"status": self.status.value}
        if self.expected is not None:
            result["expected"] = self.expected
        if self.actual is not None:
            result["actual"] = self.actual
        if self.count is not None:
            result["count"] = self.count
        if self.element_index is not None:
            result["element_index"] = self.element_index
        if self.match_index is not None:
            result["match_index"] = self.match_index
        if self.diff:
            result["diff"] = {k: v.to_dict() for k, v in self.diff.items()}
        if self.algo is not None:
            result["algo"] = self.algo.value
        return result


@dataclass
class ResultBuilder:
    """Mutable accumulator for a single node, frozen with :meth:`build`."""
    status: MatchingStatus = MatchingStatus.PASS
    expected: Any = None
    actual: Any = None
    count: Optional[int] = None
    element_index: Optional[int] = None
    match_index: Optional[int] = None
    diff: dict[str, MatchingResult] = field(default_factory=dict)
    algo: Optional[MatchingAlgo] = None

    def mark(
        self,
        status: MatchingStatus,
        expected: Any = None,
        actual: Any = None
    ) -> ResultBuilder:
        """Set a non-passing status together with both compared values."""
        self.status = status
        self.expected = expected
        self.actual = actual
        return self

    @property
    def is_passing(self) -> bool:
        return self.status is MatchingStatus.PASS

    def build(self) -> MatchingResult:
        return MatchingResult(
            status=self.status,
            expected=self.expected,
            actual=self.actual,
            count=self.count,
            element_index=self.element_index,
            match_index=self.match_index,
            diff=MappingProxyType(dict(self.diff)) if self.diff else None,
            algo=self.algo,
        )
