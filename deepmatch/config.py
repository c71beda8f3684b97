"""Ignore and business-key configuration trees and their validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Union

from jsonpath_ng import parse as jsonpath_parse
from jsonpath_ng.exceptions import JsonPathLexerError, JsonPathParserError
from jsonpath_ng.jsonpath import Child, Fields, Index, Root, Slice, This

from .exceptions import ConfigurationError
from .utils import build_path, get_type_name


@dataclass(frozen=True)
class ConfigNode:
    """
    One level of an ignore or business-key tree.

    Each entry maps an attribute name either to ``True`` (applies here and
    below) or to a nested ``ConfigNode`` (descend further).
    """
    entries: Mapping[str, Union[bool, "ConfigNode"]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def has(self, name: str) -> bool:
        return name in self.entries

    def is_leaf(self, name: str) -> bool:
        """True when the attribute is marked with the boolean leaf itself."""
        return self.entries.get(name) is True

    def child(self, name: str) -> ConfigNode:
        """The subtree for an attribute; empty when absent or a leaf."""
        value = self.entries.get(name)
        return value if isinstance(value, ConfigNode) else EMPTY

    def keys(self):
        return self.entries.keys()

    def __bool__(self) -> bool:
        return bool(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def to_dict(self) -> dict:
        return {
            name: value if value is True else value.to_dict()
            for name, value in self.entries.items()
        }

    @classmethod
    def from_paths(cls, paths: Iterable[str]) -> ConfigNode:
        """
        Build a tree from JSONPath expressions such as ``$.add.landmark``
        or ``items[*].sku``. Array selectors do not narrow the tree.
        """
        tree: dict = {}
        for path in paths:
            segments = _path_segments(path)
            if not segments:
                raise ConfigurationError("Path does not name an attribute", path)
            node = tree
            for segment in segments[:-1]:
                existing = node.get(segment)
                if existing is True:
                    break
                node = node.setdefault(segment, {})
            else:
                node[segments[-1]] = True
        return validate(tree)


EMPTY = ConfigNode()


def _path_segments(path: str) -> list[str]:
    try:
        expr = jsonpath_parse(path)
    except (JsonPathLexerError, JsonPathParserError) as e:
        raise ConfigurationError(f"Invalid JSONPath expression: {e}", path)
    return _flatten(expr, path)


def _flatten(expr: Any, path: str) -> list[str]:
    if isinstance(expr, Child):
        return _flatten(expr.left, path) + _flatten(expr.right, path)
    if isinstance(expr, Fields):
        if len(expr.fields) != 1 or expr.fields[0] == '*':
            raise ConfigurationError("Only single named fields are supported", path)
        return [expr.fields[0]]
    if isinstance(expr, (Root, This, Index, Slice)):
        return []
    raise ConfigurationError(
        f"Unsupported JSONPath construct: {type(expr).__name__}", path
    )


def validate(raw: Any, path: str = "$") -> ConfigNode:
    """
    Validate a raw configuration tree and convert it into a ConfigNode.

    Args:
        raw: None, a ConfigNode, or a nested mapping of name -> True | mapping
        path: JSONPath of ``raw``, used in error messages

    Returns:
        The validated tree (empty for None)
    """
    if raw is None:
        return EMPTY
    if isinstance(raw, ConfigNode):
        return raw
    if not isinstance(raw, Mapping):
        raise ConfigurationError(
            f"Configuration must be a mapping, got {get_type_name(raw)}", path
        )

    entries = {}
    for name, value in raw.items():
        if not isinstance(name, str):
            raise ConfigurationError(
                f"Attribute names must be strings, got {get_type_name(name)}", path
            )
        child_path = build_path(path, name)
        if value is True:
            entries[name] = True
        elif isinstance(value, (Mapping, ConfigNode)):
            entries[name] = validate(value, child_path)
        else:
            raise ConfigurationError(
                f"Expected true or a nested mapping, got {value!r}", child_path
            )
    return ConfigNode(MappingProxyType(entries))


def _is_leaf_marker(value: Union[bool, ConfigNode]) -> bool:
    return value is True or not value


def check_conflicts(ignored: ConfigNode, business_key: ConfigNode, path: str = "$"):
    """Fail when both trees mark the same attribute as a leaf at the same position."""
    for name in ignored.keys() & business_key.keys():
        child_path = build_path(path, name)
        ignored_value = ignored.entries[name]
        key_value = business_key.entries[name]
        if _is_leaf_marker(ignored_value) and _is_leaf_marker(key_value):
            raise ConfigurationError(
                "Attribute is both ignored and part of the business key", child_path
            )
        if isinstance(ignored_value, ConfigNode) and isinstance(key_value, ConfigNode):
            check_conflicts(ignored_value, key_value, child_path)


def validate_pair(
    ignored: Optional[Any] = None,
    business_key: Optional[Any] = None
) -> tuple[ConfigNode, ConfigNode]:
    """Validate both trees and check that they never claim the same leaf."""
    ignored_node = validate(ignored)
    key_node = validate(business_key)
    check_conflicts(ignored_node, key_node)
    return ignored_node, key_node
