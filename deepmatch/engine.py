"""Main comparison engine for deepmatch."""

from __future__ import annotations

import logging
from typing import Any, Optional

from .models import EngineConfig, MatchingResult
from .config import validate_pair
from .differ import ValueComparator

logger = logging.getLogger(__name__)


class MatchEngine:
    """
    Entry point that validates configuration and runs a comparison.

    1. Validation: both configuration trees are checked for shape and for
       attributes claimed by both the ignore and business-key trees
    2. Comparison: a fresh ValueComparator walks both values
    """

    VERSION = "1.2.0"

    def __init__(self, config: Optional[EngineConfig] = None):
        """
        Initialize the engine.

        Args:
            config: Engine configuration (uses defaults if not provided)
        """
        self.config = config or EngineConfig()

    def compare(
        self,
        expected: Any,
        actual: Any,
        ignored: Any = None,
        business_key: Any = None
    ) -> MatchingResult:
        """
        Compare two values.

        Args:
            expected: The reference value
            actual: The value under test
            ignored: Nested mapping of attributes to ignore
            business_key: Nested mapping of attributes identifying objects

        Returns:
            Root of the MatchingResult tree

        Raises:
            ConfigurationError: malformed or conflicting configuration
            UnsupportedComparisonError: arrays of arrays under a business key
            DepthExceededError: nesting deeper than ``config.max_depth``
        """
        ignored_node, key_node = validate_pair(ignored, business_key)
        logger.debug(
            "Comparing with %d ignored and %d business-key root entries",
            len(ignored_node), len(key_node)
        )
        result = ValueComparator(self.config).compare(
            expected, actual, ignored_node, key_node
        )
        logger.debug("Comparison finished with status %s", result.status.value)
        return result


def compare(
    expected: Any,
    actual: Any,
    ignored: Any = None,
    business_key: Any = None,
    config: Optional[EngineConfig] = None
) -> MatchingResult:
    """
    Convenience function to compare two values.

    Args:
        expected: The reference value
        actual: The value under test
        ignored: Optional ignore tree
        business_key: Optional business-key tree
        config: Optional engine configuration

    Returns:
        Root of the MatchingResult tree
    """
    engine = MatchEngine(config)
    return engine.compare(expected, actual, ignored, business_key)
