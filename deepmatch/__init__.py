"""
deepmatch - Deep equality with exceptions

Compares two semi-structured values and produces a navigable diff tree.
Attributes can be ignored, and array elements are matched regardless of
order, optionally by a declared business key.
"""

from .engine import MatchEngine, compare
from .models import (
    EngineConfig,
    MatchingResult,
    MatchingStatus,
    MatchingAlgo,
    NEG_INFINITY,
)
from .config import (
    ConfigNode,
    validate,
    validate_pair,
)
from .exceptions import (
    DeepMatchError,
    ConfigurationError,
    UnsupportedComparisonError,
    DepthExceededError,
    LoaderError,
)
from .loader import (
    load_document,
    load_config,
    load_scenario,
    compare_scenario,
)

__version__ = "1.2.0"
__all__ = [
    # Engine
    "MatchEngine",
    "compare",
    "EngineConfig",
    # Results
    "MatchingResult",
    "MatchingStatus",
    "MatchingAlgo",
    "NEG_INFINITY",
    # Configuration
    "ConfigNode",
    "validate",
    "validate_pair",
    # Errors
    "DeepMatchError",
    "ConfigurationError",
    "UnsupportedComparisonError",
    "DepthExceededError",
    "LoaderError",
    # Loading
    "load_document",
    "load_config",
    "load_scenario",
    "compare_scenario",
]
