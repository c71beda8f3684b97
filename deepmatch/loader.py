"""Loading of values, configuration trees and comparison scenarios from files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from .models import EngineConfig, MatchingResult
from .config import ConfigNode, validate
from .engine import MatchEngine
from .exceptions import LoaderError

logger = logging.getLogger(__name__)


def load_document(path: str | Path) -> Any:
    """
    Load a YAML or JSON file.

    JSON is valid YAML, so a single parser handles both.
    """
    path = Path(path)
    if not path.exists():
        raise LoaderError(str(path), "file not found")

    with open(path, 'r') as f:
        content = f.read()

    try:
        document = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise LoaderError(str(path), f"parse error: {e}")

    logger.debug("Loaded %s", path)
    return document


def load_config(path: str | Path) -> ConfigNode:
    """Load and validate an ignore or business-key tree."""
    return validate(load_document(path))


def load_scenario(path: str | Path) -> dict:
    """
    Load a scenario file.

    Expected layout::

        expected: {...}
        actual: {...}
        ignored: {...}        # optional
        business_key: {...}   # optional, also accepted as businessKey
    """
    scenario = load_document(path)
    if not isinstance(scenario, dict):
        raise LoaderError(str(path), "scenario must be a mapping")

    missing = [k for k in ("expected", "actual") if k not in scenario]
    if missing:
        raise LoaderError(str(path), f"missing keys: {', '.join(missing)}")

    return {
        "expected": scenario["expected"],
        "actual": scenario["actual"],
        "ignored": scenario.get("ignored"),
        "business_key": scenario.get("business_key", scenario.get("businessKey")),
    }


def compare_scenario(
    path: str | Path,
    config: Optional[EngineConfig] = None
) -> MatchingResult:
    """Load a scenario file and run the comparison it describes."""
    scenario = load_scenario(path)
    engine = MatchEngine(config)
    return engine.compare(
        scenario["expected"],
        scenario["actual"],
        scenario["ignored"],
        scenario["business_key"],
    )
