from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

DEFAULT_SCORING_PATH = Path(__file__).resolve().with_name("scoring.yaml")


@lru_cache(maxsize=4)
def load_scoring_config(path: Path = DEFAULT_SCORING_PATH) -> dict[str, Any]:
    """Read heuristic thresholds and limits from a YAML mapping."""
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Failed to read scoring config '{path}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in scoring config '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid scoring config '{path}': expected a top-level mapping.")
    return parsed


def get_scoring_config() -> dict[str, Any]:
    return load_scoring_config()


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Dot-path lookup into the scoring config, e.g. 'ats_heuristic.base'."""
    if not path:
        return default

    current: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(current, dict) or key not in current:
            return default
        current = current[key]
    return current
