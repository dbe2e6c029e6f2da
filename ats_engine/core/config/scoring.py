from __future__ import annotations

import logging
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

from ats_engine.core.settings import settings

logger = logging.getLogger(__name__)

_SCORING_CONFIG_CACHE: dict[str, Any] | None = None
_PACKAGED_SCORING_CONFIG = "scoring.yaml"


def _read_configured_file(path: Path) -> str:
    if not path.exists():
        raise RuntimeError(
            f"Scoring config not found at '{path}'. "
            "Check ATS_SCORING_CONFIG_PATH."
        )
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Failed to read scoring config '{path}': {exc}") from exc


def _read_packaged_file() -> str | None:
    resource = resources.files(__package__).joinpath(_PACKAGED_SCORING_CONFIG)
    if not resource.is_file():
        return None
    return resource.read_text(encoding="utf-8")


def get_scoring_config() -> dict[str, Any]:
    """Load scoring policy and cache it.

    ATS_SCORING_CONFIG_PATH wins when set and must point at a valid mapping.
    Otherwise the scoring.yaml shipped with this package is used, and if that
    is absent every lookup falls back to its in-code default.
    """
    global _SCORING_CONFIG_CACHE

    if _SCORING_CONFIG_CACHE is not None:
        return _SCORING_CONFIG_CACHE

    if settings.scoring_config_path:
        source = settings.scoring_config_path
        raw = _read_configured_file(Path(source))
    else:
        source = f"{__package__}/{_PACKAGED_SCORING_CONFIG}"
        packaged = _read_packaged_file()
        if packaged is None:
            logger.warning("scoring_config_missing source=%s using_defaults=true", source)
            _SCORING_CONFIG_CACHE = {}
            return _SCORING_CONFIG_CACHE
        raw = packaged

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in scoring config '{source}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid scoring config '{source}': expected a top-level mapping.")

    _SCORING_CONFIG_CACHE = parsed
    return _SCORING_CONFIG_CACHE


def get_scoring_value(path: str, default: Any = None) -> Any:
    """Get nested config value using dot path notation, e.g. 'keyword_relevance.cap'."""
    if not path:
        return default

    current: Any = get_scoring_config()
    for key in path.split("."):
        if not isinstance(current, dict):
            return default
        if key not in current:
            return default
        current = current[key]
    return current


def get_scoring_float(path: str, default: float) -> float:
    value = get_scoring_value(path, default)
    try:
        return float(value)
    except (TypeError, ValueError):
        return float(default)
