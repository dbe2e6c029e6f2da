from __future__ import annotations

import math
from typing import Any

from ats_engine.schemas import ScoreBreakdown

_CATEGORY_CAPS: dict[str, float] = {
    "keyword_relevance": 45.0,
    "skills_quality": 25.0,
    "experience_alignment": 20.0,
    "match_quality": 10.0,
}


def sanitize_score_value(value: Any, minimum: float, maximum: float) -> float:
    """Coerce to a finite float within [minimum, maximum]; anything unusable becomes minimum."""
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return float(minimum)
    if not math.isfinite(numeric):
        return float(minimum)
    return float(max(minimum, min(maximum, numeric)))


def sanitize_breakdown(breakdown: ScoreBreakdown | dict[str, Any]) -> ScoreBreakdown:
    raw = breakdown.model_dump() if isinstance(breakdown, ScoreBreakdown) else dict(breakdown or {})
    return ScoreBreakdown(
        **{name: sanitize_score_value(raw.get(name), 0.0, cap) for name, cap in _CATEGORY_CAPS.items()}
    )
