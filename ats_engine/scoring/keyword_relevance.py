from __future__ import annotations

from ats_engine.core.config.scoring import get_scoring_float, get_scoring_value
from ats_engine.core.rounding import clamp
from ats_engine.keywords.text import contains_term, normalize_text
from ats_engine.schemas import ExtractedKeywords, KeywordDensity, MatchResult, ResumeData

_DEFAULT_BASE_POINTS: dict[str, dict[str, float]] = {
    "title": {"exact": 3.0, "stem": 2.25, "synonym": 1.5},
    "required": {"exact": 2.5, "stem": 1.9, "synonym": 1.25},
    "responsibilities": {"exact": 2.0, "stem": 1.5, "synonym": 1.0},
    "niceToHave": {"exact": 1.5, "stem": 1.1, "synonym": 0.75},
    "general": {"exact": 1.0, "stem": 0.75, "synonym": 0.5},
}


def _base_points(priority: str, match_type: str) -> float:
    default = _DEFAULT_BASE_POINTS.get(priority, _DEFAULT_BASE_POINTS["general"]).get(match_type, 0.0)
    return get_scoring_float(f"keyword_relevance.base_points.{priority}.{match_type}", default)


def frequency_multiplier(frequency: int) -> float:
    step = get_scoring_float("keyword_relevance.frequency.step", 0.15)
    cap = get_scoring_float("keyword_relevance.frequency.cap", 0.5)
    return 1.0 + min(cap, max(0, frequency - 1) * step)


def summary_zone(resume_text: str) -> str:
    lines = int(get_scoring_value("keyword_relevance.placement.summary_lines", 3))
    non_empty = [line for line in (resume_text or "").splitlines() if line.strip()]
    return normalize_text("\n".join(non_empty[:lines]))


def placement_bonus(keyword: str, resume_title: str, summary: str, first_bullets: list[str]) -> float:
    """Single highest placement bonus: title, then summary zone, then a first bullet."""
    if resume_title and contains_term(resume_title, keyword):
        return get_scoring_float("keyword_relevance.placement.title_bonus", 1.0)
    if summary and contains_term(summary, keyword):
        return get_scoring_float("keyword_relevance.placement.summary_bonus", 0.5)
    if any(contains_term(bullet, keyword) for bullet in first_bullets):
        return get_scoring_float("keyword_relevance.placement.first_bullet_bonus", 0.3)
    return 0.0


def stuffing_penalty(density: KeywordDensity) -> float:
    min_stuffed = int(get_scoring_value("keyword_relevance.stuffing.min_stuffed_keywords", 3))
    if len(density.stuffed_keywords) >= min_stuffed:
        return get_scoring_float("keyword_relevance.stuffing.penalty", 5.0)
    return 0.0


def calculate_keyword_relevance(
    extracted: ExtractedKeywords,
    match_result: MatchResult,
    resume_text: str,
    resume_data: ResumeData,
    density: KeywordDensity,
) -> float:
    cap = get_scoring_float("keyword_relevance.cap", 45.0)
    resume_title = normalize_text(resume_data.title or "")
    summary = summary_zone(resume_text)
    first_bullets = [
        normalize_text(entry.highlights[0]) for entry in resume_data.experiences if entry.highlights
    ]

    score = 0.0
    for detail in match_result.match_details:
        keyword = normalize_text(detail.keyword).strip()
        priority = extracted.keyword_priority.get(detail.keyword, "general")
        frequency = extracted.keyword_frequency.get(detail.keyword, 1)
        score += _base_points(priority, detail.match_type) * frequency_multiplier(frequency)
        score += placement_bonus(keyword, resume_title, summary, first_bullets)

    score = clamp(score, 0.0, cap)
    score -= stuffing_penalty(density)
    return max(0.0, score)
