from __future__ import annotations

from ats_engine.core.config.scoring import get_scoring_float, get_scoring_value
from ats_engine.core.rounding import clamp, safe_ratio
from ats_engine.keywords.text import contains_term, normalize_text
from ats_engine.schemas import ExtractedKeywords, MatchResult, ResumeData

_DEFAULT_PRIORITY_WEIGHTS = {
    "title": 1.5,
    "required": 1.5,
    "responsibilities": 1.25,
    "niceToHave": 1.0,
    "general": 1.0,
}


def _normalized_unique(values: list[str]) -> list[str]:
    seen: dict[str, None] = {}
    for value in values:
        normalized = normalize_text(value or "").strip()
        if normalized:
            seen.setdefault(normalized, None)
    return list(seen)


def resume_skill_items(resume_data: ResumeData) -> list[str]:
    """Flat skills plus categorized items, normalized, first occurrence order."""
    items = list(resume_data.skills)
    for category in resume_data.skills_by_category:
        items.extend(category.items)
    return _normalized_unique(items)


def resume_skill_set(resume_data: ResumeData) -> list[str]:
    values = resume_skill_items(resume_data)
    values.extend(category.category for category in resume_data.skills_by_category)
    return _normalized_unique(values)


def _in_skills(keyword: str, skills: list[str]) -> bool:
    term = normalize_text(keyword).strip()
    return any(skill == term or contains_term(skill, term) for skill in skills)


def _credit(keyword: str, matched: set[str]) -> float:
    if keyword in matched:
        return get_scoring_float("skills_quality.already_matched_credit", 0.8)
    return 1.0


def calculate_skills_quality(
    extracted: ExtractedKeywords,
    match_result: MatchResult,
    resume_data: ResumeData,
) -> float:
    cap = get_scoring_float("skills_quality.cap", 25.0)
    coverage_cap = get_scoring_float("skills_quality.required_coverage_cap", 12.0)
    alignment_cap = get_scoring_float("skills_quality.alignment_cap", 8.0)
    breadth_cap = get_scoring_float("skills_quality.breadth_cap", 5.0)
    top_n = int(get_scoring_value("skills_quality.alignment_top_n", 10))
    weights = get_scoring_value("skills_quality.priority_weights", _DEFAULT_PRIORITY_WEIGHTS) or {}

    skills = resume_skill_set(resume_data)
    if not skills:
        return 0.0

    matched = set(match_result.matched)
    counted: set[str] = set()

    technologies = extracted.technologies
    if technologies:
        credits = 0.0
        for technology in technologies:
            if _in_skills(technology, skills):
                credits += _credit(technology, matched)
                counted.add(normalize_text(technology).strip())
        coverage = safe_ratio(credits, len(technologies)) * coverage_cap
    else:
        coverage = get_scoring_float("skills_quality.no_technology_credit", coverage_cap / 2)

    top_keywords = extracted.all[:top_n]
    total_weight = 0.0
    aligned_weight = 0.0
    for keyword in top_keywords:
        priority = extracted.keyword_priority.get(keyword, "general")
        weight = float(weights.get(priority, _DEFAULT_PRIORITY_WEIGHTS.get(priority, 1.0)))
        total_weight += weight
        if _in_skills(keyword, skills):
            aligned_weight += weight * _credit(keyword, matched)
            counted.add(normalize_text(keyword).strip())
    alignment = safe_ratio(aligned_weight, total_weight) * alignment_cap

    per_skill = get_scoring_float("skills_quality.breadth_points_per_skill", 0.5)
    uncounted = [
        skill for skill in resume_skill_items(resume_data) if not any(contains_term(skill, term) for term in counted)
    ]
    breadth = min(breadth_cap, len(uncounted) * per_skill)

    return clamp(
        min(coverage, coverage_cap) + min(alignment, alignment_cap) + breadth,
        0.0,
        cap,
    )
