from __future__ import annotations

from ats_engine.core.config.scoring import get_scoring_float
from ats_engine.core.rounding import clamp, safe_ratio
from ats_engine.schemas import MatchResult, ResumeData


def exact_match_score(match_result: MatchResult) -> float:
    cap = get_scoring_float("match_quality.exact_ratio_cap", 4.0)
    details = match_result.match_details
    exact = sum(1 for detail in details if detail.match_type == "exact")
    return safe_ratio(exact, len(details)) * cap


def density_score(density: float) -> float:
    """Full credit inside the optimal band, linear taper to zero at the extremes."""
    cap = get_scoring_float("match_quality.density_cap", 3.0)
    low_extreme = get_scoring_float("match_quality.density_band.low_extreme", 0.5)
    optimal_low = get_scoring_float("match_quality.density_band.optimal_low", 2.0)
    optimal_high = get_scoring_float("match_quality.density_band.optimal_high", 3.0)
    high_extreme = get_scoring_float("match_quality.density_band.high_extreme", 6.0)

    if density <= low_extreme or density >= high_extreme:
        return 0.0
    if optimal_low <= density <= optimal_high:
        return cap
    if density < optimal_low:
        return cap * safe_ratio(density - low_extreme, optimal_low - low_extreme)
    return cap * safe_ratio(high_extreme - density, high_extreme - optimal_high)


def completeness_score(resume_data: ResumeData) -> float:
    cap = get_scoring_float("match_quality.completeness_cap", 3.0)
    points = get_scoring_float("match_quality.completeness_points", 0.75)
    has_skills = bool(resume_data.skills) or any(category.items for category in resume_data.skills_by_category)
    present = [
        bool(resume_data.title and resume_data.title.strip()),
        has_skills,
        any(entry.highlights for entry in resume_data.experiences),
        any(entry.degree or entry.institution for entry in resume_data.education),
    ]
    return min(cap, points * sum(present))


def calculate_match_quality(match_result: MatchResult, density: float, resume_data: ResumeData) -> float:
    cap = get_scoring_float("match_quality.cap", 10.0)
    return clamp(
        exact_match_score(match_result) + density_score(density) + completeness_score(resume_data),
        0.0,
        cap,
    )
