from __future__ import annotations

import logging

from ats_engine.core.config.scoring import get_scoring_float
from ats_engine.core.rounding import clamp, round_half_up
from ats_engine.keywords import (
    calculate_actual_keyword_density,
    calculate_keyword_density,
    calculate_match_rate,
    extract_keywords,
    match_keywords,
    word_count,
)
from ats_engine.schemas import ATSScore, ATSScoreDetails, ResumeData, ScoreBreakdown, ScorePayload

from .experience import calculate_experience_alignment
from .keyword_relevance import calculate_keyword_relevance
from .match_quality import calculate_match_quality
from .skills_quality import calculate_skills_quality

logger = logging.getLogger(__name__)


def calculate_ats_score(
    job_description: str,
    resume_text: str,
    resume_data: ResumeData | None = None,
) -> ATSScore:
    """Score a resume against a job description on a 0-100 scale.

    Pure and deterministic: the same inputs always give the same score. Each
    category is rounded half-up to one decimal and the total is the rounded
    sum of the rounded categories.
    """
    if not job_description or not job_description.strip():
        return ATSScore()

    resume = resume_data if resume_data is not None else ResumeData()
    text = resume_text or ""
    extracted = extract_keywords(job_description)

    if not text.strip():
        logger.debug("ats_score_blank_resume keywords=%s", len(extracted.all))
        return ATSScore(
            details=ATSScoreDetails(
                missing_keywords=list(extracted.all),
                extracted_keywords=extracted,
            )
        )

    match_result = match_keywords(extracted.all, text)
    density = calculate_actual_keyword_density(text, match_result.matched)

    breakdown = ScoreBreakdown(
        keyword_relevance=round_half_up(calculate_keyword_relevance(extracted, match_result, text, resume, density)),
        skills_quality=round_half_up(calculate_skills_quality(extracted, match_result, resume)),
        experience_alignment=round_half_up(calculate_experience_alignment(job_description, extracted, resume)),
        match_quality=round_half_up(calculate_match_quality(match_result, density.overall_density, resume)),
    )
    total = clamp(
        round_half_up(
            breakdown.keyword_relevance
            + breakdown.skills_quality
            + breakdown.experience_alignment
            + breakdown.match_quality
        ),
        0.0,
        100.0,
    )

    details = ATSScoreDetails(
        matched_keywords=match_result.matched,
        missing_keywords=match_result.missing,
        keyword_density=calculate_keyword_density(len(match_result.matched), word_count(text)),
        match_rate=calculate_match_rate(len(match_result.matched), len(extracted.all)),
        extracted_keywords=extracted,
        match_details=match_result.match_details,
    )
    logger.debug(
        "ats_score_calculated total=%s keyword=%s skills=%s experience=%s quality=%s matched=%s missing=%s",
        total,
        breakdown.keyword_relevance,
        breakdown.skills_quality,
        breakdown.experience_alignment,
        breakdown.match_quality,
        len(match_result.matched),
        len(match_result.missing),
    )
    return ATSScore(total=total, breakdown=breakdown, details=details)


def format_score_assessment(score: float) -> str:
    if score >= get_scoring_float("assessment.excellent", 85):
        return "Excellent match - very likely to pass ATS filters"
    if score >= get_scoring_float("assessment.good", 70):
        return "Good match - should pass most ATS systems"
    if score >= get_scoring_float("assessment.fair", 55):
        return "Fair match - optimization recommended"
    return "Weak match - significant gaps identified"


def resume_data_to_text(
    resume_data: ResumeData | None,
    name: str | None = None,
    summary: str | None = None,
) -> str:
    """Flatten a structured resume into the plain text used for matching."""
    data = resume_data if resume_data is not None else ResumeData()
    parts: list[str] = []
    if name:
        parts.append(name)
    if data.title:
        parts.append(data.title)
    if summary:
        parts.append(summary)

    if data.skills_by_category:
        for category in data.skills_by_category:
            parts.append(f"{category.category}: {', '.join(category.items)}")
    elif data.skills:
        parts.append("Skills: " + ", ".join(data.skills))

    for entry in data.experiences:
        if entry.title:
            parts.append(entry.title)
        if entry.company:
            parts.append(entry.company)
        parts.extend(highlight for highlight in entry.highlights if highlight)

    for entry in data.education:
        if entry.degree:
            parts.append(entry.degree)
        if entry.institution:
            parts.append(entry.institution)
    return "\n".join(parts)


def build_score_payload(score: ATSScore) -> ScorePayload:
    return ScorePayload(
        total=score.total,
        breakdown=score.breakdown,
        matched_keywords=score.details.matched_keywords,
        missing_keywords=score.details.missing_keywords,
        match_rate=score.details.match_rate,
        keyword_density=score.details.keyword_density,
        assessment=format_score_assessment(score.total),
    )
