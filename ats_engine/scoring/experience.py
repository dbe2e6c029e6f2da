"""Experience alignment: role type, years, team or depth, title, education.

Sub-scores are capped independently and summed. When the job title yields
keywords and none of them overlap the resume title, the whole sub-total is
scaled down by the domain gate factor before the category cap.
"""

from __future__ import annotations

import math
import re

from ats_engine.core.config.scoring import get_scoring_float, get_scoring_value
from ats_engine.core.rounding import clamp, safe_ratio
from ats_engine.keywords.text import contains_term, normalize_text, split_words, stem_word
from ats_engine.keywords.vocabulary import ROLE_WORD_RE
from ats_engine.schemas import ExtractedKeywords, ResumeData, RoleType

from .skills_quality import resume_skill_items

_MANAGEMENT_SIGNALS_RE = re.compile(
    r"\b(manage[sd]?|managing|management|manager|direct reports?|people leader|"
    r"leadership|hiring|hire|headcount|performance reviews?|one-on-ones?|1:1s?|"
    r"mentor(?:ing|ship)?|coach(?:ing)?|grow the team|build (?:and|&) lead|team lead|"
    r"lead(?:s|ing)? (?:a |the )?team|"
    r"head of|director|vp|roadmap|stakeholders?|budget)\b",
    re.IGNORECASE,
)
_IC_SIGNALS_RE = re.compile(
    r"\b(hands-on|individual contributor|implement(?:s|ed|ing)?|develop(?:s|ed|ing)?|"
    r"build(?:s|ing)?|cod(?:e|es|ing)|programming|debug(?:ging)?|write|writing|"
    r"ship(?:ping)?|deploy(?:ing)?|optimi[sz]e|test(?:s|ing)?)\b",
    re.IGNORECASE,
)

_JD_YEARS_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(\d+)\+?\s*(?:years?|yrs?)\s*(?:of\s+)?(?:[a-z-]+\s+){0,3}?(?:experience|exp)\b", re.IGNORECASE),
    re.compile(r"(\d+)\s*(?:-|to)\s*\d+\s*(?:years?|yrs?)", re.IGNORECASE),
    re.compile(r"(?:minimum|at least)\s+(?:of\s+)?(\d+)\s*(?:years?|yrs?)", re.IGNORECASE),
    re.compile(r"(\d+)\+\s*(?:years?|yrs?)", re.IGNORECASE),
)
_JD_TEAM_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(?:team\s+of|manage|lead)\s+(\d+)", re.IGNORECASE),
    re.compile(r"(\d+)\+?\s*(?:engineers?|developers?|reports?)", re.IGNORECASE),
    re.compile(r"(\d+)\s*-\s*(\d+)\s*(?:engineers?|developers?)", re.IGNORECASE),
)
_RESUME_TEAM_FIELD_RE = re.compile(r"(\d+)")
_RESUME_TEAM_HIGHLIGHT_RE = re.compile(
    r"(?:team\s+of|scaling\s+to|led|managed)\s+(\d+)\s*(?:engineers?|people|members|reports)",
    re.IGNORECASE,
)

# Ordered lowest to highest; index is the level.
_DEGREE_LEVELS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("associate", re.compile(r"\bassociate'?s?\s+(?:degree|of)\b|\ba\.a\.s?\b|\baas\b", re.IGNORECASE)),
    (
        "bachelor",
        re.compile(r"\bbachelor'?s?\b|\bb\.?s\.?c?\b|\bb\.a\.|\bba\b|\bb\.?eng\b|\bundergraduate degree\b", re.IGNORECASE),
    ),
    (
        "master",
        re.compile(r"\bmaster'?s?\b|\bm\.s\.|\bm\.?sc\b|\bms\s+(?:in|degree)\b|\bm\.a\.|\bmba\b|\bm\.?eng\b", re.IGNORECASE),
    ),
    ("phd", re.compile(r"\bph\.?\s?d\b|\bdoctorate\b|\bdoctoral\b", re.IGNORECASE)),
)
_DEGREE_WORD_RE = re.compile(r"\b(?:degree|diploma|graduate|education)\b", re.IGNORECASE)
_FIELD_TERMS: tuple[str, ...] = (
    "computer science",
    "computer engineering",
    "software engineering",
    "electrical engineering",
    "information technology",
    "information systems",
    "data science",
    "mathematics",
    "statistics",
    "physics",
    "engineering",
    "math",
)


def detect_role_type(job_description: str) -> RoleType:
    text = job_description or ""
    management = len(_MANAGEMENT_SIGNALS_RE.findall(text))
    individual = len(_IC_SIGNALS_RE.findall(text))
    margin = int(get_scoring_value("experience.role_margin", 2))
    if management >= individual + margin:
        return "management"
    return "ic"


def extract_required_years(job_description: str) -> int | None:
    for pattern in _JD_YEARS_PATTERNS:
        match = pattern.search(job_description or "")
        if match:
            return int(match.group(1))
    return None


def extract_jd_team_size(job_description: str) -> int | None:
    for pattern in _JD_TEAM_PATTERNS:
        match = pattern.search(job_description or "")
        if match:
            return int(match.group(1))
    return None


def extract_resume_team_size(resume_data: ResumeData) -> int | None:
    if resume_data.team_size:
        match = _RESUME_TEAM_FIELD_RE.search(resume_data.team_size)
        if match:
            return int(match.group(1))
    for entry in resume_data.experiences:
        for highlight in entry.highlights:
            match = _RESUME_TEAM_HIGHLIGHT_RE.search(highlight or "")
            if match:
                return int(match.group(1))
    return None


def years_experience_score(required_years: float | None, resume_years: float | None, role_type: RoleType) -> float:
    """Years sub-score: full when met, smooth exponential decay when short."""
    if role_type == "management":
        cap = get_scoring_float("experience.years.management_cap", 6.0)
    else:
        cap = get_scoring_float("experience.years.ic_cap", 9.0)

    if resume_years is None or not math.isfinite(resume_years) or resume_years < 0:
        return 0.0

    if required_years is None:
        if resume_years >= get_scoring_float("experience.years.senior_years", 5):
            return cap * get_scoring_float("experience.years.unstated_senior_credit", 0.6)
        if resume_years > 0:
            return cap * get_scoring_float("experience.years.unstated_junior_credit", 0.3)
        return 0.0

    if resume_years >= required_years:
        threshold = required_years * get_scoring_float("experience.years.overqualified_ratio", 1.8)
        if threshold <= 0 or resume_years <= threshold:
            return cap
        excess_ratio = (resume_years - threshold) / threshold
        slope = get_scoring_float("experience.years.overqualified_slope", 0.2)
        max_penalty = get_scoring_float("experience.years.max_overqualified_penalty", 0.15)
        return cap - cap * min(max_penalty, excess_ratio * slope)

    deficit = required_years - resume_years
    scale = max(
        required_years * get_scoring_float("experience.years.decay_fraction", 0.3),
        get_scoring_float("experience.years.min_decay_scale", 0.5),
    )
    return cap * math.exp(-deficit / scale)


def team_score(job_description: str, resume_data: ResumeData) -> float:
    cap = get_scoring_float("experience.team.management_cap", 6.0)
    jd_team = extract_jd_team_size(job_description)
    resume_team = extract_resume_team_size(resume_data)
    if resume_team is None or resume_team <= 0:
        return 0.0
    if jd_team is None or jd_team <= 0:
        return get_scoring_float("experience.team.resume_only_points", 3.0)

    ratio = resume_team / jd_team
    if ratio >= get_scoring_float("experience.team.full_ratio", 1.0):
        return cap
    if ratio >= get_scoring_float("experience.team.strong_ratio", 0.7):
        return get_scoring_float("experience.team.strong_points", 4.0)
    if ratio >= get_scoring_float("experience.team.partial_ratio", 0.5):
        return get_scoring_float("experience.team.partial_points", 2.0)
    return 0.0


def depth_score(resume_data: ResumeData) -> float:
    cap = get_scoring_float("experience.depth.ic_cap", 3.0)
    entry_points = get_scoring_float("experience.depth.entry_points", 1.5)
    skills_points = get_scoring_float("experience.depth.skills_points", 1.5)
    min_skills = int(get_scoring_value("experience.depth.min_skills", 5))

    score = 0.0
    entries = len(resume_data.experiences)
    if entries > 1:
        score += entry_points
    elif entries == 1:
        score += entry_points / 2

    skills = len(resume_skill_items(resume_data))
    if skills >= min_skills:
        score += skills_points
    elif skills > 0:
        score += skills_points / 2
    return min(cap, score)


def _title_keyword_hit(keyword: str, resume_title: str, title_stems: list[str]) -> bool:
    term = normalize_text(keyword).strip()
    if not term:
        return False
    if contains_term(resume_title, term):
        return True
    keyword_stem = stem_word(term) if " " not in term else term
    return any(keyword_stem in token_stem for token_stem in title_stems)


def title_matches(title_keywords: list[str], resume_title: str | None) -> int:
    title = normalize_text(resume_title or "")
    if not title.strip():
        return 0
    title_stems = [stem_word(token) for token in split_words(title)]
    return sum(1 for keyword in title_keywords if _title_keyword_hit(keyword, title, title_stems))


def title_score(title_keywords: list[str], resume_title: str | None) -> float:
    cap = get_scoring_float("experience.title.cap", 5.0)
    if title_keywords:
        return safe_ratio(title_matches(title_keywords, resume_title), len(title_keywords)) * cap
    if resume_title and ROLE_WORD_RE.search(resume_title):
        return cap / 2
    return 0.0


def degree_level(text: str) -> int | None:
    """Highest degree level named in the text, as an index into the level order."""
    found: int | None = None
    for level, (_, pattern) in enumerate(_DEGREE_LEVELS):
        if pattern.search(text or ""):
            found = level
    return found


def required_degree_level(job_description: str) -> int | None:
    for level, (_, pattern) in enumerate(_DEGREE_LEVELS):
        if pattern.search(job_description or ""):
            return level
    return None


def _degree_requirement_text(job_description: str) -> str:
    """Lines of the job description that talk about a degree, lowercased."""
    lines = [
        line
        for line in (job_description or "").splitlines()
        if _DEGREE_WORD_RE.search(line) or any(pattern.search(line) for _, pattern in _DEGREE_LEVELS)
    ]
    return "\n".join(lines).lower()


def education_score(job_description: str, resume_data: ResumeData) -> float:
    cap = get_scoring_float("experience.education.cap", 3.0)
    degrees = [entry.degree for entry in resume_data.education if entry.degree and entry.degree.strip()]
    if not degrees:
        return 0.0

    resume_level: int | None = None
    for degree in degrees:
        level = degree_level(degree)
        if level is not None and (resume_level is None or level > resume_level):
            resume_level = level

    required = required_degree_level(job_description)
    score = 0.0
    if required is None:
        score = get_scoring_float("experience.education.unstated_degree_credit", 2.0)
    elif resume_level is not None and resume_level >= required:
        score = get_scoring_float("experience.education.level_met", 2.5)
    elif resume_level is not None and resume_level == required - 1:
        score = get_scoring_float("experience.education.level_one_short", 1.25)

    degree_text = " ".join(degrees).lower()
    requirement_text = _degree_requirement_text(job_description)
    required_fields = [term for term in _FIELD_TERMS if term in requirement_text]
    if any(term in degree_text for term in required_fields):
        score += get_scoring_float("experience.education.field_bonus", 0.5)
    return min(cap, score)


def calculate_experience_alignment(
    job_description: str,
    extracted: ExtractedKeywords,
    resume_data: ResumeData,
) -> float:
    cap = get_scoring_float("experience.cap", 20.0)
    role_type = detect_role_type(job_description)

    score = years_experience_score(extract_required_years(job_description), resume_data.years_experience, role_type)
    if role_type == "management":
        score += team_score(job_description, resume_data)
    else:
        score += depth_score(resume_data)
    score += title_score(extracted.from_title, resume_data.title)
    score += education_score(job_description, resume_data)

    if extracted.from_title and title_matches(extracted.from_title, resume_data.title) == 0:
        score *= get_scoring_float("experience.domain_gate_factor", 0.6)
    return clamp(score, 0.0, cap)
