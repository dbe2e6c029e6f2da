from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
import logging

from ats_engine.core.config.scoring import get_scoring_value
from ats_engine.schemas import ExtractedKeywords, KeywordPriority

from .phrases import is_keyword_candidate, tokenize_with_phrases
from .sections import extract_job_title, parse_jd_sections
from .text import word_count
from .vocabulary import ACTION_VERBS, TECH_KEYWORDS

logger = logging.getLogger(__name__)

# Lower tier ranks first; general keywords split so vocabulary hits outrank filler.
_TIER_TITLE = 0
_TIER_REQUIRED = 1
_TIER_RESPONSIBILITIES = 2
_TIER_NICE_TO_HAVE = 3
_TIER_TECHNOLOGY = 4
_TIER_ACTION_VERB = 5
_TIER_GENERAL = 6

_TIER_PRIORITY: dict[int, KeywordPriority] = {
    _TIER_TITLE: "title",
    _TIER_REQUIRED: "required",
    _TIER_RESPONSIBILITIES: "responsibilities",
    _TIER_NICE_TO_HAVE: "niceToHave",
    _TIER_TECHNOLOGY: "general",
    _TIER_ACTION_VERB: "general",
    _TIER_GENERAL: "general",
}

_SECTION_TIERS: dict[str, int] = {
    "required": _TIER_REQUIRED,
    "responsibilities": _TIER_RESPONSIBILITIES,
    "niceToHave": _TIER_NICE_TO_HAVE,
}


@dataclass(slots=True)
class _Candidate:
    keyword: str
    tier: int
    first_seen: int
    zones: set[str] = field(default_factory=set)


def calculate_dynamic_keyword_count(job_description: str) -> int:
    """Keyword slots grow with description length and section count, capped."""
    base = int(get_scoring_value("extraction.dynamic_count.base", 15))
    words_per_slot = max(1, int(get_scoring_value("extraction.dynamic_count.words_per_slot", 50)))
    max_section_bonus = int(get_scoring_value("extraction.dynamic_count.max_section_bonus", 5))
    lower = int(get_scoring_value("extraction.dynamic_count.min", 20))
    upper = int(get_scoring_value("extraction.dynamic_count.max", 40))

    words = word_count(job_description)
    sections = len(parse_jd_sections(job_description))
    count = base + words // words_per_slot + min(sections, max_section_bonus)
    return max(lower, min(upper, count))


def extract_keywords(job_description: str, max_count: int | None = None) -> ExtractedKeywords:
    """Extract ranked, deduplicated keywords from a job description.

    Candidates are ordered by zone tier (title, required, responsibilities,
    nice-to-have, then general technologies, action verbs and other words),
    then by descending frequency in the description, then by first
    appearance. ``max_count`` defaults to the dynamic count.
    """
    if not job_description or not job_description.strip():
        return ExtractedKeywords()

    limit = calculate_dynamic_keyword_count(job_description) if max_count is None else max(0, int(max_count))

    all_tokens = tokenize_with_phrases(job_description)
    frequency: Counter[str] = Counter(token for token in all_tokens if is_keyword_candidate(token))

    candidates: dict[str, _Candidate] = {}
    order = 0

    def _offer(token: str, tier: int, zone: str | None = None) -> None:
        nonlocal order
        if not is_keyword_candidate(token):
            return
        candidate = candidates.get(token)
        if candidate is None:
            candidate = _Candidate(keyword=token, tier=tier, first_seen=order)
            candidates[token] = candidate
            order += 1
        elif tier < candidate.tier:
            candidate.tier = tier
        if zone:
            candidate.zones.add(zone)

    title = extract_job_title(job_description)
    if title:
        for token in tokenize_with_phrases(title):
            _offer(token, _TIER_TITLE, "title")

    sections = parse_jd_sections(job_description)
    for section_type in ("required", "responsibilities", "niceToHave"):
        zone = "niceToHave" if section_type == "niceToHave" else "required"
        for section in sections:
            if section.type != section_type:
                continue
            for token in tokenize_with_phrases(section.content):
                _offer(token, _SECTION_TIERS[section_type], zone)

    for token in all_tokens:
        if token in TECH_KEYWORDS:
            _offer(token, _TIER_TECHNOLOGY)
        elif token in ACTION_VERBS:
            _offer(token, _TIER_ACTION_VERB)
        else:
            _offer(token, _TIER_GENERAL)

    ranked = sorted(
        candidates.values(),
        key=lambda item: (item.tier, -frequency.get(item.keyword, 1), item.first_seen),
    )[:limit]

    keywords = [item.keyword for item in ranked]
    by_keyword = {item.keyword: item for item in ranked}
    result = ExtractedKeywords(
        all=keywords,
        from_title=[kw for kw in keywords if "title" in by_keyword[kw].zones],
        from_required=[kw for kw in keywords if "required" in by_keyword[kw].zones],
        from_nice_to_have=[kw for kw in keywords if "niceToHave" in by_keyword[kw].zones],
        technologies=[kw for kw in keywords if kw in TECH_KEYWORDS],
        action_verbs=[kw for kw in keywords if kw in ACTION_VERBS],
        keyword_priority={kw: _TIER_PRIORITY[by_keyword[kw].tier] for kw in keywords},
        keyword_frequency={kw: max(1, frequency.get(kw, 1)) for kw in keywords},
    )
    logger.debug(
        "keywords_extracted count=%s limit=%s title=%s required=%s nice=%s",
        len(keywords),
        limit,
        len(result.from_title),
        len(result.from_required),
        len(result.from_nice_to_have),
    )
    return result
