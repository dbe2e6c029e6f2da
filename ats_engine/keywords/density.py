from __future__ import annotations

from typing import Iterable

from ats_engine.core.config.scoring import get_scoring_value
from ats_engine.core.rounding import round_half_up, safe_ratio
from ats_engine.schemas import KeywordDensity

from .text import boundary_pattern, normalize_text, split_words


def calculate_match_rate(matched: int, total: int) -> int:
    if total <= 0:
        return 0
    return int(round_half_up(safe_ratio(matched, total) * 100, 0))


def calculate_keyword_density(matched_count: int, total_words: int) -> float:
    """Unique matched keywords per hundred words, one decimal."""
    if total_words <= 0:
        return 0.0
    return round_half_up(safe_ratio(matched_count, total_words) * 100, 1)


def count_occurrences(normalized_text: str, keyword: str) -> int:
    term = normalize_text(keyword).strip()
    if not term:
        return 0
    return len(boundary_pattern(term).findall(normalized_text))


def calculate_actual_keyword_density(resume_text: str, matched_keywords: Iterable[str]) -> KeywordDensity:
    """Occurrence-based density with keyword-stuffing detection.

    Counts every whole-word occurrence of each distinct matched keyword, so a
    keyword repeated ten times weighs ten times. Keywords that occur at least
    the stuffing threshold are reported, sorted.
    """
    keywords = sorted({keyword for keyword in matched_keywords or [] if keyword})
    if not resume_text or not keywords:
        return KeywordDensity()

    normalized = normalize_text(resume_text)
    total_words = len(split_words(normalized))
    if total_words == 0:
        return KeywordDensity()

    threshold = int(get_scoring_value("keyword_relevance.stuffing.occurrence_threshold", 5))
    total_occurrences = 0
    stuffed: list[str] = []
    for keyword in keywords:
        count = count_occurrences(normalized, keyword)
        total_occurrences += count
        if count >= threshold:
            stuffed.append(keyword)

    return KeywordDensity(
        overall_density=round_half_up(safe_ratio(total_occurrences, total_words) * 100, 1),
        stuffed_keywords=stuffed,
        total_occurrences=total_occurrences,
    )
