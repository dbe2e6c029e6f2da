from __future__ import annotations

from typing import Iterable

from ats_engine.schemas import MatchDetail, MatchResult

from .text import contains_term, normalize_text, split_words, stem_word
from .vocabulary import SKILL_SYNONYMS, SYNONYM_REVERSE_INDEX

_MIN_STEM_KEYWORD_LENGTH = 4


class _ResumeIndex:
    """Normalized resume text plus its unique tokens and stems in reading order."""

    __slots__ = ("text", "token_stems")

    def __init__(self, resume_text: str) -> None:
        self.text = normalize_text(resume_text)
        token_stems: dict[str, str] = {}
        for token in split_words(self.text):
            if token not in token_stems:
                token_stems[token] = stem_word(token)
        self.token_stems = token_stems

    def find_stem(self, keyword_stem: str) -> str | None:
        for token, token_stem in self.token_stems.items():
            if keyword_stem in token_stem:
                return token
        return None


def synonym_candidates(keyword: str) -> list[str]:
    """Variants for a keyword: its own synonyms, then canonicals that list it and their variants."""
    candidates: list[str] = list(SKILL_SYNONYMS.get(keyword, ()))
    for canonical in SYNONYM_REVERSE_INDEX.get(keyword, ()):
        candidates.append(canonical)
        candidates.extend(variant for variant in SKILL_SYNONYMS.get(canonical, ()) if variant != keyword)

    seen: set[str] = set()
    ordered: list[str] = []
    for candidate in candidates:
        if candidate and candidate != keyword and candidate not in seen:
            seen.add(candidate)
            ordered.append(candidate)
    return ordered


def _match_one(label: str, keyword: str, index: _ResumeIndex) -> MatchDetail | None:
    if contains_term(index.text, keyword):
        return MatchDetail(keyword=label, match_type="exact")

    if " " not in keyword and len(keyword) >= _MIN_STEM_KEYWORD_LENGTH:
        fragment = index.find_stem(stem_word(keyword))
        if fragment is not None:
            return MatchDetail(keyword=label, match_type="stem", matched_as=fragment)

    for variant in synonym_candidates(keyword):
        if contains_term(index.text, variant):
            return MatchDetail(keyword=label, match_type="synonym", matched_as=variant)
    return None


def match_keywords(keywords: Iterable[str], resume_text: str) -> MatchResult:
    """Classify each keyword as exact, stem or synonym matched, or missing.

    Checks run strictly in that order per keyword and the first hit wins.
    Keywords are handled independently, so duplicates yield duplicate entries.
    """
    index = _ResumeIndex(resume_text or "")
    result = MatchResult()
    has_text = bool(index.text.strip())
    for raw in keywords or []:
        label = raw if isinstance(raw, str) else str(raw or "")
        keyword = normalize_text(label).strip()
        detail = _match_one(label, keyword, index) if keyword and has_text else None
        if detail is None:
            result.missing.append(label)
            continue
        result.matched.append(label)
        result.match_details.append(detail)
    return result
