from __future__ import annotations

from functools import lru_cache
import re

from .text import boundary_pattern, normalize_text, split_words
from .vocabulary import SHORT_TECH_TOKENS, SORTED_PHRASES, STOPWORDS

_HAS_LETTER_RE = re.compile(r"[a-z]")


@lru_cache(maxsize=None)
def _phrase_pattern(phrase: str) -> re.Pattern[str]:
    return boundary_pattern(phrase)


def extract_phrases(text: str) -> tuple[list[str], str]:
    """Pull known multi-word phrases out of text, longest first.

    Returns every occurrence found (in phrase order) and the normalized text
    with those occurrences blanked out so they are not split again.
    """
    remaining = normalize_text(text)
    phrases: list[str] = []
    if not remaining.strip():
        return phrases, remaining

    for phrase in SORTED_PHRASES:
        if phrase.split()[0] not in remaining:
            continue
        pattern = _phrase_pattern(phrase)
        hits = len(pattern.findall(remaining))
        if not hits:
            continue
        phrases.extend([phrase] * hits)
        remaining = pattern.sub(lambda match: " " * len(match.group(0)), remaining)
    return phrases, remaining


def tokenize_with_phrases(text: str) -> list[str]:
    phrases, remainder = extract_phrases(text)
    return phrases + split_words(remainder)


def is_keyword_candidate(token: str) -> bool:
    if not token or token in STOPWORDS:
        return False
    if not _HAS_LETTER_RE.search(token):
        return False
    if " " in token:
        return True
    return len(token) > 2 or token in SHORT_TECH_TOKENS
