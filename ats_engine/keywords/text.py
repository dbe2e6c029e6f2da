from __future__ import annotations

import re
import unicodedata

# Compound technology spellings rewritten to fixed tokens before generic splitting.
_COMPOUND_TERMS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"c\+\+"), "cpp"),
    (re.compile(r"(?<![a-z0-9])c#"), "csharp"),
    (re.compile(r"(?<![a-z0-9])\.net(?![a-z0-9])"), "dotnet"),
    (re.compile(r"node\.js"), "nodejs"),
    (re.compile(r"react\.js"), "reactjs"),
    (re.compile(r"vue\.js"), "vuejs"),
    (re.compile(r"next\.js"), "nextjs"),
    (re.compile(r"ci\s*/\s*cd"), "cicd"),
)
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")
_SPLIT_RE = re.compile(r"[^a-z0-9-]+")

_SUFFIXES: tuple[str, ...] = (
    "ational", "tional", "ization", "ousness", "iveness", "fulness",
    "ation", "ness", "ment", "able", "ible", "ance", "ence", "ings",
    "ing", "ful", "ous", "ive", "ity", "ies", "ion", "ed", "er", "ly", "s",
)
_MIN_STEM_LENGTH = 3
_MIN_STEMMABLE_LENGTH = 4


def normalize_text(text: str) -> str:
    """Lower-case text and rewrite compound technology names; keeps line breaks."""
    if not text:
        return ""
    normalized = unicodedata.normalize("NFKC", text).lower()
    normalized = _CONTROL_RE.sub(" ", normalized)
    for pattern, replacement in _COMPOUND_TERMS:
        normalized = pattern.sub(replacement, normalized)
    return normalized


def split_words(normalized: str) -> list[str]:
    words: list[str] = []
    for raw in _SPLIT_RE.split(normalized):
        word = raw.strip("-")
        if len(word) > 1:
            words.append(word)
    return words


def tokenize(text: str) -> list[str]:
    return split_words(normalize_text(text))


def word_count(text: str) -> int:
    return len(tokenize(text))


def stem_word(word: str) -> str:
    """Heuristic suffix stripping; not a linguistic stemmer.

    The first suffix (longest rules first) that leaves at least three
    characters is removed. Words shorter than four characters come back
    unchanged, and the result is never stemmed a second time.
    """
    stem = (word or "").lower()
    if len(stem) < _MIN_STEMMABLE_LENGTH:
        return stem
    for suffix in _SUFFIXES:
        if stem.endswith(suffix) and len(stem) - len(suffix) >= _MIN_STEM_LENGTH:
            return stem[: -len(suffix)]
    return stem


def boundary_pattern(term: str) -> re.Pattern[str]:
    """Whole-term pattern; inner whitespace matches any run of whitespace."""
    parts = [re.escape(part) for part in term.split()]
    return re.compile(r"(?<![a-z0-9])" + r"\s+".join(parts) + r"(?![a-z0-9])")


def contains_term(haystack: str, term: str) -> bool:
    """Substring test that falls back to word boundaries for short single words."""
    if not term or not term.strip():
        return False
    if len(term) <= 3 and " " not in term:
        return boundary_pattern(term).search(haystack) is not None
    return term in haystack
