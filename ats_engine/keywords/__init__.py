from .density import (
    calculate_actual_keyword_density,
    calculate_keyword_density,
    calculate_match_rate,
    count_occurrences,
)
from .extractor import calculate_dynamic_keyword_count, extract_keywords
from .matcher import match_keywords, synonym_candidates
from .phrases import extract_phrases, is_keyword_candidate, tokenize_with_phrases
from .sections import classify_section, extract_job_title, parse_jd_sections
from .text import normalize_text, stem_word, tokenize, word_count

__all__ = [
    "calculate_actual_keyword_density",
    "calculate_dynamic_keyword_count",
    "calculate_keyword_density",
    "calculate_match_rate",
    "classify_section",
    "count_occurrences",
    "extract_job_title",
    "extract_keywords",
    "extract_phrases",
    "is_keyword_candidate",
    "match_keywords",
    "normalize_text",
    "parse_jd_sections",
    "stem_word",
    "synonym_candidates",
    "tokenize",
    "tokenize_with_phrases",
    "word_count",
]
