from ats_engine.keywords import (
    calculate_actual_keyword_density,
    calculate_keyword_density,
    calculate_match_rate,
    extract_keywords,
    match_keywords,
    word_count,
)
from ats_engine.scoring import (
    build_score_payload,
    calculate_ats_score,
    format_score_assessment,
    resume_data_to_text,
    sanitize_breakdown,
    sanitize_score_value,
)

__all__ = [
    "build_score_payload",
    "calculate_actual_keyword_density",
    "calculate_ats_score",
    "calculate_keyword_density",
    "calculate_match_rate",
    "extract_keywords",
    "format_score_assessment",
    "match_keywords",
    "resume_data_to_text",
    "sanitize_breakdown",
    "sanitize_score_value",
    "word_count",
]
