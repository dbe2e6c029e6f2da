from .aggregator import build_score_payload, calculate_ats_score, format_score_assessment, resume_data_to_text
from .experience import years_experience_score
from .utils import sanitize_breakdown, sanitize_score_value

__all__ = [
    "build_score_payload",
    "calculate_ats_score",
    "format_score_assessment",
    "resume_data_to_text",
    "sanitize_breakdown",
    "sanitize_score_value",
    "years_experience_score",
]
