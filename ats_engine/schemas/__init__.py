from .ats import (
    ATSScore,
    ATSScoreDetails,
    EducationEntry,
    ExperienceEntry,
    ExtractedKeywords,
    JDSection,
    KeywordDensity,
    KeywordPriority,
    MatchDetail,
    MatchResult,
    MatchType,
    ResumeData,
    RoleType,
    ScoreBreakdown,
    ScorePayload,
    SectionType,
    SkillCategory,
)

__all__ = [
    "ATSScore",
    "ATSScoreDetails",
    "EducationEntry",
    "ExperienceEntry",
    "ExtractedKeywords",
    "JDSection",
    "KeywordDensity",
    "KeywordPriority",
    "MatchDetail",
    "MatchResult",
    "MatchType",
    "ResumeData",
    "RoleType",
    "ScoreBreakdown",
    "ScorePayload",
    "SectionType",
    "SkillCategory",
]
