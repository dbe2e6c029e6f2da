from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator

KeywordPriority = Literal["title", "required", "responsibilities", "niceToHave", "general"]
MatchType = Literal["exact", "stem", "synonym"]
SectionType = Literal["required", "niceToHave", "responsibilities", "about", "unknown"]
RoleType = Literal["management", "ic"]


class JDSection(BaseModel):
    type: SectionType
    header: str = ""
    content: str = ""


class ExtractedKeywords(BaseModel):
    all: list[str] = Field(default_factory=list)
    from_title: list[str] = Field(default_factory=list)
    from_required: list[str] = Field(default_factory=list)
    from_nice_to_have: list[str] = Field(default_factory=list)
    technologies: list[str] = Field(default_factory=list)
    action_verbs: list[str] = Field(default_factory=list)
    keyword_priority: dict[str, KeywordPriority] = Field(default_factory=dict)
    keyword_frequency: dict[str, int] = Field(default_factory=dict)


class MatchDetail(BaseModel):
    keyword: str
    match_type: MatchType
    matched_as: str | None = None


class MatchResult(BaseModel):
    matched: list[str] = Field(default_factory=list)
    missing: list[str] = Field(default_factory=list)
    match_details: list[MatchDetail] = Field(default_factory=list)


class KeywordDensity(BaseModel):
    overall_density: float = 0.0
    stuffed_keywords: list[str] = Field(default_factory=list)
    total_occurrences: int = 0


class SkillCategory(BaseModel):
    category: str = ""
    items: list[str] = Field(default_factory=list)


class ExperienceEntry(BaseModel):
    title: str | None = None
    company: str | None = None
    highlights: list[str] = Field(default_factory=list)


class EducationEntry(BaseModel):
    degree: str | None = None
    institution: str | None = None


class ResumeData(BaseModel):
    title: str | None = None
    years_experience: float | None = None
    skills: list[str] = Field(default_factory=list)
    skills_by_category: list[SkillCategory] = Field(default_factory=list)
    team_size: str | None = None
    experiences: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)

    @field_validator("years_experience")
    @classmethod
    def _validate_years(cls, value: float | None) -> float | None:
        if value is None:
            return None
        if value != value or value < 0:
            return None
        return value


class ScoreBreakdown(BaseModel):
    keyword_relevance: float = Field(default=0.0, ge=0.0, le=45.0)
    skills_quality: float = Field(default=0.0, ge=0.0, le=25.0)
    experience_alignment: float = Field(default=0.0, ge=0.0, le=20.0)
    match_quality: float = Field(default=0.0, ge=0.0, le=10.0)


class ATSScoreDetails(BaseModel):
    matched_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    keyword_density: float = 0.0
    match_rate: int = 0
    extracted_keywords: ExtractedKeywords = Field(default_factory=ExtractedKeywords)
    match_details: list[MatchDetail] = Field(default_factory=list)


class ATSScore(BaseModel):
    total: float = Field(default=0.0, ge=0.0, le=100.0)
    breakdown: ScoreBreakdown = Field(default_factory=ScoreBreakdown)
    details: ATSScoreDetails = Field(default_factory=ATSScoreDetails)


class ScorePayload(BaseModel):
    total: float
    breakdown: ScoreBreakdown
    matched_keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    match_rate: int = 0
    keyword_density: float = 0.0
    assessment: str
