from __future__ import annotations

from pydantic import BaseModel, Field

from ats_engine.core.settings import settings

from .ats import ATSScore, ResumeData, ScorePayload

_MAX_KEYWORDS = 200


class KeywordsRequest(BaseModel):
    job_description: str = Field(default="", max_length=settings.max_input_chars)
    max_count: int | None = Field(default=None, ge=0, le=_MAX_KEYWORDS)


class MatchRequest(BaseModel):
    keywords: list[str] = Field(default_factory=list, max_length=_MAX_KEYWORDS)
    resume_text: str = Field(default="", max_length=settings.max_input_chars)


class ScoreRequest(BaseModel):
    job_description: str = Field(default="", max_length=settings.max_input_chars)
    resume_text: str = Field(default="", max_length=settings.max_input_chars)
    resume_data: ResumeData | None = None
    name: str | None = Field(default=None, max_length=200)
    summary: str | None = Field(default=None, max_length=5000)


class ScoreResponse(BaseModel):
    score: ATSScore
    summary: ScorePayload
