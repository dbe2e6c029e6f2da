from __future__ import annotations

import logging

from fastapi import APIRouter

from ats_engine.keywords import extract_keywords, match_keywords
from ats_engine.schemas import ExtractedKeywords, MatchResult
from ats_engine.schemas.api import KeywordsRequest, MatchRequest, ScoreRequest, ScoreResponse
from ats_engine.scoring import build_score_payload, calculate_ats_score, resume_data_to_text

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/ats/keywords", response_model=ExtractedKeywords)
async def ats_keywords(payload: KeywordsRequest):
    result = extract_keywords(payload.job_description, max_count=payload.max_count)
    logger.info("ats_keywords_request chars=%s keywords=%s", len(payload.job_description), len(result.all))
    return result


@router.post("/ats/match", response_model=MatchResult)
async def ats_match(payload: MatchRequest):
    result = match_keywords(payload.keywords, payload.resume_text)
    logger.info("ats_match_request keywords=%s matched=%s", len(payload.keywords), len(result.matched))
    return result


@router.post("/ats/score", response_model=ScoreResponse)
async def ats_score(payload: ScoreRequest):
    resume_text = payload.resume_text
    if not resume_text.strip():
        resume_text = resume_data_to_text(payload.resume_data, name=payload.name, summary=payload.summary)

    score = calculate_ats_score(payload.job_description, resume_text, payload.resume_data)
    logger.info(
        "ats_score_request total=%s matched=%s missing=%s",
        score.total,
        len(score.details.matched_keywords),
        len(score.details.missing_keywords),
    )
    return ScoreResponse(score=score, summary=build_score_payload(score))
