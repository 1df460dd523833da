import asyncio
import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Request

from atscore.core.config import settings
from atscore.core.rate_limit import rate_limit
from atscore.nlp.entities import get_entity_extractor
from atscore.schemas.api import (
    BulkScoreData,
    BulkScoreRequest,
    BulkScoreResponse,
    ScoreData,
    ScoreRequest,
    ScoreResponse,
    SuggestBulletsData,
    SuggestBulletsRequest,
    SuggestBulletsResponse,
    WeightsData,
    WeightsResponse,
)
from atscore.scoring import load_scoring_weights, score_resume, score_resumes_bulk
from atscore.suggestions import generate_bullet_suggestions
from atscore.taxonomy import LocalTaxonomy

logger = logging.getLogger(__name__)

router = APIRouter()


def _now() -> datetime:
    return datetime.now(timezone.utc)


@router.post("/score", response_model=ScoreResponse, response_model_exclude_none=True)
@rate_limit()
async def score(request: Request, payload: ScoreRequest):
    _ = request
    logger.info(
        "score_request resume_chars=%s jd_chars=%s include_debug=%s",
        len(payload.resume.text),
        len(payload.job_description.text),
        payload.include_debug,
    )
    result = await asyncio.to_thread(
        score_resume,
        payload.resume.text,
        payload.job_description.text,
        weights=load_scoring_weights(),
        skill_synonyms=LocalTaxonomy.from_config().as_mapping(),
        include_debug=payload.include_debug,
        entity_extractor=get_entity_extractor(settings.entity_extractor),
    )
    data = ScoreData(**result.model_dump(), timestamp=_now())
    return ScoreResponse(data=data)


@router.post("/score/bulk", response_model=BulkScoreResponse, response_model_exclude_none=True)
@rate_limit(settings.bulk_rate_limit)
async def score_bulk(request: Request, payload: BulkScoreRequest):
    _ = request
    logger.info(
        "bulk_score_request resume_count=%s jd_chars=%s",
        len(payload.resumes),
        len(payload.job_description.text),
    )
    result = await asyncio.to_thread(
        score_resumes_bulk,
        [(resume.text, resume.title) for resume in payload.resumes],
        payload.job_description.text,
        weights=load_scoring_weights(),
        skill_synonyms=LocalTaxonomy.from_config().as_mapping(),
        entity_extractor=get_entity_extractor(settings.entity_extractor),
    )
    return BulkScoreResponse(data=BulkScoreData(results=result.results, summary=result.summary, timestamp=_now()))


@router.post("/score/suggest-bullets", response_model=SuggestBulletsResponse)
@rate_limit()
async def suggest_bullets(request: Request, payload: SuggestBulletsRequest):
    _ = request
    bullets = generate_bullet_suggestions(
        payload.resume_section_text,
        payload.target_keywords,
        payload.experience_level,
    )
    return SuggestBulletsResponse(
        data=SuggestBulletsData(
            bullets=bullets,
            target_keywords=payload.target_keywords,
            experience_level=payload.experience_level,
            timestamp=_now(),
        )
    )


@router.get("/score/weights", response_model=WeightsResponse)
async def get_weights():
    return WeightsResponse(data=WeightsData(weights=load_scoring_weights()))
