from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import Field

from atscore.core.config import settings

from .base import CamelModel
from .scoring import BulkScoreEntry, BulkScoreSummary, ScoreResult, ScoringWeights

ExperienceLevel = Literal["entry", "mid", "senior"]


class DocumentInput(CamelModel):
    text: str = Field(min_length=settings.min_text_chars, max_length=settings.max_text_chars)
    id: str | None = Field(default=None, max_length=200)


class BulkResumeInput(DocumentInput):
    title: str | None = Field(default=None, max_length=200)


class ScoreRequest(CamelModel):
    resume: DocumentInput
    job_description: DocumentInput
    include_debug: bool = False


class BulkScoreRequest(CamelModel):
    resumes: list[BulkResumeInput] = Field(max_length=settings.bulk_max_resumes)
    job_description: DocumentInput


class SuggestBulletsRequest(CamelModel):
    resume_section_text: str = Field(min_length=10, max_length=settings.max_text_chars)
    target_keywords: list[str] = Field(min_length=1, max_length=10)
    experience_level: ExperienceLevel = "mid"


class ScoreData(ScoreResult):
    timestamp: datetime


class ScoreResponse(CamelModel):
    success: bool = True
    data: ScoreData


class BulkScoreData(CamelModel):
    results: list[BulkScoreEntry]
    summary: BulkScoreSummary
    timestamp: datetime


class BulkScoreResponse(CamelModel):
    success: bool = True
    data: BulkScoreData


class SuggestBulletsData(CamelModel):
    bullets: list[str]
    target_keywords: list[str]
    experience_level: ExperienceLevel
    timestamp: datetime


class SuggestBulletsResponse(CamelModel):
    success: bool = True
    data: SuggestBulletsData


class WeightsData(CamelModel):
    weights: ScoringWeights


class WeightsResponse(CamelModel):
    success: bool = True
    data: WeightsData
