from __future__ import annotations

from typing import Any

from pydantic import Field

from .base import CamelModel


class ScoringWeights(CamelModel):
    skills: float = Field(default=0.4, ge=0.0)
    experience: float = Field(default=0.35, ge=0.0)
    education: float = Field(default=0.1, ge=0.0)
    keywords: float = Field(default=0.15, ge=0.0)


class SectionScores(CamelModel):
    skills: int = Field(ge=0, le=100)
    experience: int = Field(ge=0, le=100)
    education: int = Field(ge=0, le=100)
    keywords: int = Field(ge=0, le=100)


class GateResult(CamelModel):
    rule: str
    passed: bool
    details: str
    impact: str | None = None


class MatchResult(CamelModel):
    jd_item: str
    matched_phrases: list[str] = Field(default_factory=list)
    similarity: float = Field(ge=0.0, le=1.0)
    source_section: str


class Suggestions(CamelModel):
    bullets: list[str] = Field(default_factory=list)
    top_actions: list[str] = Field(default_factory=list)


class DebugInfo(CamelModel):
    weights: ScoringWeights
    keyword_stats: dict[str, Any] = Field(default_factory=dict)
    processing_info: dict[str, Any] = Field(default_factory=dict)


class ScoreResult(CamelModel):
    overall: int = Field(ge=0, le=100)
    sections: SectionScores
    gates: list[GateResult] = Field(default_factory=list)
    matches: list[MatchResult] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    suggestions: Suggestions = Field(default_factory=Suggestions)
    debug: DebugInfo | None = None


class BulkScoreEntry(CamelModel):
    resume_index: int
    resume_title: str
    success: bool
    score: ScoreResult | None = None
    error: str | None = None


class BulkScoreSummary(CamelModel):
    total_resumes: int
    successful_scores: int
    average_score: int
    highest_score: int
    lowest_score: int


class BulkScoreResult(CamelModel):
    results: list[BulkScoreEntry] = Field(default_factory=list)
    summary: BulkScoreSummary
