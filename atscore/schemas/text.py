from __future__ import annotations

from pydantic import Field

from .base import CamelModel


class ExtractedEntities(CamelModel):
    skills: list[str] = Field(default_factory=list)
    organizations: list[str] = Field(default_factory=list)
    locations: list[str] = Field(default_factory=list)
    dates: list[str] = Field(default_factory=list)


class ProcessedText(CamelModel):
    original: str
    cleaned: str
    tokens: list[str] = Field(default_factory=list)
    stems: list[str] = Field(default_factory=list)
    sentences: list[str] = Field(default_factory=list)
    keywords: list[str] = Field(default_factory=list, max_length=20)
    entities: ExtractedEntities = Field(default_factory=ExtractedEntities)


class SimilarityResult(CamelModel):
    score: float = Field(ge=0.0, le=1.0)
    matched_phrases: list[str] = Field(default_factory=list)
    source_text: str
    target_text: str
