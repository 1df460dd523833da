from __future__ import annotations

from pydantic import Field

from .base import CamelModel


class JobRequirements(CamelModel):
    hard_requirements: list[str] = Field(default_factory=list)
    nice_to_have: list[str] = Field(default_factory=list)
    skills_required: list[str] = Field(default_factory=list)
    experience_years: int | None = None
