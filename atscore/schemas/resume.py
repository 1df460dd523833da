from __future__ import annotations

from pydantic import Field

from .base import CamelModel


class ResumeSections(CamelModel):
    summary: str | None = None
    skills: list[str] = Field(default_factory=list)
    experience: list[str] = Field(default_factory=list)
    education: list[str] = Field(default_factory=list)
    projects: list[str] = Field(default_factory=list)
    certifications: list[str] = Field(default_factory=list)

    def present_sections(self) -> list[str]:
        present: list[str] = []
        for name in ("summary", "skills", "experience", "education", "projects", "certifications"):
            if getattr(self, name):
                present.append(name)
        return present
