from __future__ import annotations

import re

from atscore.nlp.entities import EntityExtractor
from atscore.nlp.processing import process_text
from atscore.schemas.resume import ResumeSections
from atscore.schemas.text import ProcessedText
from atscore.taxonomy.skills import extract_skills

from .utils import content_lines

# Tested in this order; the first header that matches a line wins.
SECTION_HEADERS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("summary", re.compile(r"^(summary|profile|objective|about)", re.IGNORECASE)),
    ("skills", re.compile(r"^(skills|technical skills|competencies)", re.IGNORECASE)),
    (
        "experience",
        re.compile(r"^(experience|work experience|employment|professional experience)", re.IGNORECASE),
    ),
    ("education", re.compile(r"^(education|academic|qualifications)", re.IGNORECASE)),
    ("projects", re.compile(r"^(projects|portfolio)", re.IGNORECASE)),
    ("certifications", re.compile(r"^(certifications|certificates|licenses)", re.IGNORECASE)),
)


def _match_header(line: str) -> str | None:
    for section, pattern in SECTION_HEADERS:
        if pattern.match(line):
            return section
    return None


def segment_sections(text: str) -> dict[str, str | list[str]]:
    """Group resume lines under the most recent recognised header.

    Lines before the first header are dropped. ``summary`` is joined into
    one string; every other section keeps its lines as a list.
    """
    sections: dict[str, str | list[str]] = {}
    current_section: str | None = None
    buffer: list[str] = []

    def flush() -> None:
        if current_section and buffer:
            sections[current_section] = " ".join(buffer) if current_section == "summary" else list(buffer)

    for line in content_lines(text):
        header = _match_header(line)
        if header is not None:
            flush()
            current_section = header
            buffer = []
            continue
        if current_section:
            buffer.append(line)

    flush()
    return sections


def _as_list(value: str | list[str] | None) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    return list(value)


def extract_resume_sections(
    resume_text: str,
    entity_extractor: EntityExtractor | None = None,
    processed: ProcessedText | None = None,
) -> ResumeSections:
    sections = segment_sections(resume_text)
    if processed is None:
        processed = process_text(resume_text, entity_extractor=entity_extractor)
    summary = sections.get("summary")

    return ResumeSections(
        summary=summary if isinstance(summary, str) else None,
        skills=extract_skills(processed),
        experience=_as_list(sections.get("experience")),
        education=_as_list(sections.get("education")),
        projects=_as_list(sections.get("projects")),
        certifications=_as_list(sections.get("certifications")),
    )
