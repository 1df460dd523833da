from __future__ import annotations

import re

from atscore.nlp.entities import EntityExtractor
from atscore.nlp.processing import process_text
from atscore.schemas.jd import JobRequirements
from atscore.schemas.text import ProcessedText
from atscore.taxonomy.skills import extract_skills

from .utils import collect_matches

_CLAUSE = r"([^.!?]+)"

_HARD_REQUIREMENT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"\bmust have\s+{_CLAUSE}", re.IGNORECASE),
    re.compile(rf"\brequired:\s*{_CLAUSE}", re.IGNORECASE),
    re.compile(rf"\bmandatory\s+{_CLAUSE}", re.IGNORECASE),
    re.compile(rf"\bessential\s+{_CLAUSE}", re.IGNORECASE),
    re.compile(rf"\bminimum\s+\d+\s*years?\s+{_CLAUSE}", re.IGNORECASE),
)

_NICE_TO_HAVE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(rf"\bnice to have\s+{_CLAUSE}", re.IGNORECASE),
    re.compile(rf"\bpreferred\s+{_CLAUSE}", re.IGNORECASE),
    re.compile(rf"\bbonus\s+{_CLAUSE}", re.IGNORECASE),
    re.compile(rf"\bplus\s+{_CLAUSE}", re.IGNORECASE),
)

# Order matters: the first pattern with a match decides the value.
_EXPERIENCE_YEARS_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(\d+)\+?\s*years?\s+(?:of\s+)?(?:[\w+#-]+\s+){0,3}?experience", re.IGNORECASE),
    re.compile(r"\bminimum\s+(?:of\s+)?(\d+)\s*years?", re.IGNORECASE),
    re.compile(r"\bat least\s+(\d+)\s*years?", re.IGNORECASE),
)


def extract_hard_requirements(text: str) -> list[str]:
    return collect_matches(_HARD_REQUIREMENT_PATTERNS, text)


def extract_nice_to_have(text: str) -> list[str]:
    return collect_matches(_NICE_TO_HAVE_PATTERNS, text)


def extract_experience_years(text: str) -> int | None:
    for pattern in _EXPERIENCE_YEARS_PATTERNS:
        match = pattern.search(text or "")
        if match:
            return int(match.group(1))
    return None


def extract_requirements(
    job_text: str,
    entity_extractor: EntityExtractor | None = None,
    processed: ProcessedText | None = None,
) -> JobRequirements:
    if processed is None:
        processed = process_text(job_text, entity_extractor=entity_extractor)
    return JobRequirements(
        hard_requirements=extract_hard_requirements(job_text),
        nice_to_have=extract_nice_to_have(job_text),
        skills_required=extract_skills(processed),
        experience_years=extract_experience_years(job_text),
    )
