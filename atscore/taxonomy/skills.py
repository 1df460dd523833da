from __future__ import annotations

from atscore.nlp.text import normalize_text
from atscore.schemas.text import ProcessedText

SKILL_VOCABULARY: tuple[str, ...] = (
    "javascript",
    "typescript",
    "python",
    "java",
    "c++",
    "c#",
    "go",
    "rust",
    "swift",
    "react",
    "angular",
    "vue",
    "node",
    "express",
    "django",
    "flask",
    "spring",
    "aws",
    "azure",
    "gcp",
    "docker",
    "kubernetes",
    "terraform",
    "sql",
    "mysql",
    "postgresql",
    "mongodb",
    "redis",
    "elasticsearch",
    "git",
    "jenkins",
    "ci/cd",
    "agile",
    "scrum",
    "devops",
    "machine learning",
    "ai",
    "data science",
    "analytics",
    "big data",
)

HIGH_PRIORITY_SKILLS = frozenset({"javascript", "python", "react", "node", "aws", "sql"})

_VOCABULARY_SET = frozenset(SKILL_VOCABULARY)
# Multi-word entries, keyed by the form they take after normalize_text().
_PHRASES: dict[str, str] = {
    normalize_text(skill).lower(): skill
    for skill in SKILL_VOCABULARY
    if " " in normalize_text(skill)
}


def extract_skills(processed: ProcessedText) -> list[str]:
    """Vocabulary skills found in the tokens or, for phrases, the cleaned text."""
    skills: dict[str, None] = {}
    for token in processed.tokens:
        lowered = token.lower()
        # Dotted names such as node.js also count as their parts.
        for part in (lowered, *lowered.split(".")):
            if part in _VOCABULARY_SET:
                skills[part] = None

    text = processed.cleaned.lower()
    for phrase, skill in _PHRASES.items():
        if phrase in text:
            skills[skill] = None
    return list(skills)


def is_high_priority(skill: str) -> bool:
    return skill.lower() in HIGH_PRIORITY_SKILLS
