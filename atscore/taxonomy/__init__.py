from .local_taxonomy import LocalTaxonomy
from .skills import HIGH_PRIORITY_SKILLS, SKILL_VOCABULARY, extract_skills, is_high_priority

__all__ = [
    "LocalTaxonomy",
    "SKILL_VOCABULARY",
    "HIGH_PRIORITY_SKILLS",
    "extract_skills",
    "is_high_priority",
]
