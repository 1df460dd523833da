"""Per-section scores on a 0-100 scale, left unrounded.

Every "no data" branch returns a fixed fallback instead of raising.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from atscore.schemas.text import SimilarityResult
from atscore.taxonomy.skills import is_high_priority

NO_REQUIRED_SKILLS_SCORE = 85.0
NO_EXPERIENCE_SCORE = 20.0
NO_EDUCATION_SCORE = 50.0
RELEVANT_EDUCATION_SCORE = 85.0
OTHER_EDUCATION_SCORE = 70.0

HIGH_PRIORITY_WEIGHT = 1.5
DEFAULT_SKILL_WEIGHT = 1.0

EXPERIENCE_DEPTH_ITEMS = 3
EXPERIENCE_DEPTH_BONUS = 10.0
STRONG_MATCH_SIMILARITY = 0.7
STRONG_MATCH_BONUS = 15.0

_RELEVANT_EDUCATION_TERMS = ("computer", "engineering", "science", "technology")


def skill_weight(skill: str) -> float:
    return HIGH_PRIORITY_WEIGHT if is_high_priority(skill) else DEFAULT_SKILL_WEIGHT


def substring_match(resume_skill: str, required_skill: str) -> bool:
    resume = resume_skill.lower()
    required = required_skill.lower()
    return resume == required or required in resume or resume in required


def skills_match(
    resume_skill: str,
    required_skill: str,
    synonyms: Mapping[str, Sequence[str]] | None = None,
) -> bool:
    if substring_match(resume_skill, required_skill):
        return True
    resume = resume_skill.lower()
    required_synonyms = (synonyms or {}).get(required_skill.lower(), [])
    return any(synonym.lower() in resume for synonym in required_synonyms)


def calculate_skills_score(
    resume_skills: Sequence[str],
    required_skills: Sequence[str],
    synonyms: Mapping[str, Sequence[str]] | None = None,
) -> float:
    if not required_skills:
        return NO_REQUIRED_SKILLS_SCORE

    matched_weight = 0.0
    total_weight = 0.0
    for required in required_skills:
        weight = skill_weight(required)
        total_weight += weight
        if any(skills_match(resume, required, synonyms) for resume in resume_skills):
            matched_weight += weight

    if total_weight <= 0:
        return 0.0
    return matched_weight / total_weight * 100


def calculate_experience_score(
    experience_items: Sequence[str],
    requirements: Sequence[str],
    similarities: Sequence[Sequence[SimilarityResult]],
) -> float:
    """Score experience against hard requirements.

    ``similarities[i][j]`` compares experience item ``i`` with requirement ``j``.
    """
    if not experience_items:
        return NO_EXPERIENCE_SCORE

    pair_scores = [result.score for row in similarities for result in row]
    total = sum(pair_scores)
    best = max(pair_scores, default=0.0)

    average = total / (len(experience_items) * max(len(requirements), 1))
    score = average * 100
    if len(experience_items) >= EXPERIENCE_DEPTH_ITEMS:
        score += EXPERIENCE_DEPTH_BONUS
    if best > STRONG_MATCH_SIMILARITY:
        score += STRONG_MATCH_BONUS
    return min(score, 100.0)


def calculate_education_score(education_items: Sequence[str]) -> float:
    if not education_items:
        return NO_EDUCATION_SCORE
    relevant = any(
        term in item.lower() for item in education_items for term in _RELEVANT_EDUCATION_TERMS
    )
    return RELEVANT_EDUCATION_SCORE if relevant else OTHER_EDUCATION_SCORE


def shared_keywords(resume_keywords: Sequence[str], jd_keywords: Sequence[str]) -> list[str]:
    resume_set = set(resume_keywords)
    return [keyword for keyword in dict.fromkeys(jd_keywords) if keyword in resume_set]


def calculate_keywords_score(resume_keywords: Sequence[str], jd_keywords: Sequence[str]) -> float:
    jd_set = set(jd_keywords)
    if not jd_set:
        return 0.0
    return len(shared_keywords(resume_keywords, jd_keywords)) / len(jd_set) * 100


def find_missing_keywords(resume_skills: Sequence[str], required_skills: Sequence[str]) -> list[str]:
    return [
        required
        for required in required_skills
        if not any(substring_match(resume, required) for resume in resume_skills)
    ]
