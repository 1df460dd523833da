from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor

from atscore.nlp.entities import EntityExtractor
from atscore.nlp.processing import process_text
from atscore.normalize.normalize_jd import extract_requirements
from atscore.normalize.normalize_resume import extract_resume_sections
from atscore.schemas.jd import JobRequirements
from atscore.schemas.resume import ResumeSections
from atscore.schemas.scoring import (
    BulkScoreEntry,
    BulkScoreResult,
    BulkScoreSummary,
    DebugInfo,
    ScoreResult,
    ScoringWeights,
    SectionScores,
)
from atscore.schemas.text import SimilarityResult
from atscore.semantic.similarity import calculate_similarity
from atscore.suggestions.gaps import generate_gap_suggestions

from .gates import apply_gate_cap, evaluate_gates
from .matches import find_matches
from .sections import (
    calculate_education_score,
    calculate_experience_score,
    calculate_keywords_score,
    calculate_skills_score,
    find_missing_keywords,
    shared_keywords,
)

logger = logging.getLogger(__name__)


def round_score(value: float) -> int:
    """Round half up and clamp into 0..100."""
    clamped = min(max(value, 0.0), 100.0)
    return int(math.floor(clamped + 0.5))


def _compare_experience(
    resume: ResumeSections,
    requirements: JobRequirements,
    entity_extractor: EntityExtractor | None,
) -> list[list[SimilarityResult]]:
    return [
        [
            calculate_similarity(item, requirement, entity_extractor=entity_extractor)
            for requirement in requirements.hard_requirements
        ]
        for item in resume.experience
    ]


def score_resume(
    resume_text: str,
    job_text: str,
    weights: ScoringWeights | None = None,
    skill_synonyms: Mapping[str, Sequence[str]] | None = None,
    include_debug: bool = False,
    entity_extractor: EntityExtractor | None = None,
) -> ScoreResult:
    """Score one resume against one job description.

    Pure with respect to its arguments: all intermediate state, including
    keyword ranking, is built for this call only.
    """
    weights = weights or ScoringWeights()
    synonyms = skill_synonyms or {}

    resume_processed = process_text(resume_text, entity_extractor=entity_extractor)
    jd_processed = process_text(job_text, entity_extractor=entity_extractor)
    resume = extract_resume_sections(resume_text, processed=resume_processed)
    requirements = extract_requirements(job_text, processed=jd_processed)

    similarities = _compare_experience(resume, requirements, entity_extractor)

    skills_score = calculate_skills_score(resume.skills, requirements.skills_required, synonyms)
    experience_score = calculate_experience_score(
        resume.experience, requirements.hard_requirements, similarities
    )
    education_score = calculate_education_score(resume.education)
    keywords_score = calculate_keywords_score(resume_processed.keywords, jd_processed.keywords)

    overall = (
        skills_score * weights.skills
        + experience_score * weights.experience
        + education_score * weights.education
        + keywords_score * weights.keywords
    )

    gates = evaluate_gates(resume, requirements)
    overall = apply_gate_cap(overall, gates)

    missing_keywords = find_missing_keywords(resume.skills, requirements.skills_required)
    suggestions = generate_gap_suggestions(
        missing_keywords,
        skills_score=skills_score,
        experience_score=experience_score,
        keywords_score=keywords_score,
    )

    result = ScoreResult(
        overall=round_score(overall),
        sections=SectionScores(
            skills=round_score(skills_score),
            experience=round_score(experience_score),
            education=round_score(education_score),
            keywords=round_score(keywords_score),
        ),
        gates=gates,
        matches=find_matches(resume, requirements, similarities),
        missing_keywords=missing_keywords,
        suggestions=suggestions,
    )

    if include_debug:
        result.debug = DebugInfo(
            weights=weights,
            keyword_stats={
                "resumeKeywords": list(resume_processed.keywords),
                "jdKeywords": list(jd_processed.keywords),
                "sharedKeywords": shared_keywords(resume_processed.keywords, jd_processed.keywords),
            },
            processing_info={
                "resumeSections": resume.present_sections(),
                "jdRequirements": len(requirements.hard_requirements),
                "skillsFound": len(resume.skills),
                "experienceItems": len(resume.experience),
            },
        )

    logger.debug(
        "score_resume overall=%s gates_failed=%s missing=%s",
        result.overall,
        sum(1 for gate in gates if not gate.passed),
        len(missing_keywords),
    )
    return result


def summarize_bulk(entries: Sequence[BulkScoreEntry]) -> BulkScoreSummary:
    scores = [entry.score.overall for entry in entries if entry.success and entry.score is not None]
    return BulkScoreSummary(
        total_resumes=len(entries),
        successful_scores=len(scores),
        average_score=int(math.floor(sum(scores) / len(scores) + 0.5)) if scores else 0,
        highest_score=max(scores) if scores else 0,
        lowest_score=min(scores) if scores else 0,
    )


def score_resumes_bulk(
    resumes: Sequence[tuple[str, str | None]],
    job_text: str,
    weights: ScoringWeights | None = None,
    skill_synonyms: Mapping[str, Sequence[str]] | None = None,
    entity_extractor: EntityExtractor | None = None,
    max_workers: int | None = None,
) -> BulkScoreResult:
    """Score several ``(text, title)`` resumes against one job description.

    Each resume is scored independently in a worker thread; one failure is
    reported in its own entry and does not affect the others.
    """

    def _score_one(index: int, text: str, title: str | None) -> BulkScoreEntry:
        resume_title = title or f"Resume {index + 1}"
        try:
            score = score_resume(
                text,
                job_text,
                weights=weights,
                skill_synonyms=skill_synonyms,
                include_debug=False,
                entity_extractor=entity_extractor,
            )
        except Exception as exc:  # noqa: BLE001 - reported per resume
            logger.warning("bulk_score_failed resume_index=%s error=%s", index, exc)
            return BulkScoreEntry(resume_index=index, resume_title=resume_title, success=False, error=str(exc))
        return BulkScoreEntry(resume_index=index, resume_title=resume_title, success=True, score=score)

    if not resumes:
        return BulkScoreResult(results=[], summary=summarize_bulk([]))

    with ThreadPoolExecutor(max_workers=max_workers or len(resumes)) as pool:
        futures = [
            pool.submit(_score_one, index, text, title) for index, (text, title) in enumerate(resumes)
        ]
        entries = [future.result() for future in futures]

    return BulkScoreResult(results=entries, summary=summarize_bulk(entries))
