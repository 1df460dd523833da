from __future__ import annotations

from collections.abc import Sequence

from atscore.schemas.jd import JobRequirements
from atscore.schemas.resume import ResumeSections
from atscore.schemas.scoring import MatchResult
from atscore.schemas.text import SimilarityResult

from .sections import substring_match

EXPERIENCE_MATCH_THRESHOLD = 0.5


def find_matches(
    resume: ResumeSections,
    requirements: JobRequirements,
    similarities: Sequence[Sequence[SimilarityResult]],
) -> list[MatchResult]:
    """Skill hits first, then experience items that overlap a hard requirement.

    ``similarities[i][j]`` compares experience item ``i`` with requirement ``j``.
    """
    matches: list[MatchResult] = []

    for skill in requirements.skills_required:
        matched = next((item for item in resume.skills if substring_match(item, skill)), None)
        if matched is not None:
            matches.append(
                MatchResult(jd_item=skill, matched_phrases=[matched], similarity=1.0, source_section="skills")
            )

    for req_index, requirement in enumerate(requirements.hard_requirements):
        for exp_index, _ in enumerate(resume.experience):
            result = similarities[exp_index][req_index]
            if result.score > EXPERIENCE_MATCH_THRESHOLD:
                matches.append(
                    MatchResult(
                        jd_item=requirement,
                        matched_phrases=list(result.matched_phrases),
                        similarity=result.score,
                        source_section=f"experience-{exp_index}",
                    )
                )

    return matches
