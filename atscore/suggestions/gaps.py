from __future__ import annotations

from collections.abc import Sequence

from atscore.schemas.scoring import Suggestions

EXPERIENCE_ACTION_THRESHOLD = 70.0
KEYWORDS_ACTION_THRESHOLD = 60.0
SKILLS_ACTION_THRESHOLD = 80.0
MAX_SKILLS_NAMED = 3

EXPERIENCE_EXAMPLE_BULLETS = (
    "• Led cross-functional team of 5 engineers to deliver project 2 weeks ahead of schedule",
    "• Improved system performance by 40% through optimization and refactoring",
)


def generate_gap_suggestions(
    missing_keywords: Sequence[str],
    *,
    skills_score: float,
    experience_score: float,
    keywords_score: float,
) -> Suggestions:
    bullets: list[str] = []
    top_actions: list[str] = []

    if missing_keywords:
        top_actions.append(f"Add missing skills: {', '.join(missing_keywords[:MAX_SKILLS_NAMED])}")
        bullets.append(
            f"• Developed proficiency in {missing_keywords[0]} through hands-on projects and training"
        )

    if experience_score < EXPERIENCE_ACTION_THRESHOLD:
        top_actions.append("Enhance experience descriptions with specific achievements and metrics")
        bullets.extend(EXPERIENCE_EXAMPLE_BULLETS)

    if keywords_score < KEYWORDS_ACTION_THRESHOLD:
        top_actions.append("Incorporate more job-specific keywords throughout your resume")

    if skills_score < SKILLS_ACTION_THRESHOLD:
        top_actions.append("Expand technical skills section with relevant technologies")

    return Suggestions(bullets=bullets, top_actions=top_actions)
