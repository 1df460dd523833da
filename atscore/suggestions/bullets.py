"""Keyword-driven resume bullet suggestions.

Achievement and impact phrases are drawn from ``rng``; pass a seeded
``random.Random`` (or any object with ``choice``) for reproducible output.
"""

from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Protocol

DEFAULT_LEVEL = "mid"
MAX_KEYWORD_BULLETS = 3
MAX_BULLETS = 5

ACTION_VERBS: dict[str, tuple[str, ...]] = {
    "entry": ("Assisted", "Supported", "Contributed", "Participated", "Learned", "Developed"),
    "mid": ("Led", "Managed", "Implemented", "Designed", "Optimized", "Delivered"),
    "senior": ("Architected", "Spearheaded", "Transformed", "Established", "Mentored", "Strategized"),
}

ACHIEVEMENTS: dict[str, tuple[str, ...]] = {
    "entry": ("improved code quality", "enhanced user experience", "streamlined processes"),
    "mid": ("increased system efficiency", "reduced processing time", "enhanced scalability"),
    "senior": ("transformed architecture", "established best practices", "drove innovation"),
}

IMPACTS: dict[str, tuple[str, ...]] = {
    "entry": ("15% improvement in performance", "20% reduction in bugs", "10% faster load times"),
    "mid": ("30% increase in throughput", "25% cost reduction", "40% faster deployment"),
    "senior": (
        "50% improvement in scalability",
        "60% reduction in downtime",
        "45% increase in team productivity",
    ),
}


class RandomSource(Protocol):
    def choice(self, seq: Sequence[str]) -> str: ...


def _level(experience_level: str) -> str:
    return experience_level if experience_level in ACTION_VERBS else DEFAULT_LEVEL


def generate_bullet_suggestions(
    section_text: str,
    keywords: Sequence[str],
    experience_level: str = DEFAULT_LEVEL,
    rng: RandomSource | None = None,
) -> list[str]:
    # Phrasing depends only on keywords and level.
    _ = section_text
    rng = rng or random.Random()
    level = _level(experience_level)
    verbs = ACTION_VERBS[level]

    bullets: list[str] = []
    for index, keyword in enumerate(keywords[:MAX_KEYWORD_BULLETS]):
        verb = verbs[index % len(verbs)]
        achievement = rng.choice(ACHIEVEMENTS[level])
        impact = rng.choice(IMPACTS[level])
        bullets.append(f"• {verb} {keyword}-based solutions that {achievement}, resulting in {impact}")

    if len(bullets) < MAX_KEYWORD_BULLETS:
        bullets.append(f"• {verbs[0]} cross-functional team initiatives that improved system performance by 25%")
        bullets.append(f"• {verbs[1]} automated testing processes, reducing deployment time by 40%")

    return bullets[:MAX_BULLETS]
