from __future__ import annotations

import logging
from collections.abc import Mapping

from atscore.core.config.scoring import get_scoring_value

logger = logging.getLogger(__name__)


class LocalTaxonomy:
    """Skill synonym lookup keyed by lowercase required skill."""

    def __init__(self, synonyms: Mapping[str, list[str]] | None = None) -> None:
        self._synonyms = self._normalize(synonyms or {})

    @staticmethod
    def _normalize(raw: Mapping[str, object]) -> dict[str, list[str]]:
        normalized: dict[str, list[str]] = {}
        for key, values in raw.items():
            if isinstance(values, str):
                values = [values]
            if not isinstance(values, (list, tuple)):
                continue
            normalized[str(key).strip().lower()] = [str(value).strip() for value in values if str(value).strip()]
        return normalized

    @classmethod
    def from_config(cls) -> "LocalTaxonomy":
        try:
            raw = get_scoring_value("skill_synonyms", {})
        except RuntimeError as exc:
            logger.warning("skill_synonyms_load_failed using_defaults=true error=%s", exc)
            return cls()
        if not isinstance(raw, Mapping):
            logger.warning("skill_synonyms_invalid using_defaults=true type=%s", type(raw).__name__)
            return cls()
        return cls(raw)

    def synonyms_for(self, skill: str) -> list[str]:
        return list(self._synonyms.get(skill.strip().lower(), []))

    def as_mapping(self) -> dict[str, list[str]]:
        return {key: list(values) for key, values in self._synonyms.items()}
