"""Best-effort extraction of organizations, locations and dates.

Output of any extractor is advisory: callers rely only on getting three
string lists back, never on specific values.
"""

from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Protocol

logger = logging.getLogger(__name__)

_MONTHS = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?|aug(?:ust)?"
    r"|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)\.?"
)
_DATE_RE = re.compile(
    rf"\b{_MONTHS}\s+(?:19|20)\d{{2}}\b"
    r"|\b(?:0?[1-9]|1[0-2])/(?:19|20)\d{2}\b"
    r"|\b(?:19|20)\d{2}\s*(?:-|to)\s*(?:(?:19|20)\d{2}|present|current)\b"
    r"|\b(?:19|20)\d{2}\b",
    re.IGNORECASE,
)
_ORG_RE = re.compile(
    r"\b((?:[A-Z][\w&.-]*\s+){0,4}"
    r"(?:Inc|LLC|Ltd|Corp|Corporation|Company|University|College|Institute|Technologies|Labs|Group|GmbH)\b\.?)"
)
_LOCATION_RE = re.compile(r"\b([A-Z][a-z]+(?:\s[A-Z][a-z]+)?,\s(?:[A-Z]{2}|[A-Z][a-z]+))\b")


class EntityExtractor(Protocol):
    def extract(self, text: str) -> tuple[list[str], list[str], list[str]]:
        """Return (organizations, locations, dates) found in text."""


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(value.strip() for value in values if value and value.strip()))


class PatternEntityExtractor(EntityExtractor):
    def extract(self, text: str) -> tuple[list[str], list[str], list[str]]:
        text = text or ""
        organizations = _unique(_ORG_RE.findall(text))
        locations = _unique(_LOCATION_RE.findall(text))
        dates = _unique([match.group(0) for match in _DATE_RE.finditer(text)])
        return organizations, locations, dates


class NltkEntityExtractor(EntityExtractor):
    """Named-entity chunking via NLTK; dates still come from patterns.

    Requires the punkt, tagger and ne_chunker data packages to be installed
    already. Missing data yields empty lists rather than a download.
    """

    _LOCATION_LABELS = {"GPE", "LOCATION", "FACILITY"}

    def __init__(self) -> None:
        self._dates = PatternEntityExtractor()

    def extract(self, text: str) -> tuple[list[str], list[str], list[str]]:
        import nltk

        _, _, dates = self._dates.extract(text)
        organizations: list[str] = []
        locations: list[str] = []
        try:
            tree = nltk.ne_chunk(nltk.pos_tag(nltk.word_tokenize(text or "")))
        except LookupError as exc:
            logger.warning("nltk_entity_data_missing error=%s", type(exc).__name__)
            return [], [], dates

        for subtree in tree:
            label = getattr(subtree, "label", None)
            if label is None:
                continue
            phrase = " ".join(token for token, _ in subtree.leaves())
            if subtree.label() == "ORGANIZATION":
                organizations.append(phrase)
            elif subtree.label() in self._LOCATION_LABELS:
                locations.append(phrase)
        return _unique(organizations), _unique(locations), dates


@lru_cache(maxsize=2)
def get_entity_extractor(name: str = "pattern") -> EntityExtractor:
    if name == "nltk":
        return NltkEntityExtractor()
    return PatternEntityExtractor()
