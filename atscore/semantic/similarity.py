"""Token-set overlap similarity.

``overlap`` is |A & B| / (sqrt(|A|) * sqrt(|B|)) over token *sets*. It is an
overlap coefficient, not cosine similarity on weighted vectors, and it is
symmetric in its arguments.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

from atscore.nlp.entities import EntityExtractor
from atscore.nlp.processing import process_text
from atscore.nlp.text import tokenize
from atscore.schemas.text import SimilarityResult

PHRASE_MATCH_THRESHOLD = 0.6


def overlap(tokens_a: Iterable[str], tokens_b: Iterable[str]) -> float:
    set_a = set(tokens_a)
    set_b = set(tokens_b)
    if not set_a or not set_b:
        return 0.0
    shared = len(set_a & set_b)
    # Float error can push identical sets a hair above 1.0.
    return min(1.0, shared / (math.sqrt(len(set_a)) * math.sqrt(len(set_b))))


def find_matching_phrases(
    sentences_a: list[str],
    sentences_b: list[str],
    threshold: float = PHRASE_MATCH_THRESHOLD,
) -> list[str]:
    """Sentences of ``sentences_a`` that overlap some sentence of ``sentences_b``."""
    tokens_b = [tokenize(sentence) for sentence in sentences_b]
    matches: dict[str, None] = {}
    for sentence in sentences_a:
        tokens_a = tokenize(sentence)
        for other in tokens_b:
            if overlap(tokens_a, other) > threshold:
                matches[sentence.strip()] = None
    return list(matches)


def calculate_similarity(
    text1: str,
    text2: str,
    entity_extractor: EntityExtractor | None = None,
) -> SimilarityResult:
    processed1 = process_text(text1, entity_extractor=entity_extractor)
    processed2 = process_text(text2, entity_extractor=entity_extractor)
    return SimilarityResult(
        score=overlap(processed1.tokens, processed2.tokens),
        matched_phrases=find_matching_phrases(processed1.sentences, processed2.sentences),
        source_text=text1,
        target_text=text2,
    )
