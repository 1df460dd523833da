from __future__ import annotations

from atscore.schemas.text import ExtractedEntities, ProcessedText
from atscore.taxonomy.skills import extract_skills

from .entities import EntityExtractor, PatternEntityExtractor
from .keywords import rank_keywords
from .text import normalize_text, split_sentences, stem_tokens, tokenize


def process_text(text: str, entity_extractor: EntityExtractor | None = None) -> ProcessedText:
    cleaned = normalize_text(text)
    tokens = tokenize(cleaned)
    processed = ProcessedText(
        original=text,
        cleaned=cleaned,
        tokens=tokens,
        stems=stem_tokens(tokens),
        sentences=split_sentences(cleaned),
        keywords=rank_keywords(tokens),
    )

    extractor = entity_extractor or PatternEntityExtractor()
    organizations, locations, dates = extractor.extract(cleaned)
    processed.entities = ExtractedEntities(
        skills=extract_skills(processed),
        organizations=list(organizations),
        locations=list(locations),
        dates=list(dates),
    )
    return processed
