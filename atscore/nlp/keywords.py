from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, field

MAX_KEYWORDS = 20
MIN_KEYWORD_WEIGHT = 0.1


@dataclass(slots=True)
class TermWeights:
    """TF-IDF accumulator scoped to a single ranking call.

    Construct one per call; instances are never shared between texts.
    """

    documents: list[Counter[str]] = field(default_factory=list)

    def add_document(self, tokens: list[str]) -> int:
        self.documents.append(Counter(tokens))
        return len(self.documents) - 1

    def idf(self, term: str) -> float:
        containing = sum(1 for doc in self.documents if term in doc)
        return 1.0 + math.log(len(self.documents) / (1.0 + containing))

    def list_terms(self, index: int) -> list[tuple[str, float]]:
        """Terms of one document with their weights, highest first."""
        doc = self.documents[index]
        weighted = [(term, count * self.idf(term)) for term, count in doc.items()]
        # sorted() is stable so ties keep first-appearance order.
        return sorted(weighted, key=lambda item: item[1], reverse=True)


def rank_keywords(tokens: list[str], limit: int = MAX_KEYWORDS) -> list[str]:
    weights = TermWeights()
    index = weights.add_document(tokens)
    return [term for term, weight in weights.list_terms(index) if weight > MIN_KEYWORD_WEIGHT][:limit]
