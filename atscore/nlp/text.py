"""Text normalization, tokenization, stemming and sentence splitting.

Every function here is a pure function of its input.
"""

from __future__ import annotations

import re

from nltk.stem import PorterStemmer

_NOISE_RE = re.compile(r"[^\w\s.,!?;:()\-+#]")
_WHITESPACE_RE = re.compile(r"\s+")
_TOKEN_SPLIT_RE = re.compile(r"[A-Za-z0-9_+#.\-]+")
_TOKEN_VALID_RE = re.compile(r"^[a-zA-Z0-9+#.-]+$")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")

MIN_SENTENCE_CHARS = 10

STOPWORDS = frozenset(
    {
        "a", "about", "above", "after", "again", "against", "all", "also", "am", "an",
        "and", "any", "are", "as", "at", "be", "because", "been", "before", "being",
        "below", "between", "both", "but", "by", "can", "could", "did", "do", "does",
        "doing", "down", "during", "each", "either", "etc", "ever", "every", "few",
        "for", "from", "further", "had", "has", "have", "having", "he", "her", "here",
        "hers", "herself", "him", "himself", "his", "how", "however", "i", "if", "in",
        "into", "is", "it", "its", "itself", "just", "let", "may", "me", "might",
        "more", "most", "must", "my", "myself", "no", "nor", "not", "now", "of", "off",
        "on", "once", "only", "or", "other", "our", "ours", "ourselves", "out", "over",
        "own", "per", "same", "shall", "she", "should", "so", "some", "such", "than",
        "that", "the", "their", "theirs", "them", "themselves", "then", "there",
        "these", "they", "this", "those", "through", "to", "too", "under", "until",
        "up", "upon", "us", "very", "via", "was", "we", "were", "what", "when",
        "where", "whether", "which", "while", "who", "whom", "why", "will", "with",
        "within", "without", "would", "yet", "you", "your", "yours", "yourself",
        "yourselves",
    }
)

_stemmer = PorterStemmer()


def normalize_text(text: str) -> str:
    """Replace noise characters with spaces and collapse whitespace."""
    cleaned = _NOISE_RE.sub(" ", text or "")
    return _WHITESPACE_RE.sub(" ", cleaned).strip()


def tokenize(text: str) -> list[str]:
    """Lowercase, split and drop short, non-technical and stopword tokens."""
    tokens: list[str] = []
    for raw in _TOKEN_SPLIT_RE.findall((text or "").lower()):
        token = raw.strip(".-")
        if len(token) <= 1 or not _TOKEN_VALID_RE.match(token):
            continue
        if token in STOPWORDS:
            continue
        tokens.append(token)
    return tokens


def stem(token: str) -> str:
    return _stemmer.stem(token)


def stem_tokens(tokens: list[str]) -> list[str]:
    return [stem(token) for token in tokens]


def split_sentences(text: str) -> list[str]:
    # Fragments are kept untrimmed; callers trim when they surface them.
    return [
        fragment
        for fragment in _SENTENCE_SPLIT_RE.split(text or "")
        if len(fragment.strip()) > MIN_SENTENCE_CHARS
    ]
