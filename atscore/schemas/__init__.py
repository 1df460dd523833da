from .jd import JobRequirements
from .resume import ResumeSections
from .scoring import (
    BulkScoreEntry,
    BulkScoreResult,
    BulkScoreSummary,
    DebugInfo,
    GateResult,
    MatchResult,
    ScoreResult,
    ScoringWeights,
    SectionScores,
    Suggestions,
)
from .text import ExtractedEntities, ProcessedText, SimilarityResult

__all__ = [
    "ExtractedEntities",
    "ProcessedText",
    "SimilarityResult",
    "ResumeSections",
    "JobRequirements",
    "ScoringWeights",
    "SectionScores",
    "GateResult",
    "MatchResult",
    "Suggestions",
    "DebugInfo",
    "ScoreResult",
    "BulkScoreEntry",
    "BulkScoreSummary",
    "BulkScoreResult",
]
