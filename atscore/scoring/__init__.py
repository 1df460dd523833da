from .config import DEFAULT_WEIGHTS, load_scoring_weights
from .engine import round_score, score_resume, score_resumes_bulk

__all__ = [
    "DEFAULT_WEIGHTS",
    "load_scoring_weights",
    "round_score",
    "score_resume",
    "score_resumes_bulk",
]
