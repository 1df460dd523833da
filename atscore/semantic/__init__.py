from .similarity import calculate_similarity, find_matching_phrases, overlap

__all__ = ["overlap", "find_matching_phrases", "calculate_similarity"]
