# deduplication/similarity.py

from rapidfuzz.distance import Levenshtein


def calculate_similarity(a: str, b: str) -> float:
    """
    Score two strings by normalised Levenshtein similarity.

    Uses unit-cost insertions, deletions and substitutions, scaled by the
    longer string's length: ``1 - distance / max(len(a), len(b))``.

    Returns:
        float: Similarity in [0, 1]; 1.0 when both strings are empty and 0.0
            when exactly one of them is.
    """
    if not a:
        return 1.0 if not b else 0.0
    if not b:
        return 0.0

    distance = Levenshtein.distance(a, b)
    return 1.0 - distance / max(len(a), len(b))
