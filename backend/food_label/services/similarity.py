"""Edit-distance similarity between ingredient names."""

from typing import Optional

from rapidfuzz.distance import Levenshtein


def edit_distance(a: str, b: str) -> int:
    """Levenshtein distance with unit cost for insert, delete and substitute.

    Comparison is case-sensitive; callers normalise case themselves.
    """
    return Levenshtein.distance(a, b)


def similarity(a: Optional[str], b: Optional[str]) -> float:
    """
    Normalised similarity in [0, 1].
    
    Computed as (longer - distance) / longer where longer is the length of
    the longer string. Returns 0.0 when either side is empty or missing,
    1.0 for identical strings.
    """
    if not a or not b:
        return 0.0
    
    longer = max(len(a), len(b))
    if longer == 0:
        return 1.0
    
    return (longer - edit_distance(a, b)) / longer
