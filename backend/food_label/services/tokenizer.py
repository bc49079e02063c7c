"""Split raw ingredient text into ordered ingredient names."""

import re
from typing import List, Optional

# Delimiters used in the product database's raw ingredient field
INGREDIENT_DELIMITERS = re.compile(r"[,;/]")


def tokenize(text: Optional[str]) -> List[str]:
    """
    Split ingredient text on commas, semicolons and slashes.
    
    Pieces are stripped and empty pieces dropped; order of appearance is kept.
    
    Args:
        text: Raw ingredient text, e.g. "밀가루, 설탕; 소금/정제수"
        
    Returns:
        List of ingredient names (empty for None or empty input)
    """
    if not text:
        return []
    
    pieces = (piece.strip() for piece in INGREDIENT_DELIMITERS.split(text))
    return [piece for piece in pieces if piece]
