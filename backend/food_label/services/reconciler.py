"""Align OCR ingredient tokens against database ingredient tokens."""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .similarity import similarity
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

# Lower than the usual 0.8 because Hangul OCR misreads change whole syllables
MATCH_THRESHOLD = 0.70


@dataclass
class Correction:
    """An OCR token replaced by its closest database token."""
    original: str
    corrected: str
    confidence_score: int


@dataclass
class ReconciliationResult:
    """Output of reconciling OCR tokens against database text."""
    verified: List[str] = field(default_factory=list)
    corrections: List[Correction] = field(default_factory=list)
    db_tokens: List[str] = field(default_factory=list)


def to_percent(score: float) -> int:
    """Convert a 0-1 score to an integer percentage, rounding halves up."""
    return math.floor(score * 100 + 0.5)


def find_best_match(token: str, candidates: Sequence[str]) -> tuple[Optional[str], float]:
    """
    Find the candidate most similar to token, ignoring case.
    
    Only a strictly greater score replaces the current best, so the first
    candidate wins ties.
    
    Returns:
        Tuple of (best_candidate, score); (None, 0.0) when nothing scores above 0
    """
    best_match = None
    best_score = 0.0
    
    token_lower = token.lower()
    for candidate in candidates:
        score = similarity(token_lower, candidate.lower())
        if score > best_score:
            best_score = score
            best_match = candidate
    
    return best_match, best_score


def reconcile(ocr_tokens: Sequence[str], db_raw_text: Optional[str]) -> ReconciliationResult:
    """
    Reconcile OCR ingredient tokens with the database ingredient list.
    
    Each OCR token maps to exactly one output token, in input order: its best
    database match when similarity exceeds MATCH_THRESHOLD, otherwise the
    OCR token itself. A Correction is recorded whenever the matched token
    differs from the OCR token (exact comparison).
    
    Args:
        ocr_tokens: Ingredient names read from the label, in label order
        db_raw_text: Raw ingredient field from the product database
        
    Returns:
        ReconciliationResult with verified tokens, corrections and db tokens
    """
    db_tokens = tokenize(db_raw_text)
    result = ReconciliationResult(db_tokens=db_tokens)
    
    logger.debug(f"OCR ingredients: {list(ocr_tokens)}")
    logger.debug(f"DB ingredients: {db_tokens}")
    
    for ocr_token in ocr_tokens:
        best_match, best_score = find_best_match(ocr_token, db_tokens)
        
        if best_match is None or best_score <= MATCH_THRESHOLD:
            result.verified.append(ocr_token)
            continue
        
        result.verified.append(best_match)
        if best_match != ocr_token:
            result.corrections.append(Correction(
                original=ocr_token,
                corrected=best_match,
                confidence_score=to_percent(best_score),
            ))
    
    return result
