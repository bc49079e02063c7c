"""Services for ingredient tokenizing, reconciliation, DB lookup and verification."""

from .similarity import similarity, edit_distance
from .tokenizer import tokenize
from .reconciler import reconcile, Correction, ReconciliationResult, MATCH_THRESHOLD
from .food_db import FoodDBClient, ProductRecord
from .verification import VerificationService, tool_descriptor, TOOL_NAME

__all__ = [
    "similarity",
    "edit_distance",
    "tokenize",
    "reconcile",
    "Correction",
    "ReconciliationResult",
    "MATCH_THRESHOLD",
    "FoodDBClient",
    "ProductRecord",
    "VerificationService",
    "tool_descriptor",
    "TOOL_NAME",
]
