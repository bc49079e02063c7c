"""Pydantic models for request/response schemas."""

from .schemas import (
    VerifyRequest,
    ProductInfo,
    IngredientsView,
    CorrectionItem,
    VerificationResult,
    OriginalData,
    NotFoundResult,
    ErrorResult,
    HealthResponse,
)

__all__ = [
    "VerifyRequest",
    "ProductInfo",
    "IngredientsView",
    "CorrectionItem",
    "VerificationResult",
    "OriginalData",
    "NotFoundResult",
    "ErrorResult",
    "HealthResponse",
]
