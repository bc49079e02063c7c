"""Pydantic schemas for tool requests and responses."""

from pydantic import BaseModel, Field
from typing import Optional


class VerifyRequest(BaseModel):
    """Label data read by OCR, to be checked against the food DB."""
    product_name: str = Field(..., alias="productName", min_length=1, description="OCR로 읽은 제품명")
    manufacturer: Optional[str] = Field(None, description="OCR로 읽은 제조사명 (선택)")
    ingredients: list[str] = Field(..., description="OCR로 읽은 원재료 목록 (많이 들어있는 순서대로)")
    
    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "productName": "새우깡",
                "manufacturer": "농심",
                "ingredients": ["소맥분", "새우", "팜유", "백설탕류"]
            }
        }


class ProductInfo(BaseModel):
    """Product identity as recorded in the food DB."""
    name: str
    manufacturer: Optional[str] = None
    report_number: Optional[str] = Field(None, alias="reportNumber")
    
    class Config:
        populate_by_name = True


class IngredientsView(BaseModel):
    """OCR, reconciled and database views of the ingredient list."""
    original: list[str]
    verified: list[str]
    from_db: list[str] = Field(..., alias="fromDB")
    in_correct_order: bool = Field(True, alias="inCorrectOrder")
    
    class Config:
        populate_by_name = True


class CorrectionItem(BaseModel):
    """An ingredient name corrected to its database spelling."""
    original: str
    corrected: str
    confidence: int = Field(..., ge=0, le=100)


class VerificationResult(BaseModel):
    """Result when the product was found in the food DB."""
    verified: bool = True
    product_info: ProductInfo = Field(..., alias="productInfo")
    ingredients: IngredientsView
    corrections: list[CorrectionItem]
    confidence: int = Field(..., ge=0, le=100)
    message: str
    
    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "verified": True,
                "productInfo": {"name": "새우깡", "manufacturer": "농심", "reportNumber": "19750001001"},
                "ingredients": {
                    "original": ["소맥분", "백설탕류"],
                    "verified": ["소맥분", "백설탕"],
                    "fromDB": ["소맥분", "백설탕"],
                    "inCorrectOrder": True
                },
                "corrections": [{"original": "백설탕류", "corrected": "백설탕", "confidence": 75}],
                "confidence": 85,
                "message": "1개의 항목이 수정되었습니다."
            }
        }


class OriginalData(BaseModel):
    """Echo of the OCR input."""
    product_name: str = Field(..., alias="productName")
    manufacturer: Optional[str] = None
    ingredients: list[str]
    
    class Config:
        populate_by_name = True


class NotFoundResult(BaseModel):
    """Result when the product is not in the food DB."""
    verified: bool = False
    message: str
    original_data: OriginalData = Field(..., alias="originalData")
    suggestion: str
    
    class Config:
        populate_by_name = True


class ErrorResult(BaseModel):
    """Unexpected failure during verification."""
    error: bool = True
    message: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    version: str
    food_db_configured: bool = Field(..., alias="foodDbConfigured")
    
    class Config:
        populate_by_name = True
