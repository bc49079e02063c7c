"""Verification service: check OCR label data against the food DB."""

import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from .food_db import FoodDBClient
from .reconciler import reconcile
from ..models import (
    VerificationResult,
    NotFoundResult,
    ErrorResult,
    OriginalData,
    ProductInfo,
    IngredientsView,
    CorrectionItem,
)

logger = logging.getLogger(__name__)

# Overall confidence is fixed rather than graded by correction count
CONFIDENCE_ALL_CORRECT = 100
CONFIDENCE_CORRECTED = 85

MESSAGE_ALL_CORRECT = "모든 정보가 정확합니다!"
MESSAGE_CORRECTED = "{count}개의 항목이 수정되었습니다."
MESSAGE_NOT_FOUND = "DB에서 제품을 찾을 수 없습니다. OCR 결과를 그대로 사용합니다."
SUGGESTION_NOT_FOUND = "DB에 제품이 없을 수 있습니다. 제품명을 다시 확인해주세요."
MESSAGE_ERROR = "검증 중 오류 발생: {error}"

TOOL_NAME = "verify_food_label"
TOOL_DESCRIPTION = (
    "OCR로 추출한 식품 표기 정보를 공공데이터포털의 식품 DB와 비교하여 검증합니다. "
    "제품명과 원재료 정보의 정확성을 확인하고 오타를 수정합니다."
)

Outcome = Union[VerificationResult, NotFoundResult, ErrorResult]


def tool_descriptor() -> Dict[str, Any]:
    """Describe the verify tool and its input schema for tool-calling clients."""
    return {
        "name": TOOL_NAME,
        "description": TOOL_DESCRIPTION,
        "inputSchema": {
            "type": "object",
            "properties": {
                "productName": {
                    "type": "string",
                    "description": "OCR로 읽은 제품명",
                },
                "manufacturer": {
                    "type": "string",
                    "description": "OCR로 읽은 제조사명 (선택)",
                },
                "ingredients": {
                    "type": "array",
                    "items": {"type": "string"},
                    "description": "OCR로 읽은 원재료 목록 (많이 들어있는 순서대로)",
                },
            },
            "required": ["productName", "ingredients"],
        },
    }


class VerificationService:
    """Looks up a product and reconciles its OCR ingredient list."""
    
    def __init__(self, client: Optional[FoodDBClient] = None):
        self.client = client or FoodDBClient()
    
    def verify(
        self,
        product_name: str,
        manufacturer: Optional[str],
        ingredients: Sequence[str],
    ) -> Outcome:
        """
        Verify OCR-read label data against the food DB.
        
        Args:
            product_name: Product name read from the label
            manufacturer: Manufacturer read from the label (optional)
            ingredients: Ingredient names in label order
            
        Returns:
            VerificationResult if the product was found, NotFoundResult if not,
            ErrorResult for any unexpected failure. Never raises.
        """
        try:
            logger.info(f"Verifying label: product={product_name!r}, manufacturer={manufacturer!r}")
            
            record = self.client.find_product(product_name)
            if record is None:
                return NotFoundResult(
                    message=MESSAGE_NOT_FOUND,
                    original_data=OriginalData(
                        product_name=product_name,
                        manufacturer=manufacturer,
                        ingredients=list(ingredients),
                    ),
                    suggestion=SUGGESTION_NOT_FOUND,
                )
            
            reconciliation = reconcile(ingredients, record.raw_ingredient_text or "")
            corrections = [
                CorrectionItem(
                    original=c.original,
                    corrected=c.corrected,
                    confidence=c.confidence_score,
                )
                for c in reconciliation.corrections
            ]
            
            logger.info(f"Verification complete: {len(corrections)} correction(s)")
            
            return VerificationResult(
                product_info=ProductInfo(
                    name=record.product_name or product_name,
                    manufacturer=record.manufacturer_name or manufacturer,
                    report_number=record.report_number,
                ),
                ingredients=IngredientsView(
                    original=list(ingredients),
                    verified=reconciliation.verified,
                    from_db=reconciliation.db_tokens,
                ),
                corrections=corrections,
                confidence=self._overall_confidence(corrections),
                message=self._summary_message(corrections),
            )
        except Exception as e:
            logger.exception(f"Verification failed: {e}")
            return ErrorResult(message=MESSAGE_ERROR.format(error=e))
    
    def verify_payload(
        self,
        product_name: str,
        manufacturer: Optional[str],
        ingredients: Sequence[str],
    ) -> Dict[str, Any]:
        """Verify and return the JSON-ready payload with wire field names."""
        return self.verify(product_name, manufacturer, ingredients).model_dump(by_alias=True)
    
    @staticmethod
    def _overall_confidence(corrections: List[CorrectionItem]) -> int:
        return CONFIDENCE_ALL_CORRECT if not corrections else CONFIDENCE_CORRECTED
    
    @staticmethod
    def _summary_message(corrections: List[CorrectionItem]) -> str:
        if not corrections:
            return MESSAGE_ALL_CORRECT
        return MESSAGE_CORRECTED.format(count=len(corrections))
