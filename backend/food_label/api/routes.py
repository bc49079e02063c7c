"""API route definitions."""

from fastapi import APIRouter
import logging

from ..models import (
    VerifyRequest,
    HealthResponse,
)
from ..services import VerificationService, tool_descriptor
from .. import __version__

logger = logging.getLogger(__name__)
router = APIRouter()

# Initialize services
verification_service = VerificationService()


@router.get("/health", response_model=HealthResponse, tags=["System"])
async def health_check():
    """Check API health and food DB configuration."""
    return HealthResponse(
        status="ok",
        version=__version__,
        food_db_configured=verification_service.client.is_configured,
    )


@router.get("/tools", tags=["System"])
async def list_tools():
    """List the tools this server exposes, with their input schemas."""
    return {"tools": [tool_descriptor()]}


@router.post(
    "/verify",
    tags=["Verification"]
)
def verify_food_label(request: VerifyRequest):
    """
    Verify OCR-read label data against the public food DB.
    
    Ingredient names that closely match the DB spelling are corrected;
    the rest are returned unchanged. Failures are reported in the body.
    """
    logger.info(f"POST /verify: {request.product_name!r} ({len(request.ingredients)} ingredients)")
    
    # Sync route: the DB lookup blocks, so FastAPI runs it in the threadpool
    return verification_service.verify_payload(
        request.product_name,
        request.manufacturer,
        request.ingredients,
    )
