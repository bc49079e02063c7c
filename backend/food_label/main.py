"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import router
from .config import get_settings
from . import __version__

# Configure logging
logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager - handles startup and shutdown."""
    # Startup
    logger.info("Starting Food Label Checker API...")
    settings = get_settings()
    
    # HTTP mode keeps serving without a key; lookups degrade to "not found"
    if not settings.food_db_api_key:
        logger.warning("FOOD_DB_API_KEY is not set - check your .env file")
    logger.info(f"Food DB API URL: {settings.food_db_api_url or '(not set)'}")
    
    logger.info(f"API ready - Version {__version__}")
    
    yield
    
    # Shutdown
    logger.info("Shutting down Food Label Checker API...")


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    
    app = FastAPI(
        title=settings.app_name,
        description="""
## Food Label Verification API

Checks OCR-extracted food label data against the public food product database
(공공데이터포털 식품원재료정보).

### Features
- **Product Lookup**: Find the product by name in the food DB
- **Ingredient Correction**: Fix OCR misreads of ingredient names by edit-distance matching
- **Tool Descriptor**: `/tools` describes the `verify_food_label` tool for agent clients

### Quick Start
1. Use `/health` to check API status
2. Use `/verify` with `productName`, `manufacturer` and `ingredients`
        """,
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    
    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    
    # Include routes
    app.include_router(router, prefix="/api/v1")
    
    # Root endpoint with server info
    @app.get("/", include_in_schema=False)
    async def root():
        return {
            "name": "food-label-checker",
            "version": __version__,
            "description": "식품 표기 정보 검증 서버",
            "endpoints": {
                "verify": "/api/v1/verify",
                "tools": "/api/v1/tools",
                "health": "/api/v1/health",
            },
            "docs": "/docs"
        }
    
    return app


# Create app instance
app = create_app()
