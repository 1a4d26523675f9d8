"""
FastAPI application for the document text extraction service.

Provides endpoints for:
- Liveness and health checks
- Extracting plain text from uploaded PDF and DOCX documents
"""

import logging

from contextlib import asynccontextmanager

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from . import __version__
from .config import get_settings
from .models import HealthResponse
from .routers import extract
from .services.extraction_service import get_extraction_service

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    logger.info("Starting Text Extraction Service...")
    get_extraction_service()
    if not get_settings().api_key:
        logger.warning("API_KEY is not set; all /extract requests will be rejected")
    logger.info("Services initialized successfully")
    yield
    logger.info("Shutting down Text Extraction Service...")


# Create FastAPI application
app = FastAPI(
    title="Text Extraction API",
    description="Plain text extraction from PDF and DOCX documents",
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)

# Configure CORS for browser clients
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Health Endpoints
# =============================================================================


@app.get("/", response_class=PlainTextResponse)
async def root() -> str:
    """Root endpoint - liveness check."""
    return "Text extractor running"


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy")


# =============================================================================
# Include Routers
# =============================================================================

app.include_router(extract.router)


# =============================================================================
# Exception Handlers
# =============================================================================


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request, exc: StarletteHTTPException):
    """Render HTTP errors as {"error": <message>}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request, exc: RequestValidationError):
    """Render request validation failures as {"error": <message>}."""
    logger.info("Request validation failed: %s", exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request"},
    )
