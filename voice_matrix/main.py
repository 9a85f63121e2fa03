"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from voice_matrix.api.middleware import RequestContextMiddleware
from voice_matrix.api.routes import api_router
from voice_matrix.domain.errors import (
    AssistantNotFound,
    DeploymentFailed,
    TemplateNotFound,
    ValidationFailed,
)
from voice_matrix.logging_config import setup_logging
from voice_matrix.persistence.database import init_models
from voice_matrix.settings import settings

# Setup logging
setup_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Production schema is managed by alembic
    if settings.environment != "production":
        await init_models()
    logger.info("Application started", extra={"environment": settings.environment})
    yield


# Create FastAPI app
app = FastAPI(
    title="Voice Matrix API",
    description="Template-driven voice assistant configuration and deployment",
    version="0.1.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestContextMiddleware)

# Include API routes
app.include_router(api_router, prefix=settings.api_v1_prefix)


@app.exception_handler(ValidationFailed)
async def validation_failed_handler(request: Request, exc: ValidationFailed) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": str(exc),
            "violations": [v.model_dump(mode="json") for v in exc.violations],
        },
    )


@app.exception_handler(TemplateNotFound)
@app.exception_handler(AssistantNotFound)
async def not_found_handler(request: Request, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


@app.exception_handler(DeploymentFailed)
async def deployment_failed_handler(request: Request, exc: DeploymentFailed) -> JSONResponse:
    logger.warning(
        "Deployment request failed",
        extra={"reason": exc.reason, "upstream_status": exc.status_code},
    )
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": exc.reason})


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Voice Matrix API",
        "version": "0.1.0",
        "docs": "/docs",
    }
