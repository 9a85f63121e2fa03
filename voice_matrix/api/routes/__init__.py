"""API routes."""

from fastapi import APIRouter

from voice_matrix.api.routes import assistants, templates

api_router = APIRouter()

api_router.include_router(templates.router, prefix="/templates", tags=["templates"])
api_router.include_router(assistants.router, prefix="/assistants", tags=["assistants"])
