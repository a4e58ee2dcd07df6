"""Main API router: combines all endpoint routers."""

from fastapi import APIRouter

from infivalidator.api.health import router as health_router
from infivalidator.api.sanitize import router as sanitize_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Validation and sanitization
api_router.include_router(sanitize_router, tags=["Sanitize"])
