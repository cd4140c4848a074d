"""
Health routes — liveness and readiness probes.

Readiness only checks that the required settings are present; it does not
call Supabase or Shopify.
"""
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.core.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Basic health check endpoint."""
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check():
    checks = {
        "shopify_api_secret": bool(settings.shopify_api_secret),
        "supabase": bool(settings.supabase_url and settings.supabase_service_role_key),
    }
    ready = all(checks.values())
    return JSONResponse(
        status_code=200 if ready else 503,
        content={
            "status": "ready" if ready else "not_ready",
            "checks": checks,
            "shopify_api_version": settings.shopify_api_version,
        },
    )
