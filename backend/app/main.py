import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import settings
from app.core.middleware import register_exception_handlers
from app.routes import build_app_proxy_router, health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan event handler.

    On startup, log the Admin API version and warn about missing settings.
    Clients are created lazily by app.container on first use.
    """
    logger.info("=== App Proxy Backend Starting ===")
    logger.info(
        "Admin API version=%s allowed_origin=%s",
        settings.shopify_api_version,
        settings.app_proxy_allowed_origin,
    )
    if not settings.shopify_api_secret:
        logger.warning("SHOPIFY_API_SECRET is not set; app proxy requests will fail")
    if not settings.supabase_url or not settings.supabase_service_role_key:
        logger.warning("Supabase settings missing; access tokens cannot be resolved")

    logger.info("=== App Proxy Backend Ready ===")

    yield

    logger.info("=== App Proxy Backend Shutting Down ===")


app = FastAPI(title="App Proxy Lookup Backend", lifespan=lifespan)
logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")

register_exception_handlers(app)

app.include_router(health_router)
app.include_router(build_app_proxy_router(settings))
