"""
Error rendering and CORS headers for the FastAPI application.

All error responses are JSON objects with at least an ``error`` field.
Extracted from main.py to keep app factory slim.
"""
import logging
from typing import Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.exceptions import AppProxyException, ServerError

logger = logging.getLogger(__name__)


async def _app_proxy_exception_handler(request: Request, exc: AppProxyException) -> JSONResponse:
    if isinstance(exc, ServerError):
        logger.error("app proxy error path=%s status=%s error=%s", request.scope.get("path", ""), exc.status_code, exc.error)
    else:
        logger.info("app proxy error path=%s status=%s error=%s", request.scope.get("path", ""), exc.status_code, exc.error)
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Render domain and routing errors as ``{"error": ...}`` JSON."""
    app.add_exception_handler(AppProxyException, _app_proxy_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)


def cors_headers(request_origin: Optional[str], allowed_origin: str | list[str]) -> Dict[str, str]:
    """
    Build the cross-origin headers for a success response.

    A string setting is sent as-is ("*" or a fixed origin). A list echoes the
    request's Origin back only when it is one of the allowed origins.
    """
    if isinstance(allowed_origin, str):
        return {"Access-Control-Allow-Origin": allowed_origin}
    if request_origin and request_origin in allowed_origin:
        return {"Access-Control-Allow-Origin": request_origin, "Vary": "Origin"}
    return {}


def preflight_headers(request_origin: Optional[str], allowed_origin: str | list[str]) -> Dict[str, str]:
    """Headers for an OPTIONS preflight answer."""
    headers = cors_headers(request_origin, allowed_origin)
    headers.update(
        {
            "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
            "Access-Control-Allow-Headers": "Content-Type",
        }
    )
    return headers
