"""
Route aggregation module.

Health routes mount at root; the app proxy router is built from settings
in main.py because it needs the allowed origin at construction.
"""
from app.routes.app_proxy import build_app_proxy_router
from app.routes.health import router as health_router

__all__ = ["build_app_proxy_router", "health_router"]
