import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel


load_dotenv()


def _split_origins(raw: str) -> str | list[str]:
    """A single origin (or "*") stays a string, a comma-separated value becomes a list."""
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    if len(origins) == 1:
        return origins[0]
    return origins or "*"


class Settings(BaseModel):
    # Shopify app proxy
    shopify_api_secret: Optional[str] = os.getenv("SHOPIFY_API_SECRET")
    shopify_api_version: str = os.getenv("SHOPIFY_API_VERSION", "2026-01")
    shopify_request_timeout: float = float(os.getenv("SHOPIFY_REQUEST_TIMEOUT", "30"))
    # "*" or an explicit origin; several origins may be given comma-separated
    app_proxy_allowed_origin: str | list[str] = _split_origins(
        os.getenv("APP_PROXY_ALLOWED_ORIGIN", "*")
    )

    # Supabase (Shopify session storage)
    supabase_url: str | None = os.getenv("SUPABASE_URL")
    supabase_service_role_key: str | None = os.getenv("SUPABASE_SERVICE_ROLE_KEY")
    shopify_session_table: str = os.getenv("SHOPIFY_SESSION_TABLE", "shopify_sessions")


settings = Settings()
