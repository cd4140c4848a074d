"""
Lazy DI container — singleton access to clients, stores, and services.

Nothing is built at import time, so the app starts without Supabase
credentials and routes can swap these getters via dependency_overrides.
"""

from functools import lru_cache

from app.core.config import settings
from app.clients.supabase_client import SupabaseClient
from app.clients.shopify_client import ShopifyClient
from app.db.session_store import SessionStore
from app.services.credential_resolver import CredentialResolver
from app.services.lookup_service import AppProxyLookupService


# -- Clients ---------------------------------------------------------------

@lru_cache(maxsize=1)
def get_supabase_client():
    return SupabaseClient(settings)


@lru_cache(maxsize=1)
def get_shopify_client():
    return ShopifyClient(settings)


# -- DB Stores -------------------------------------------------------------

@lru_cache(maxsize=1)
def get_session_store():
    return SessionStore(get_supabase_client())


# -- Services --------------------------------------------------------------

@lru_cache(maxsize=1)
def get_credential_resolver():
    return CredentialResolver(get_session_store())


@lru_cache(maxsize=1)
def get_lookup_service():
    return AppProxyLookupService(
        client=get_shopify_client(),
        resolver=get_credential_resolver(),
    )
