"""
Pytest configuration and shared fixtures for the app proxy backend tests.

Provides settings, mocked clients/stores/services, signing helpers and
sample Admin API payloads.
"""
from urllib.parse import urlencode
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.core.app_proxy_auth import compute_app_proxy_signature


TEST_SECRET = "test-app-proxy-secret"
TEST_SHOP = "test-store.myshopify.com"


# ---------------------------------------------------------------------------
# Signing helpers
# ---------------------------------------------------------------------------

def _sign_params(params: dict, secret: str = TEST_SECRET) -> dict:
    signed = dict(params)
    signed["signature"] = compute_app_proxy_signature(params, secret)
    return signed


@pytest.fixture
def sign_params():
    """Return a copy of params with a valid app proxy signature added."""
    return _sign_params


@pytest.fixture
def signed_query():
    """Build a signed, url-encoded query string from params."""
    def _build(params: dict, secret: str = TEST_SECRET) -> str:
        return urlencode(_sign_params(params, secret))
    return _build


@pytest.fixture
def proxy_params():
    """Parameters Shopify adds to every app proxy request."""
    return {
        "shop": TEST_SHOP,
        "path_prefix": "/apps/location-stock",
        "timestamp": "1760860800",
        "logged_in_customer_id": "",
    }


# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_settings():
    """Settings object with test defaults (no real credentials)."""
    from app.core.config import Settings
    return Settings(
        shopify_api_secret=TEST_SECRET,
        shopify_api_version="2026-01",
        shopify_request_timeout=5.0,
        app_proxy_allowed_origin="*",
        supabase_url="https://test.supabase.co",
        supabase_service_role_key="test-supabase-key",
        shopify_session_table="shopify_sessions",
    )


# ---------------------------------------------------------------------------
# Clients (mocked)
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_supabase_client():
    """Mocked SupabaseClient with a chainable table builder."""
    client = MagicMock()
    client.session_table = "shopify_sessions"
    mock_table = MagicMock()
    for method in ("select", "eq", "order", "limit"):
        getattr(mock_table, method).return_value = mock_table
    mock_table.execute.return_value = MagicMock(data=[])
    client.client.table.return_value = mock_table
    return client


@pytest.fixture
def mock_shopify_client():
    """Mocked ShopifyClient (Admin API transport only)."""
    client = MagicMock()
    client.lookup_nodes = AsyncMock(return_value=([], []))
    return client


# ---------------------------------------------------------------------------
# Stores / services (mocked)
# ---------------------------------------------------------------------------

@pytest.fixture
def offline_credential():
    from app.schemas.app_proxy import ShopCredential
    return ShopCredential(shop=TEST_SHOP, access_token="shpat_offline", is_online=False)


@pytest.fixture
def mock_session_store():
    """Mocked SessionStore with no sessions on file."""
    store = MagicMock()
    store.find_offline_session = AsyncMock(return_value=None)
    store.find_latest_session = AsyncMock(return_value=None)
    return store


@pytest.fixture
def mock_resolver(offline_credential):
    """Mocked CredentialResolver returning an offline credential."""
    resolver = MagicMock()
    resolver.resolve = AsyncMock(return_value=offline_credential)
    return resolver


# ---------------------------------------------------------------------------
# Sample Admin API data
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_product_node():
    return {
        "id": "gid://shopify/Product/123",
        "title": "Trail Runner",
        "handle": "trail-runner",
        "status": "ACTIVE",
        "totalInventory": 42,
    }


@pytest.fixture
def sample_variant_node():
    return {
        "id": "gid://shopify/ProductVariant/789",
        "title": "Size 10",
        "sku": "TR-10",
        "inventoryQuantity": 7,
        "product": {"id": "gid://shopify/Product/123", "title": "Trail Runner", "handle": "trail-runner"},
    }


@pytest.fixture
def sample_graphql_payload(sample_product_node, sample_variant_node):
    """Admin API response for productIds=[123, 456], variantIds=[789]."""
    return {
        "data": {
            "shop": {"currencyCode": "USD"},
            "products": [sample_product_node, None],
            "variants": [sample_variant_node],
        },
        "extensions": {"cost": {"requestedQueryCost": 4}},
    }
