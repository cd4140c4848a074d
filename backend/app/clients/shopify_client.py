import logging
from typing import Any, Dict, List, Optional, Tuple
import httpx

from app.core.config import Settings
from app.core.exceptions import (
    ConfigurationError,
    UpstreamSemanticError,
    UpstreamTransportError,
)

logger = logging.getLogger("shopify_client")

# shop { currencyCode } keeps the document valid when both id lists are empty
NODE_LOOKUP_QUERY = """
    query Lookup($productIds: [ID!]!, $variantIds: [ID!]!) {
        shop { currencyCode }

        products: nodes(ids: $productIds) {
            ... on Product {
                id
                title
                handle
                status
                totalInventory
            }
        }

        variants: nodes(ids: $variantIds) {
            ... on ProductVariant {
                id
                title
                sku
                inventoryQuantity
                product { id title handle }
            }
        }
    }
"""


class ShopifyClient:
    """Admin API GraphQL transport. The shop and its token are supplied per call."""

    def __init__(self, settings: Settings) -> None:
        self._api_version = settings.shopify_api_version
        self._timeout = settings.shopify_request_timeout
        logger.info("ShopifyClient initialized: api_version=%s timeout=%s", self._api_version, self._timeout)

    @staticmethod
    def _normalize_store_domain(domain: Optional[str]) -> Optional[str]:
        """
        Normalize Shopify store domain to ensure it has .myshopify.com suffix.

        Handles these formats:
        - "my-store" -> "my-store.myshopify.com"
        - "my-store.myshopify.com" -> "my-store.myshopify.com" (unchanged)
        - "https://my-store.myshopify.com" -> "my-store.myshopify.com" (strips protocol)
        """
        if not domain:
            return domain

        domain = domain.replace("https://", "").replace("http://", "")
        domain = domain.rstrip("/")

        if not domain.endswith(".myshopify.com"):
            domain = f"{domain}.myshopify.com"

        return domain

    def _graphql_url(self, shop: str) -> str:
        store_domain = self._normalize_store_domain(shop)
        if not store_domain:
            raise ConfigurationError("Shop domain missing for Admin API call")
        return f"https://{store_domain}/admin/api/{self._api_version}/graphql.json"

    async def _call_shopify_graphql(
        self,
        shop: str,
        access_token: str,
        query: str,
        variables: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        url = self._graphql_url(shop)
        headers = {
            "X-Shopify-Access-Token": access_token,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }
        body = {"query": query, "variables": variables or {}}
        logger.info("shopify graphql request shop=%s api_version=%s", shop, self._api_version)

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                resp = await client.post(url, headers=headers, json=body)
        except httpx.HTTPError as exc:
            logger.info("shopify graphql transport failure shop=%s error=%s", shop, exc)
            raise UpstreamTransportError(status=None, body=str(exc)) from exc

        logger.info("shopify graphql response status=%s shop=%s", resp.status_code, shop)

        try:
            payload = resp.json()
        except ValueError:
            payload = None

        if not 200 <= resp.status_code < 300 or not isinstance(payload, dict):
            raise UpstreamTransportError(
                status=resp.status_code,
                body=payload if payload is not None else resp.text,
            )

        if payload.get("errors"):
            raise UpstreamSemanticError(payload["errors"])
        return payload

    async def lookup_nodes(
        self,
        shop: str,
        access_token: str,
        product_ids: List[str],
        variant_ids: List[str],
    ) -> Tuple[List[Any], List[Any]]:
        """
        Fetch products and variants by global id in a single query.

        Returns the two positional node lists; entries are None for ids
        the Admin API could not resolve.
        """
        data = await self._call_shopify_graphql(
            shop,
            access_token,
            NODE_LOOKUP_QUERY,
            {"productIds": product_ids, "variantIds": variant_ids},
        )
        nodes = data.get("data") or {}
        return nodes.get("products") or [], nodes.get("variants") or []
