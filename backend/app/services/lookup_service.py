import logging
from typing import Any, Dict, Iterable

from app.clients.shopify_client import ShopifyClient
from app.core.exceptions import MissingAccessTokenError
from app.schemas.app_proxy import LookupRequest, LookupResponse
from app.services.credential_resolver import CredentialResolver
from app.utils.shopify_gid import PRODUCT, PRODUCT_VARIANT, normalize_gids


def _index_by_id(nodes: Iterable[Any]) -> Dict[str, Dict[str, Any]]:
    """Key nodes by their own id, skipping nulls and nodes without an id."""
    index: Dict[str, Dict[str, Any]] = {}
    for node in nodes:
        if isinstance(node, dict) and node.get("id"):
            index[node["id"]] = node
    return index


class AppProxyLookupService:
    def __init__(self, client: ShopifyClient, resolver: CredentialResolver) -> None:
        self._client = client
        self._resolver = resolver
        self._logger = logging.getLogger("lookup_service")

    async def lookup(self, shop: str, request: LookupRequest) -> LookupResponse:
        """
        Resolve products and variants for an authenticated shop.

        1. Normalize both id lists to global ids (empty ids are dropped)
        2. Nothing left → empty maps, the Admin API is not called
        3. Resolve the shop's access token → MissingAccessTokenError if none
        4. One batched nodes query for both lists
        5. Key the returned nodes by id; unresolved ids are simply absent

        Upstream failures propagate as UpstreamTransportError / UpstreamSemanticError.
        """
        product_ids = normalize_gids(request.product_ids, PRODUCT)
        variant_ids = normalize_gids(request.variant_ids, PRODUCT_VARIANT)

        if not product_ids and not variant_ids:
            self._logger.info("lookup empty shop=%s", shop)
            return LookupResponse(productMap={}, variantMap={})

        credential = await self._resolver.resolve(shop)
        if credential is None:
            raise MissingAccessTokenError(shop)

        products, variants = await self._client.lookup_nodes(
            shop,
            credential.access_token,
            product_ids,
            variant_ids,
        )

        product_map = _index_by_id(products)
        variant_map = _index_by_id(variants)
        self._logger.info(
            "lookup done shop=%s products=%s/%s variants=%s/%s",
            shop,
            len(product_map),
            len(product_ids),
            len(variant_map),
            len(variant_ids),
        )
        return LookupResponse(productMap=product_map, variantMap=variant_map)
