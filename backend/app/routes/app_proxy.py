"""
App proxy routes — storefront product/variant lookup.

Shopify forwards /apps/<subpath>/... on the storefront to these routes with a
signed query string. GET takes comma-separated ids in the query, POST takes a
JSON body, both return {"productMap": {...}, "variantMap": {...}}.
"""
import logging

from fastapi import APIRouter, Depends, Query, Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.container import get_lookup_service
from app.core.app_proxy_auth import require_app_proxy_shop
from app.core.config import Settings
from app.core.exceptions import InvalidLookupRequestError
from app.core.middleware import cors_headers, preflight_headers
from app.schemas.app_proxy import LookupRequest, LookupResponse
from app.services.lookup_service import AppProxyLookupService
from app.utils.shopify_gid import split_id_list

logger = logging.getLogger(__name__)

LOOKUP_PATH = "/app-proxy/location-stock/lookup"


async def _read_lookup_body(request: Request) -> LookupRequest:
    try:
        body = await request.json()
    except ValueError as exc:
        raise InvalidLookupRequestError(
            [{"type": "json_invalid", "loc": ["body"], "msg": "Request body is not valid JSON"}]
        ) from exc
    try:
        return LookupRequest.model_validate(body)
    except ValidationError as exc:
        raise InvalidLookupRequestError(exc.errors(include_url=False, include_context=False)) from exc


def build_app_proxy_router(config: Settings) -> APIRouter:
    router = APIRouter(tags=["app-proxy"])
    allowed_origin = config.app_proxy_allowed_origin
    shop_dependency = require_app_proxy_shop(config)

    @router.get(LOOKUP_PATH, response_model=LookupResponse)
    async def lookup_by_query(
        productIds: str = Query(default=""),
        variantIds: str = Query(default=""),
        shop: str = Depends(shop_dependency),
        service: AppProxyLookupService = Depends(get_lookup_service),
    ):
        """Look up products and variants given as comma-separated query parameters."""
        payload = LookupRequest(
            product_ids=split_id_list(productIds),
            variant_ids=split_id_list(variantIds),
        )
        return await service.lookup(shop, payload)

    @router.post(LOOKUP_PATH, response_model=LookupResponse)
    async def lookup_by_body(
        request: Request,
        shop: str = Depends(shop_dependency),
        service: AppProxyLookupService = Depends(get_lookup_service),
    ):
        """
        Look up products and variants given as arrays in a JSON body.

        The body is only read once the signature has been verified.
        """
        payload = await _read_lookup_body(request)
        result = await service.lookup(shop, payload)
        return JSONResponse(
            content=result.model_dump(),
            headers=cors_headers(request.headers.get("origin"), allowed_origin),
        )

    @router.options(LOOKUP_PATH)
    async def lookup_preflight(request: Request):
        return Response(
            status_code=204,
            headers=preflight_headers(request.headers.get("origin"), allowed_origin),
        )

    return router
