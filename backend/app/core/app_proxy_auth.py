"""
App proxy authentication — Shopify app proxy signature verification.

Shopify forwards storefront requests to the app with every query parameter
signed by the app's shared secret. The signed message is built by sorting
the parameter keys and concatenating ``key=value`` pairs with no separator
at all, e.g. ``logged_in_customer_id=path_prefix=/apps/stockshop=x.myshopify.com``.
This has to match Shopify's own signer byte for byte.
"""
import hashlib
import hmac
import logging
from typing import Awaitable, Callable, Mapping, Optional
from urllib.parse import parse_qsl, urlsplit

from fastapi import Request

from app.core.config import Settings
from app.core.exceptions import AppProxyUnauthorizedError, ConfigurationError
from app.schemas.app_proxy import VerificationResult

logger = logging.getLogger(__name__)

SIGNATURE_PARAM = "signature"
SHOP_PARAM = "shop"


def build_canonical_message(params: Mapping[str, str]) -> str:
    """Concatenate ``key=value`` for every key except the signature, in sorted key order."""
    return "".join(
        f"{key}={params[key]}" for key in sorted(params) if key != SIGNATURE_PARAM
    )


def compute_app_proxy_signature(params: Mapping[str, str], secret: str) -> str:
    """HMAC-SHA256 of the canonical message as lowercase hex."""
    message = build_canonical_message(params)
    return hmac.new(secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha256).hexdigest()


def _parse_query(request_url: str) -> Optional[dict[str, str]]:
    try:
        query = urlsplit(request_url).query
        # Duplicate keys collapse to the last value
        return dict(parse_qsl(query, keep_blank_values=True))
    except (ValueError, TypeError, AttributeError):
        return None


def verify_app_proxy_signature(request_url: str, secret: Optional[str]) -> VerificationResult:
    """
    Verify the ``signature`` query parameter of an app proxy request.

    Never raises: a malformed URL, a missing signature or a missing secret
    is simply not ok. The shop is reported whenever a signature was present
    and checked, matched or not.
    """
    if not secret:
        return VerificationResult(ok=False, shop=None)

    params = _parse_query(request_url)
    if params is None:
        return VerificationResult(ok=False, shop=None)

    signature = params.pop(SIGNATURE_PARAM, None)
    if not signature:
        return VerificationResult(ok=False, shop=None)

    digest = compute_app_proxy_signature(params, secret)

    # Length is not secret; compare_digest only runs on equal-length inputs
    ok = len(digest) == len(signature) and hmac.compare_digest(
        digest.encode("utf-8"), signature.encode("utf-8")
    )
    return VerificationResult(ok=ok, shop=params.get(SHOP_PARAM))


def request_path(request: Request) -> str:
    return request.scope.get("path", "")


def _request_target(request: Request) -> str:
    # request.url decodes the raw query string as strict UTF-8 and would raise
    # on undecodable bytes; those are replaced here and can never verify.
    raw_query = request.scope.get("query_string", b"")
    return f"{request_path(request)}?{raw_query.decode('utf-8', errors='replace')}"


def require_app_proxy_shop(config: Settings) -> Callable[[Request], Awaitable[str]]:
    """
    Build a FastAPI dependency that verifies the app proxy signature with
    ``config.shopify_api_secret`` and returns the shop domain.

    Usage:
        shop_dependency = require_app_proxy_shop(settings)

        @router.get("/app-proxy/thing")
        async def thing(shop: str = Depends(shop_dependency)):
            ...
    """

    async def dependency(request: Request) -> str:
        secret = config.shopify_api_secret
        if not secret:
            raise ConfigurationError("SHOPIFY_API_SECRET is not configured")

        result = verify_app_proxy_signature(_request_target(request), secret)
        if not result.ok or not result.shop:
            logger.warning(
                "App proxy signature rejected - path=%s ok=%s shop=%s",
                request_path(request),
                result.ok,
                result.shop,
            )
            raise AppProxyUnauthorizedError()

        logger.debug("App proxy signature accepted - shop=%s", result.shop)
        return result.shop

    return dependency
