"""
Sign an app proxy URL for local testing.

Adds the parameters Shopify sends with every proxied request, signs them
with SHOPIFY_API_SECRET (from the environment or .env) and prints the URL.

Usage:
    python -m scripts.sign_app_proxy_url --shop my-store.myshopify.com \\
        --param productIds=123,456

    # POST form
    curl -X POST "$(python -m scripts.sign_app_proxy_url --shop my-store.myshopify.com)" \\
      -H "Content-Type: application/json" \\
      -d '{"productIds": ["123"], "variantIds": ["456"]}'
"""

import argparse
import logging
import sys
import time
from urllib.parse import urlencode

from app.core.app_proxy_auth import SIGNATURE_PARAM, compute_app_proxy_signature
from app.core.config import settings

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def build_signed_url(base_url: str, params: dict, secret: str) -> str:
    signed = dict(params)
    signed[SIGNATURE_PARAM] = compute_app_proxy_signature(params, secret)
    return f"{base_url}?{urlencode(signed)}"


def _parse_param(value: str) -> tuple[str, str]:
    key, sep, val = value.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected key=value, got {value!r}")
    return key, val


def main() -> None:
    parser = argparse.ArgumentParser(description="Sign an app proxy request URL")
    parser.add_argument("--shop", required=True, help="Shop domain, e.g. my-store.myshopify.com")
    parser.add_argument(
        "--base-url",
        default="http://localhost:8000/app-proxy/location-stock/lookup",
        help="Backend URL to sign",
    )
    parser.add_argument("--path-prefix", default="/apps/location-stock")
    parser.add_argument(
        "--param",
        action="append",
        type=_parse_param,
        default=[],
        help="Extra key=value query parameter (repeatable)",
    )
    args = parser.parse_args()

    secret = settings.shopify_api_secret
    if not secret:
        logger.error("SHOPIFY_API_SECRET is not set")
        sys.exit(1)

    params = {
        "shop": args.shop,
        "path_prefix": args.path_prefix,
        "timestamp": str(int(time.time())),
        "logged_in_customer_id": "",
    }
    params.update(dict(args.param))

    print(build_signed_url(args.base_url, params, secret))


if __name__ == "__main__":
    main()
