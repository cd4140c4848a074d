"""
Shopify global id helpers.

Turns the bare numeric ids a storefront knows about into Admin API global
ids (gid://shopify/Product/123). Ids that already carry the gid:// scheme
are passed through untouched, even when the embedded kind differs from the
list they arrived in.
"""

from typing import Iterable, List, Literal, Optional

GID_SCHEME = "gid://"
GID_NAMESPACE = "shopify"

PRODUCT = "Product"
PRODUCT_VARIANT = "ProductVariant"

GidKind = Literal["Product", "ProductVariant"]


def normalize_gid(raw_id: Optional[str], kind: GidKind) -> Optional[str]:
    """
    Convert a raw id into a global id.

    Returns None for empty input so callers can filter it out.
    """
    if not raw_id:
        return None
    if raw_id.startswith(GID_SCHEME):
        return raw_id
    return f"{GID_SCHEME}{GID_NAMESPACE}/{kind}/{raw_id}"


def normalize_gids(raw_ids: Iterable[str], kind: GidKind) -> List[str]:
    """Normalize every id of one kind, dropping the empty ones. Order and duplicates are kept."""
    gids = []
    for raw_id in raw_ids:
        gid = normalize_gid(raw_id.strip() if raw_id else raw_id, kind)
        if gid:
            gids.append(gid)
    return gids


def split_id_list(value: Optional[str]) -> List[str]:
    """Split a comma-separated query parameter into trimmed, non-empty ids."""
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]
