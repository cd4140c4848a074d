from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class VerificationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    ok: bool
    # Reported even when ok is False; None when the request carried no signature
    shop: Optional[str] = None


class ShopCredential(BaseModel):
    model_config = ConfigDict(frozen=True)

    shop: str
    access_token: str
    is_online: bool = False
    expires: Optional[datetime] = None


class LookupRequest(BaseModel):
    """Identifiers submitted by the storefront, bare ids or gid:// ids."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    product_ids: List[str] = Field(default_factory=list, alias="productIds")
    variant_ids: List[str] = Field(default_factory=list, alias="variantIds")


class LookupResponse(BaseModel):
    productMap: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    variantMap: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
