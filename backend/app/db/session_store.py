"""
Session store — read access to persisted Shopify sessions.

Each row is one Shopify session: an offline session (long-lived, one per
shop) or an online session (per staff user, with an expiry).
"""

import logging
from typing import Any, Dict, Optional

from app.clients.supabase_client import SupabaseClient
from app.db.base_store import BaseStore
from app.schemas.app_proxy import ShopCredential

logger = logging.getLogger("session_store")

SESSION_COLUMNS = "shop,is_online,access_token,expires"


class SessionStore(BaseStore):
    """Lookups against the Shopify session table, filtered by shop."""

    def __init__(self, supabase_client: SupabaseClient) -> None:
        super().__init__(supabase_client)
        self._table = supabase_client.session_table

    @staticmethod
    def _to_credential(row: Dict[str, Any]) -> Optional[ShopCredential]:
        token = row.get("access_token")
        if not token:
            return None
        return ShopCredential(
            shop=row.get("shop"),
            access_token=token,
            is_online=bool(row.get("is_online")),
            expires=row.get("expires"),
        )

    async def find_offline_session(self, shop: str) -> Optional[ShopCredential]:
        """Offline session for the shop, if one with a token exists."""
        rows = await self._select(
            self._table,
            columns=SESSION_COLUMNS,
            filters={"shop": shop, "is_online": "false"},
        )
        for row in rows:
            credential = self._to_credential(row)
            if credential:
                return credential
        return None

    async def find_latest_session(self, shop: str) -> Optional[ShopCredential]:
        """The session of any kind with the latest expiry for the shop."""
        rows = await self._select(
            self._table,
            columns=SESSION_COLUMNS,
            filters={"shop": shop},
            order_by="expires",
            descending=True,
            limit=1,
        )
        if not rows:
            return None
        return self._to_credential(rows[0])
