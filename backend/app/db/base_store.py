"""
Base store — shared read helper for Supabase-backed stores.

Stores here are read-only: the session table is written by the app's
OAuth install flow, never by the proxy.
"""

import asyncio
import logging
from typing import Any, Dict, List

from postgrest.exceptions import APIError

from app.clients.supabase_client import SupabaseClient
from app.core.exceptions import SessionStoreError

logger = logging.getLogger("base_store")


class BaseStore:
    """Base class for Supabase stores providing a filtered select."""

    def __init__(self, supabase_client: SupabaseClient) -> None:
        self._supabase_client = supabase_client

    @property
    def _client(self):
        """Get the Supabase client instance."""
        return self._supabase_client.client

    async def _select(
        self,
        table: str,
        columns: str = "*",
        filters: Dict[str, Any] | None = None,
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> List[Dict[str, Any]]:
        """Select rows from a table with optional equality filters, ordering and limit."""
        try:
            query = self._client.table(table).select(columns)
            if filters:
                for key, value in filters.items():
                    query = query.eq(key, value)
            if order_by:
                query = query.order(order_by, desc=descending)
            if limit is not None:
                query = query.limit(limit)
            # supabase-py is synchronous; keep the request off the event loop
            response = await asyncio.to_thread(query.execute)
            return response.data or []
        except APIError as e:
            logger.info("supabase error table=%s detail=%s", table, str(e))
            raise SessionStoreError() from e
