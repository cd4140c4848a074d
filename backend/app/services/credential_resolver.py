import logging
from typing import Optional

from app.db.session_store import SessionStore
from app.schemas.app_proxy import ShopCredential


class CredentialResolver:
    def __init__(self, store: SessionStore) -> None:
        self._store = store
        self._logger = logging.getLogger("credential_resolver")

    async def resolve(self, shop: str) -> Optional[ShopCredential]:
        """
        Pick the access token to call the Admin API with.

        Priority:
        1. The shop's offline session
        2. Otherwise the session expiring last, online or not
        3. Otherwise None (the app is not installed for this shop)
        """
        credential = await self._store.find_offline_session(shop)
        if credential:
            self._logger.info("credential resolved shop=%s kind=offline", shop)
            return credential

        credential = await self._store.find_latest_session(shop)
        if credential:
            self._logger.info(
                "credential resolved shop=%s kind=%s expires=%s",
                shop,
                "online" if credential.is_online else "offline",
                credential.expires,
            )
            return credential

        self._logger.info("credential missing shop=%s", shop)
        return None
