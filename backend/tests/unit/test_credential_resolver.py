"""
Unit tests for CredentialResolver — offline-first token selection.
"""
from datetime import datetime, timezone

import pytest
from unittest.mock import AsyncMock

from app.schemas.app_proxy import ShopCredential
from app.services.credential_resolver import CredentialResolver


pytestmark = pytest.mark.unit

SHOP = "test-store.myshopify.com"


@pytest.fixture
def resolver(mock_session_store):
    return CredentialResolver(mock_session_store)


class TestResolve:

    @pytest.mark.asyncio
    async def test_offline_session_preferred(self, resolver, mock_session_store, offline_credential):
        mock_session_store.find_offline_session = AsyncMock(return_value=offline_credential)

        credential = await resolver.resolve(SHOP)

        assert credential is offline_credential
        mock_session_store.find_offline_session.assert_awaited_once_with(SHOP)
        mock_session_store.find_latest_session.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_falls_back_to_latest_session(self, resolver, mock_session_store):
        online = ShopCredential(
            shop=SHOP,
            access_token="shpua_online",
            is_online=True,
            expires=datetime(2026, 10, 20, tzinfo=timezone.utc),
        )
        mock_session_store.find_latest_session = AsyncMock(return_value=online)

        credential = await resolver.resolve(SHOP)

        assert credential.access_token == "shpua_online"
        mock_session_store.find_latest_session.assert_awaited_once_with(SHOP)

    @pytest.mark.asyncio
    async def test_none_when_no_session(self, resolver, mock_session_store):
        assert await resolver.resolve(SHOP) is None
        mock_session_store.find_offline_session.assert_awaited_once()
        mock_session_store.find_latest_session.assert_awaited_once()
