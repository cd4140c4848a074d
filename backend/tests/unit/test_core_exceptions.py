"""
Unit tests for the custom exception hierarchy.

Verifies inheritance chains, status codes, and rendered payloads for all
exception classes in app.core.exceptions.
"""
import pytest

from app.core.exceptions import (
    AppProxyException,
    AppProxyUnauthorizedError,
    ClientError,
    ConfigurationError,
    InvalidLookupRequestError,
    MissingAccessTokenError,
    ServerError,
    SessionStoreError,
    UpstreamError,
    UpstreamSemanticError,
    UpstreamTransportError,
)


pytestmark = pytest.mark.unit


class TestBaseException:
    """Tests for AppProxyException base class."""

    def test_is_exception(self):
        assert issubclass(AppProxyException, Exception)

    def test_default_payload(self):
        exc = AppProxyException()
        assert exc.status_code == 500
        assert exc.to_payload() == {"error": "Internal Server Error"}

    def test_message_override(self):
        exc = ConfigurationError("SHOPIFY_API_SECRET is not configured")
        assert str(exc) == "SHOPIFY_API_SECRET is not configured"
        assert exc.to_payload() == {"error": "SHOPIFY_API_SECRET is not configured"}


class TestClientErrors:

    def test_unauthorized(self):
        exc = AppProxyUnauthorizedError()
        assert isinstance(exc, ClientError)
        assert exc.status_code == 401
        assert exc.to_payload() == {"error": "Unauthorized"}

    def test_invalid_lookup_request_carries_details(self):
        details = [{"type": "list_type", "loc": ["productIds"], "msg": "Input should be a valid list"}]
        exc = InvalidLookupRequestError(details)
        assert exc.status_code == 422
        assert exc.to_payload() == {"error": "Invalid lookup request", "details": details}


class TestServerErrors:

    @pytest.mark.parametrize("exc_cls", [ConfigurationError, SessionStoreError])
    def test_status_500(self, exc_cls):
        exc = exc_cls()
        assert isinstance(exc, ServerError)
        assert exc.status_code == 500

    def test_missing_access_token(self):
        exc = MissingAccessTokenError("a.myshopify.com")
        assert exc.status_code == 500
        assert exc.shop == "a.myshopify.com"
        assert exc.to_payload() == {"error": "Missing offline access token for shop"}


class TestUpstreamErrors:

    def test_transport_error_payload(self):
        exc = UpstreamTransportError(status=503, body="unavailable")
        assert isinstance(exc, UpstreamError)
        assert exc.status_code == 502
        assert exc.to_payload() == {"error": "Admin API error", "status": 503, "body": "unavailable"}

    def test_transport_error_without_response(self):
        assert UpstreamTransportError(status=None, body="timeout").to_payload()["status"] is None

    def test_semantic_error_passes_errors_through(self):
        errors = [{"message": "Field 'x' doesn't exist", "locations": [{"line": 1, "column": 2}]}]
        exc = UpstreamSemanticError(errors)
        assert isinstance(exc, UpstreamError)
        assert exc.status_code == 400
        assert exc.to_payload() == {"error": "GraphQL error", "errors": errors}
