"""
Custom exception hierarchy for the app proxy backend.

Every failure in the lookup pipeline is a terminal response, so each
exception carries the HTTP status and the JSON body it renders as:
- ClientError: the caller must fix the request (re-sign, fix the body)
- ServerError: configuration or storage problems on our side
- UpstreamError: the Shopify Admin API failed or rejected the query

The handlers in app.core.middleware turn these into JSON responses.
"""
from typing import Any, Dict, List, Optional


class AppProxyException(Exception):
    """Base exception for the app proxy backend."""

    status_code: int = 500
    error: str = "Internal Server Error"

    def __init__(self, error: Optional[str] = None) -> None:
        if error is not None:
            self.error = error
        super().__init__(self.error)

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.error}


# ============================================
# CLIENT ERRORS
# ============================================
class ClientError(AppProxyException):
    """Base class for errors caused by the inbound request."""
    status_code = 400


class AppProxyUnauthorizedError(ClientError):
    """
    Signature missing, mismatched, or no shop on the request.

    Not retried; the storefront has to send a freshly signed request.
    """
    status_code = 401
    error = "Unauthorized"


class InvalidLookupRequestError(ClientError):
    """Request body is not a valid lookup request."""
    status_code = 422
    error = "Invalid lookup request"

    def __init__(self, details: List[Dict[str, Any]]) -> None:
        self.details = details
        super().__init__()

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.error, "details": self.details}


# ============================================
# SERVER ERRORS
# ============================================
class ServerError(AppProxyException):
    """Base class for errors on our side of the proxy."""
    status_code = 500


class ConfigurationError(ServerError):
    """A required setting is missing."""
    pass


class MissingAccessTokenError(ServerError):
    """
    The shop is authenticated but no session token is on file.

    Usually means the app was never installed or was uninstalled.
    """
    error = "Missing offline access token for shop"

    def __init__(self, shop: str) -> None:
        self.shop = shop
        super().__init__()


class SessionStoreError(ServerError):
    """Reading the session table failed."""
    error = "Session store unavailable"


# ============================================
# UPSTREAM ERRORS
# ============================================
class UpstreamError(AppProxyException):
    """Base class for Shopify Admin API failures."""
    status_code = 502


class UpstreamTransportError(UpstreamError):
    """
    Admin API returned a non-success status, an unparsable body,
    or the request never completed.

    ``status`` is None when no HTTP response was received.
    """
    error = "Admin API error"

    def __init__(self, status: Optional[int], body: Any) -> None:
        self.status = status
        self.body = body
        super().__init__()

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.error, "status": self.status, "body": self.body}


class UpstreamSemanticError(UpstreamError):
    """Admin API answered but reported GraphQL errors."""
    status_code = 400
    error = "GraphQL error"

    def __init__(self, errors: List[Any]) -> None:
        self.errors = errors
        super().__init__()

    def to_payload(self) -> Dict[str, Any]:
        return {"error": self.error, "errors": self.errors}
