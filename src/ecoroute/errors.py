"""Exception taxonomy shared by services and the HTTP layer."""

from __future__ import annotations

from enum import Enum


class ProviderFailure(str, Enum):
    """Why a call to the external directions provider did not produce a route."""

    CREDENTIAL_MISSING = "credential_missing"
    CREDENTIAL_UNAUTHORIZED = "credential_unauthorized"
    REQUEST_DENIED = "request_denied"
    NO_ROUTE = "no_route"
    MALFORMED_RESPONSE = "malformed_response"
    HTTP_ERROR = "http_error"
    TIMEOUT = "timeout"
    NETWORK = "network"
    INVALID_ROUTE = "invalid_route"

    @property
    def needs_api_setup(self) -> bool:
        return self in (ProviderFailure.CREDENTIAL_MISSING, ProviderFailure.CREDENTIAL_UNAUTHORIZED)

    @property
    def summary(self) -> str:
        if self is ProviderFailure.CREDENTIAL_MISSING:
            return "The Google Maps API key is missing"
        if self is ProviderFailure.CREDENTIAL_UNAUTHORIZED:
            return "The Google Maps API key is not authorized for the Directions API"
        return "Google Maps API error occurred"


class AppError(Exception):
    """Base app error."""


class ValidationError(AppError):
    """Raised for malformed input (HTTP 400)."""


class NotFoundError(AppError):
    """Raised when a record id does not exist (HTTP 404)."""


class ProviderError(AppError):
    """Raised by the directions client when the provider cannot supply a route."""

    def __init__(self, reason: ProviderFailure, detail: str) -> None:
        super().__init__(detail)
        self.reason = reason
        self.detail = detail
