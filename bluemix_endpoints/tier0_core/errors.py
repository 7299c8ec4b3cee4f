"""
bluemix_endpoints.tier0_core.errors
────────────────────────────────────
Error taxonomy for endpoint resolution. Every failure is a configuration
error for the caller, never a transient fault: nothing here is retried.
"""
from __future__ import annotations

from typing import Any


# ── Base error ────────────────────────────────────────────────────────────────

class EndpointError(Exception):
    """
    Base class for all bluemix_endpoints errors. Every error has:
    - code: stable machine-readable string
    - user_message: safe to surface to end users
    - detail: internal context
    - status_code: HTTP-style status for callers that map errors to responses
    """

    status_code: int = 500
    code: str = "internal_error"

    def __init__(
        self,
        code: str | None = None,
        user_message: str = "An unexpected error occurred.",
        detail: str | None = None,
        **metadata: Any,
    ) -> None:
        self.code = code or self.__class__.code
        self.user_message = user_message
        self.detail = detail or user_message
        self.metadata = metadata
        super().__init__(self.detail)

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.user_message,
            }
        }


# ── Typed error classes ───────────────────────────────────────────────────────

class ServiceEndpointError(EndpointError):
    """No endpoint exists for the requested service/region/visibility."""
    status_code = 404
    code = "ServiceEndpointDoesnotExist"

    @property
    def service(self) -> str | None:
        return self.metadata.get("service")

    @property
    def region(self) -> str | None:
        return self.metadata.get("region")


class ConfigurationError(EndpointError):
    """Misconfiguration detected while building a locator."""
    status_code = 500
    code = "configuration_error"


__all__ = ["EndpointError", "ServiceEndpointError", "ConfigurationError"]
