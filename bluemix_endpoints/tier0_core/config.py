"""
bluemix_endpoints.tier0_core.config
────────────────────────────────────
Typed configuration with env layering. Reads from .env → environment
variables. Holds the defaults used when a locator is built without an
explicit region or visibility.

Per-service endpoint overrides are NOT read through here: they are looked
up on every call (see tier0_core.env) so resolution always reflects the
current environment.

Minimal stack: pydantic-settings + python-dotenv
"""
from __future__ import annotations

from functools import lru_cache

from pydantic import Field, ValidationError as PydanticValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bluemix_endpoints.tier0_core.errors import ConfigurationError

PUBLIC = "public"
PRIVATE = "private"
VISIBILITIES = frozenset({PUBLIC, PRIVATE})


class BluemixConfig(BaseSettings):
    """Default region, visibility and logging settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Locator defaults ──────────────────────────────────────────────────────
    region: str = Field(default="us-south", alias="IBMCLOUD_REGION")
    visibility: str = Field(default=PUBLIC, alias="IBMCLOUD_VISIBILITY")

    # ── Logging ───────────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", alias="BLUEMIX_LOG_LEVEL")
    log_format: str = Field(default="json", alias="BLUEMIX_LOG_FORMAT")

    @field_validator("visibility")
    @classmethod
    def validate_visibility(cls, v: str) -> str:
        if v.lower() not in VISIBILITIES:
            raise ValueError(f"visibility must be one of {sorted(VISIBILITIES)}, got {v!r}")
        return v.lower()

    @field_validator("region")
    @classmethod
    def validate_region(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("region must not be empty")
        return v.strip()

    @property
    def is_private(self) -> bool:
        return self.visibility == PRIVATE


@lru_cache(maxsize=1)
def get_config() -> BluemixConfig:
    """
    Return the singleton config. Cached after first call.
    Call _reset_config() in tests to pick up new env vars.
    """
    try:
        return BluemixConfig()
    except PydanticValidationError as exc:
        raise ConfigurationError(
            "invalid_settings",
            "Invalid bluemix_endpoints settings.",
            detail=str(exc),
        ) from exc


def _reset_config() -> None:
    """For tests — clear the config cache."""
    get_config.cache_clear()


__all__ = ["BluemixConfig", "get_config", "PUBLIC", "PRIVATE", "VISIBILITIES"]
