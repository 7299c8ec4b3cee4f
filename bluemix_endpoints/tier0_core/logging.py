"""
bluemix_endpoints.tier0_core.logging
─────────────────────────────────────
Structured logging for the locator. Importing the package never touches
process-wide logging: modules only obtain loggers, and whatever structlog
setup the host application has is what they emit through.

Applications without their own setup can opt in with configure_logging(),
which applies BLUEMIX_LOG_LEVEL / BLUEMIX_LOG_FORMAT from BluemixConfig and
leaves an existing structlog configuration alone unless forced.

Minimal stack: structlog (stdout JSON or console)
"""
from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from bluemix_endpoints.tier0_core.config import get_config

_PACKAGE_LOGGER = "bluemix_endpoints"


# ── Redaction processor ───────────────────────────────────────────────────────

_REDACT_KEYS = frozenset({
    "password", "secret", "token", "api_key", "apikey",
    "authorization", "credential", "access_token", "refresh_token",
})

_REDACTED = "[REDACTED]"


def _redact_processor(
    logger: Any, method: str, event_dict: dict
) -> dict:
    """Replace the values of sensitive keys before output."""
    for key in list(event_dict.keys()):
        if key.lower() in _REDACT_KEYS:
            event_dict[key] = _REDACTED
    return event_dict


# ── Opt-in configuration ──────────────────────────────────────────────────────

_handler: logging.Handler | None = None


def configure_logging(*, force: bool = False) -> bool:
    """
    Configure structlog and a stdout handler on the ``bluemix_endpoints``
    stdlib logger. Returns False without changing anything when structlog is
    already configured and ``force`` is not set.
    """
    global _handler
    if structlog.is_configured() and not force:
        return False

    config = get_config()
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        _redact_processor,
    ]

    if config.log_format.lower() == "console":
        renderer: Any = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        package_logger.addHandler(_handler)
    _handler.setFormatter(formatter)
    package_logger.setLevel(level)
    return True


# ── Public API ────────────────────────────────────────────────────────────────

def get_logger(name: str | None = None) -> Any:
    """
    Return a structlog logger bound to the given name. Never configures
    structlog.

    Usage:
        log = get_logger(__name__)
        log.debug("endpoint.override", service="iam", env_var="IBMCLOUD_IAM_API_ENDPOINT")
    """
    return structlog.get_logger(name or _PACKAGE_LOGGER)


__all__ = ["get_logger", "configure_logging"]
