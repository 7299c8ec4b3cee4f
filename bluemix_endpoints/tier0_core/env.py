"""
bluemix_endpoints.tier0_core.env
─────────────────────────────────
Environment lookups with fallback. The first variable holding a non-empty
value wins; an empty string counts as unset.
"""
from __future__ import annotations

import os
from collections.abc import Iterable


def env_fallback(keys: Iterable[str], default: str = "") -> str:
    """
    Return the value of the first non-empty environment variable in ``keys``,
    or ``default`` when none is set.

    Usage:
        endpoint = env_fallback(["IBMCLOUD_IAM_API_ENDPOINT"], "")
    """
    for key in keys:
        value = os.environ.get(key)
        if value:
            return value
    return default


__all__ = ["env_fallback"]
