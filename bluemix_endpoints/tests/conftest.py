"""
bluemix_endpoints test configuration.

Every override variable is cleared before each test so a developer's own
IBMCLOUD_* settings never leak into the expected URLs.
"""
from __future__ import annotations

import pytest


# ── Fixtures ───────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove endpoint overrides and locator defaults for the test's duration."""
    from bluemix_endpoints._registry import SERVICES

    for spec in SERVICES.values():
        monkeypatch.delenv(spec.env_var, raising=False)
    monkeypatch.delenv("IBMCLOUD_REGION", raising=False)
    monkeypatch.delenv("IBMCLOUD_VISIBILITY", raising=False)
    yield


@pytest.fixture(autouse=True)
def reset_module_singletons():
    """Drop cached config and default locator between tests."""
    from bluemix_endpoints.tier0_core.config import _reset_config
    from bluemix_endpoints.tier1_endpoints.locator import _reset_locator

    _reset_config()
    _reset_locator()
    yield
    _reset_config()
    _reset_locator()


@pytest.fixture
def public_locator():
    from bluemix_endpoints.tier1_endpoints.locator import StaticEndpointLocator
    return StaticEndpointLocator(region="us-south", visibility="public")


@pytest.fixture
def private_locator():
    from bluemix_endpoints.tier1_endpoints.locator import StaticEndpointLocator
    return StaticEndpointLocator(region="us-south", visibility="private")
