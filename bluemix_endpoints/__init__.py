"""
bluemix_endpoints
─────────────────
Stable top-level exports. Import from here, not from sub-modules directly.
Every name exported here is part of the public API and subject to semver.
"""
from bluemix_endpoints._registry import ServiceIdentifier, override_variable
from bluemix_endpoints.tier0_core.config import BluemixConfig, get_config
from bluemix_endpoints.tier0_core.errors import (
    ConfigurationError,
    EndpointError,
    ServiceEndpointError,
)
from bluemix_endpoints.tier0_core.logging import configure_logging, get_logger
from bluemix_endpoints.tier1_endpoints.locator import (
    EndpointLocator,
    StaticEndpointLocator,
    get_locator,
    new_endpoint_locator,
    resolve,
)

__version__ = "0.1.0"
__all__ = [
    # services
    "ServiceIdentifier", "override_variable",
    # locator
    "EndpointLocator", "StaticEndpointLocator",
    "new_endpoint_locator", "get_locator", "resolve",
    # errors
    "EndpointError", "ServiceEndpointError", "ConfigurationError",
    # config
    "BluemixConfig", "get_config",
    # logging
    "get_logger", "configure_logging",
]
