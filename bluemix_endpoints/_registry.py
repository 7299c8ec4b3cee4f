"""
bluemix_endpoints._registry
────────────────────────────
Internal service registry — the single source of truth for which services
exist, which environment variable overrides each one, and which locator
method resolves it.

Adding a new service:
  1. Add a member to ServiceIdentifier
  2. Implement ``<name>_endpoint`` on StaticEndpointLocator (and the protocol)
  3. Add one entry to SERVICES below

After step 3 the service is reachable through ``StaticEndpointLocator.endpoint()``
and the top-level ``resolve()``.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from bluemix_endpoints.tier0_core.errors import ConfigurationError


class ServiceIdentifier(str, Enum):
    ACCOUNT_MANAGEMENT = "account_management"
    CERTIFICATE_MANAGER = "certificate_manager"
    CF_API = "cf_api"
    CONTAINER = "container"
    CONTAINER_REGISTRY = "container_registry"
    CIS = "cis"
    GLOBAL_SEARCH = "global_search"
    GLOBAL_TAGGING = "global_tagging"
    IAM = "iam"
    IAM_PAP = "iam_pap"
    ICD = "icd"
    MCCP_API = "mccp_api"
    RESOURCE_MANAGEMENT = "resource_management"
    RESOURCE_CONTROLLER = "resource_controller"
    RESOURCE_CATALOG = "resource_catalog"
    UAA = "uaa"
    CSE = "cse"
    SCHEMATICS = "schematics"
    USER_MANAGEMENT = "user_management"
    HPCS = "hpcs"
    FUNCTIONS = "functions"


@dataclass(frozen=True)
class ServiceSpec:
    """Static facts about one service."""
    service: ServiceIdentifier
    display_name: str
    env_var: str
    supports_private: bool = True

    @property
    def method_name(self) -> str:
        return f"{self.service.value}_endpoint"


# ---------------------------------------------------------------------------
# Ordered the same way as the EndpointLocator protocol.
# ---------------------------------------------------------------------------
_SPECS: list[ServiceSpec] = [
    ServiceSpec(ServiceIdentifier.ACCOUNT_MANAGEMENT, "Account Management",
                "IBMCLOUD_ACCOUNT_MANAGEMENT_API_ENDPOINT"),
    ServiceSpec(ServiceIdentifier.CERTIFICATE_MANAGER, "Certificate Manager",
                "IBMCLOUD_CERTIFICATE_MANAGER_API_ENDPOINT"),
    ServiceSpec(ServiceIdentifier.CF_API, "Cloud Foundry",
                "IBMCLOUD_CF_API_ENDPOINT", supports_private=False),
    ServiceSpec(ServiceIdentifier.CONTAINER, "Container Service",
                "IBMCLOUD_CS_API_ENDPOINT", supports_private=False),
    ServiceSpec(ServiceIdentifier.CONTAINER_REGISTRY, "Container Registry",
                "IBMCLOUD_CR_API_ENDPOINT"),
    ServiceSpec(ServiceIdentifier.CIS, "Cloud Internet Services",
                "IBMCLOUD_CIS_API_ENDPOINT"),
    ServiceSpec(ServiceIdentifier.GLOBAL_SEARCH, "Global Search",
                "IBMCLOUD_GS_API_ENDPOINT"),
    ServiceSpec(ServiceIdentifier.GLOBAL_TAGGING, "Global Tagging",
                "IBMCLOUD_GT_API_ENDPOINT"),
    ServiceSpec(ServiceIdentifier.IAM, "IAM",
                "IBMCLOUD_IAM_API_ENDPOINT"),
    ServiceSpec(ServiceIdentifier.IAM_PAP, "IAM Policy Administration",
                "IBMCLOUD_IAMPAP_API_ENDPOINT"),
    ServiceSpec(ServiceIdentifier.ICD, "Databases",
                "IBMCLOUD_ICD_API_ENDPOINT"),
    ServiceSpec(ServiceIdentifier.MCCP_API, "MCCP",
                "IBMCLOUD_MCCP_API_ENDPOINT", supports_private=False),
    ServiceSpec(ServiceIdentifier.RESOURCE_MANAGEMENT, "Resource Management",
                "IBMCLOUD_RESOURCE_MANAGEMENT_API_ENDPOINT"),
    ServiceSpec(ServiceIdentifier.RESOURCE_CONTROLLER, "Resource Controller",
                "IBMCLOUD_RESOURCE_CONTROLLER_API_ENDPOINT"),
    ServiceSpec(ServiceIdentifier.RESOURCE_CATALOG, "Resource Catalog",
                "IBMCLOUD_RESOURCE_CATALOG_API_ENDPOINT"),
    ServiceSpec(ServiceIdentifier.UAA, "UAA",
                "IBMCLOUD_UAA_ENDPOINT", supports_private=False),
    ServiceSpec(ServiceIdentifier.CSE, "Cloud Service Endpoint",
                "IBMCLOUD_CSE_ENDPOINT", supports_private=False),
    ServiceSpec(ServiceIdentifier.SCHEMATICS, "Schematics",
                "IBMCLOUD_SCHEMATICS_API_ENDPOINT"),
    ServiceSpec(ServiceIdentifier.USER_MANAGEMENT, "User Management",
                "IBMCLOUD_USER_MANAGEMENT_ENDPOINT"),
    ServiceSpec(ServiceIdentifier.HPCS, "Hyper Protect Crypto Services",
                "IBMCLOUD_HPCS_API_ENDPOINT"),
    ServiceSpec(ServiceIdentifier.FUNCTIONS, "Functions",
                "IBMCLOUD_FUNCTIONS_API_ENDPOINT", supports_private=False),
]

SERVICES: dict[ServiceIdentifier, ServiceSpec] = {spec.service: spec for spec in _SPECS}


def get_spec(service: ServiceIdentifier | str) -> ServiceSpec:
    """
    Return the registry entry for ``service``. Accepts the enum member or its
    string value ("iam", "container_registry", ...).
    """
    try:
        return SERVICES[ServiceIdentifier(service)]
    except ValueError as exc:
        raise ConfigurationError(
            "unknown_service",
            f"Unknown service: {service!r}",
            service=str(service),
        ) from exc


def override_variable(service: ServiceIdentifier | str) -> str:
    """Name of the environment variable that overrides ``service``."""
    return get_spec(service).env_var


__all__ = ["ServiceIdentifier", "ServiceSpec", "SERVICES", "get_spec", "override_variable"]
