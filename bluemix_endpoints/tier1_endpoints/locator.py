"""
bluemix_endpoints.tier1_endpoints.locator
──────────────────────────────────────────
Service endpoint resolution. Translates a service identifier plus the
configured (region, visibility) pair into the base URL API clients send
requests to. Resolution order for every service:
  - Per-service override variable (IBMCLOUD_<SERVICE>_..._ENDPOINT)
  - Private-visibility rejection for services without private endpoints
  - Static region tables (Cloud Foundry, Container Registry, UAA)
  - Per-service URL templates keyed by region and visibility

Resolution is a pure function of its inputs and the current environment;
nothing is cached except the default locator returned by get_locator().
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Protocol, runtime_checkable

from bluemix_endpoints._registry import ServiceIdentifier, get_spec
from bluemix_endpoints.tier0_core.config import PRIVATE, get_config
from bluemix_endpoints.tier0_core.env import env_fallback
from bluemix_endpoints.tier0_core.errors import ServiceEndpointError
from bluemix_endpoints.tier0_core.logging import get_logger
from bluemix_endpoints.tier1_endpoints import regions

log = get_logger(__name__)

PRIVATE_UNSUPPORTED = "Private Endpoints is not supported by this service"


# ── Protocol ──────────────────────────────────────────────────────────────────

@runtime_checkable
class EndpointLocator(Protocol):
    def account_management_endpoint(self) -> str: ...
    def certificate_manager_endpoint(self) -> str: ...
    def cf_api_endpoint(self) -> str: ...
    def container_endpoint(self) -> str: ...
    def container_registry_endpoint(self) -> str: ...
    def cis_endpoint(self) -> str: ...
    def global_search_endpoint(self) -> str: ...
    def global_tagging_endpoint(self) -> str: ...
    def iam_endpoint(self) -> str: ...
    def iam_pap_endpoint(self) -> str: ...
    def icd_endpoint(self) -> str: ...
    def mccp_api_endpoint(self) -> str: ...
    def resource_management_endpoint(self) -> str: ...
    def resource_controller_endpoint(self) -> str: ...
    def resource_catalog_endpoint(self) -> str: ...
    def uaa_endpoint(self) -> str: ...
    def cse_endpoint(self) -> str: ...
    def schematics_endpoint(self) -> str: ...
    def user_management_endpoint(self) -> str: ...
    def hpcs_endpoint(self) -> str: ...
    def functions_endpoint(self) -> str: ...


# ── Static locator ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class StaticEndpointLocator:
    """
    Resolve endpoints from overrides, static tables and URL templates.

    Only the exact visibility "private" selects private endpoints; any other
    value behaves as public.

    Usage::

        locator = StaticEndpointLocator(region="eu-de", visibility="public")
        locator.cf_api_endpoint()   # "https://api.eu-de.bluemix.net"
    """
    region: str
    visibility: str = "public"

    @property
    def is_private(self) -> bool:
        return self.visibility == PRIVATE

    # ── Dispatch ──────────────────────────────────────────────────────────────

    def endpoint(self, service: ServiceIdentifier | str) -> str:
        """Resolve ``service`` by identifier instead of by method name."""
        return getattr(self, get_spec(service).method_name)()

    # ── Helpers ───────────────────────────────────────────────────────────────

    def _override(self, service: ServiceIdentifier) -> str:
        env_var = get_spec(service).env_var
        endpoint = env_fallback([env_var], "")
        if endpoint:
            log.debug("endpoint.override", service=service.value, env_var=env_var)
        return endpoint

    def _unavailable(self, service: ServiceIdentifier, message: str) -> ServiceEndpointError:
        log.info(
            "endpoint.unavailable",
            service=service.value,
            region=self.region,
            visibility=self.visibility,
            reason=message,
        )
        return ServiceEndpointError(
            user_message=message,
            service=service.value,
            region=self.region,
            visibility=self.visibility,
        )

    def _reject_private(self, service: ServiceIdentifier) -> None:
        if self.is_private and not get_spec(service).supports_private:
            raise self._unavailable(service, PRIVATE_UNSUPPORTED)

    def _region_missing(self, service: ServiceIdentifier) -> ServiceEndpointError:
        name = get_spec(service).display_name
        return self._unavailable(
            service, f"{name} endpoint doesn't exist for region: \"{self.region}\""
        )

    def _private_in_region(self) -> bool:
        return self.is_private and regions.is_private_region(self.region)

    # ── Services ──────────────────────────────────────────────────────────────

    def account_management_endpoint(self) -> str:
        endpoint = self._override(ServiceIdentifier.ACCOUNT_MANAGEMENT)
        if endpoint:
            return endpoint
        if self._private_in_region():
            return f"https://private.{self.region}.accounts.cloud.ibm.com"
        return "https://accounts.cloud.ibm.com"

    def certificate_manager_endpoint(self) -> str:
        endpoint = self._override(ServiceIdentifier.CERTIFICATE_MANAGER)
        if endpoint:
            return endpoint
        if self.is_private:
            return f"https://private.{self.region}.certificate-manager.cloud.ibm.com"
        return f"https://{self.region}.certificate-manager.cloud.ibm.com"

    def cf_api_endpoint(self) -> str:
        endpoint = self._override(ServiceIdentifier.CF_API)
        if endpoint:
            return endpoint
        self._reject_private(ServiceIdentifier.CF_API)
        endpoint = regions.lookup(regions.CF, self.region)
        if endpoint is None:
            raise self._region_missing(ServiceIdentifier.CF_API)
        return endpoint

    def container_endpoint(self) -> str:
        endpoint = self._override(ServiceIdentifier.CONTAINER)
        if endpoint:
            return endpoint
        self._reject_private(ServiceIdentifier.CONTAINER)
        return "https://containers.cloud.ibm.com/global"

    def container_registry_endpoint(self) -> str:
        endpoint = self._override(ServiceIdentifier.CONTAINER_REGISTRY)
        if endpoint:
            return endpoint
        host = regions.lookup(regions.CR, self.region)
        if host is None:
            raise self._region_missing(ServiceIdentifier.CONTAINER_REGISTRY)
        if self.is_private:
            return f"https://private.{host}"
        return f"https://{host}"

    def cis_endpoint(self) -> str:
        endpoint = self._override(ServiceIdentifier.CIS)
        if endpoint:
            return endpoint
        if self.is_private:
            return "https://api.private.cis.cloud.ibm.com"
        return "https://api.cis.cloud.ibm.com"

    def global_search_endpoint(self) -> str:
        endpoint = self._override(ServiceIdentifier.GLOBAL_SEARCH)
        if endpoint:
            return endpoint
        if self._private_in_region():
            return f"https://api.private.{self.region}.global-search-tagging.cloud.ibm.com"
        return "https://api.global-search-tagging.cloud.ibm.com"

    def global_tagging_endpoint(self) -> str:
        endpoint = self._override(ServiceIdentifier.GLOBAL_TAGGING)
        if endpoint:
            return endpoint
        if self._private_in_region():
            return f"https://tags.private.{self.region}.global-search-tagging.cloud.ibm.com"
        return "https://tags.global-search-tagging.cloud.ibm.com"

    def iam_endpoint(self) -> str:
        endpoint = self._override(ServiceIdentifier.IAM)
        if endpoint:
            return endpoint
        return self._iam_url()

    def iam_pap_endpoint(self) -> str:
        endpoint = self._override(ServiceIdentifier.IAM_PAP)
        if endpoint:
            return endpoint
        return self._iam_url()

    def _iam_url(self) -> str:
        # IAM and the policy admin API share hosts.
        if self.is_private:
            if regions.is_private_region(self.region):
                return f"https://private.{self.region}.iam.cloud.ibm.com"
            return "https://private.iam.cloud.ibm.com"
        return "https://iam.cloud.ibm.com"

    def icd_endpoint(self) -> str:
        endpoint = self._override(ServiceIdentifier.ICD)
        if endpoint:
            return endpoint
        if self.is_private:
            return f"https://api.{self.region}.private.databases.cloud.ibm.com"
        return f"https://api.{self.region}.databases.cloud.ibm.com"

    def mccp_api_endpoint(self) -> str:
        endpoint = self._override(ServiceIdentifier.MCCP_API)
        if endpoint:
            return endpoint
        self._reject_private(ServiceIdentifier.MCCP_API)
        return f"https://mccp.{self.region}.cf.cloud.ibm.com"

    def resource_management_endpoint(self) -> str:
        endpoint = self._override(ServiceIdentifier.RESOURCE_MANAGEMENT)
        if endpoint:
            return endpoint
        return self._resource_controller_url()

    def resource_controller_endpoint(self) -> str:
        endpoint = self._override(ServiceIdentifier.RESOURCE_CONTROLLER)
        if endpoint:
            return endpoint
        return self._resource_controller_url()

    def _resource_controller_url(self) -> str:
        if self._private_in_region():
            return f"https://private.{self.region}.resource-controller.cloud.ibm.com"
        return "https://resource-controller.cloud.ibm.com"

    def resource_catalog_endpoint(self) -> str:
        endpoint = self._override(ServiceIdentifier.RESOURCE_CATALOG)
        if endpoint:
            return endpoint
        if self._private_in_region():
            return f"https://private.{self.region}.globalcatalog.cloud.ibm.com"
        return "https://globalcatalog.cloud.ibm.com"

    def uaa_endpoint(self) -> str:
        endpoint = self._override(ServiceIdentifier.UAA)
        if endpoint:
            return endpoint
        self._reject_private(ServiceIdentifier.UAA)
        endpoint = regions.lookup(regions.UAA, self.region)
        if endpoint is None:
            raise self._region_missing(ServiceIdentifier.UAA)
        return endpoint

    def cse_endpoint(self) -> str:
        endpoint = self._override(ServiceIdentifier.CSE)
        if endpoint:
            return endpoint
        self._reject_private(ServiceIdentifier.CSE)
        return "https://api.serviceendpoint.cloud.ibm.com"

    def schematics_endpoint(self) -> str:
        endpoint = self._override(ServiceIdentifier.SCHEMATICS)
        if endpoint:
            return endpoint
        if self.is_private:
            endpoint = regions.SCHEMATICS_PRIVATE_HOSTS.get(self.region)
            if endpoint is None:
                raise self._unavailable(
                    ServiceIdentifier.SCHEMATICS,
                    f"{PRIVATE_UNSUPPORTED} for the region {self.region}",
                )
            return endpoint
        return f"https://{self.region}.schematics.cloud.ibm.com"

    def user_management_endpoint(self) -> str:
        endpoint = self._override(ServiceIdentifier.USER_MANAGEMENT)
        if endpoint:
            return endpoint
        if self._private_in_region():
            return f"https://private.{self.region}.user-management.cloud.ibm.com"
        return "https://user-management.cloud.ibm.com"

    def hpcs_endpoint(self) -> str:
        endpoint = self._override(ServiceIdentifier.HPCS)
        if endpoint:
            return endpoint
        return f"https://{self.region}.broker.hs-crypto.cloud.ibm.com/crypto_v2/"

    def functions_endpoint(self) -> str:
        endpoint = self._override(ServiceIdentifier.FUNCTIONS)
        if endpoint:
            return endpoint
        self._reject_private(ServiceIdentifier.FUNCTIONS)
        return f"https://{self.region}.functions.cloud.ibm.com"


# ── Public API ────────────────────────────────────────────────────────────────

def new_endpoint_locator(region: str, visibility: str = "public") -> EndpointLocator:
    """Build a locator for one connection profile."""
    return StaticEndpointLocator(region=region, visibility=visibility)


@lru_cache(maxsize=1)
def get_locator() -> StaticEndpointLocator:
    """
    Return the locator for the configured default region and visibility
    (IBMCLOUD_REGION / IBMCLOUD_VISIBILITY). Cached after first call.
    """
    config = get_config()
    return StaticEndpointLocator(region=config.region, visibility=config.visibility)


def _reset_locator() -> None:
    """For tests — drop the cached default locator."""
    get_locator.cache_clear()


def resolve(
    service: ServiceIdentifier | str,
    region: str | None = None,
    visibility: str | None = None,
) -> str:
    """
    Return the base URL for ``service``. Missing region/visibility fall back
    to the configured defaults.
    """
    if region is None and visibility is None:
        return get_locator().endpoint(service)
    if region is None or visibility is None:
        config = get_config()
        region = region if region is not None else config.region
        visibility = visibility if visibility is not None else config.visibility
    return StaticEndpointLocator(region=region, visibility=visibility).endpoint(service)


__all__ = [
    "EndpointLocator",
    "StaticEndpointLocator",
    "PRIVATE_UNSUPPORTED",
    "new_endpoint_locator",
    "get_locator",
    "resolve",
]
