"""
bluemix_endpoints.tier1_endpoints.regions
──────────────────────────────────────────
Static region tables for the few services whose endpoints cannot be derived
from a template. The tables are not exhaustive: regions missing here are
reached through the per-service override variables instead.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

CF = "cf"
CR = "cr"
UAA = "uaa"

REGION_TO_ENDPOINT: Mapping[str, Mapping[str, str]] = MappingProxyType({
    CF: MappingProxyType({
        "us-south": "https://api.ng.bluemix.net",
        "us-east": "https://api.us-east.bluemix.net",
        "eu-gb": "https://api.eu-gb.bluemix.net",
        "au-syd": "https://api.au-syd.bluemix.net",
        "eu-de": "https://api.eu-de.bluemix.net",
        "jp-tok": "https://api.jp-tok.bluemix.net",
    }),
    # Bare registry hostnames; the scheme and private prefix are added per call.
    CR: MappingProxyType({
        "us-south": "us.icr.io",
        "us-east": "us.icr.io",
        "eu-de": "de.icr.io",
        "au-syd": "au.icr.io",
        "eu-gb": "uk.icr.io",
        "jp-tok": "jp.icr.io",
        "jp-osa": "jp2.icr.io",
    }),
    UAA: MappingProxyType({
        "us-south": "https://iam.cloud.ibm.com/cloudfoundry/login/us-south",
        "us-east": "https://iam.cloud.ibm.com/cloudfoundry/login/us-east",
        "eu-gb": "https://iam.cloud.ibm.com/cloudfoundry/login/uk-south",
        "au-syd": "https://iam.cloud.ibm.com/cloudfoundry/login/ap-south",
        "eu-de": "https://iam.cloud.ibm.com/cloudfoundry/login/eu-central",
    }),
})

# Regions with region-specific private endpoints for most services.
PRIVATE_REGIONS = frozenset({"us-south", "us-east"})

# Schematics serves private traffic from two geography-wide hosts.
SCHEMATICS_PRIVATE_HOSTS: Mapping[str, str] = MappingProxyType({
    "us-south": "https://private-us.schematics.cloud.ibm.com",
    "us-east": "https://private-us.schematics.cloud.ibm.com",
    "eu-gb": "https://private-eu.schematics.cloud.ibm.com",
    "eu-de": "https://private-eu.schematics.cloud.ibm.com",
})


def lookup(table: str, region: str) -> str | None:
    """Return the static entry for ``region`` in ``table``, or None."""
    return REGION_TO_ENDPOINT[table].get(region)


def is_private_region(region: str) -> bool:
    return region in PRIVATE_REGIONS


__all__ = [
    "CF", "CR", "UAA",
    "REGION_TO_ENDPOINT", "PRIVATE_REGIONS", "SCHEMATICS_PRIVATE_HOSTS",
    "lookup", "is_private_region",
]
