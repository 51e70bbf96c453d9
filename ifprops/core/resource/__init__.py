"""
Resource: identidad, normalización, comparación y dependencias de interface_properties.

Lógica pura; sin I/O ni dependencias de CLI o providers.
"""

from ifprops.core.resource.identity import PROTOCOLS, split_identity, validate_identity
from ifprops.core.resource.normalizer import is_legacy_syntax, normalize_properties
from ifprops.core.resource.comparator import diff_properties, in_sync, property_matches
from ifprops.core.resource.dependencies import RAW_INTERFACE_TYPE, CatalogResource, depends_on
from ifprops.core.resource.models import (
    RESOURCE_TYPE,
    EnsureState,
    InterfacePropertiesResource,
    TemporaryFlag,
)
from ifprops.core.resource.catalog import Catalog

__all__ = [
    "PROTOCOLS",
    "split_identity",
    "validate_identity",
    "is_legacy_syntax",
    "normalize_properties",
    "diff_properties",
    "in_sync",
    "property_matches",
    "RAW_INTERFACE_TYPE",
    "CatalogResource",
    "depends_on",
    "RESOURCE_TYPE",
    "EnsureState",
    "InterfacePropertiesResource",
    "TemporaryFlag",
    "Catalog",
]
