"""
FastAPI Dependencies — Shared singletons injected via Depends().
"""

from __future__ import annotations

from functools import lru_cache

from severity_bridge.bridge.registration import HighlightingRegistration
from severity_bridge.catalog.reader import JsonCatalogReader
from severity_bridge.config import settings
from severity_bridge.host.extension_catalog import ExtensionCatalog
from severity_bridge.host.lifetime import Lifetime


@lru_cache
def get_application_lifetime() -> Lifetime:
    """Lifetime of the running application, terminated on shutdown."""
    return Lifetime("application")


@lru_cache
def get_extension_catalog() -> ExtensionCatalog:
    """Shared host extension catalog singleton."""
    return ExtensionCatalog()


@lru_cache
def get_registration() -> HighlightingRegistration:
    """Registration built once from the configured rule catalog."""
    return HighlightingRegistration(
        lifetime=get_application_lifetime(),
        catalog_reader=JsonCatalogReader(settings.catalog_path),
        extension_catalog=get_extension_catalog(),
    )
