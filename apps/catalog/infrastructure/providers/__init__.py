# Catalog providers
from django.conf import settings

from ...domain.repositories.catalog_provider import CatalogProvider
from .api_catalog_provider import ApiCatalogProvider
from .fallback_catalog_provider import FallbackCatalogProvider
from .static_catalog_provider import StaticCatalogProvider


def get_catalog_provider() -> CatalogProvider:
    """Build the catalog provider configured in settings."""
    provider: CatalogProvider = ApiCatalogProvider.from_settings()
    if settings.CATALOG_FALLBACK_PATH:
        provider = FallbackCatalogProvider(
            primary=provider,
            fallback=StaticCatalogProvider.from_file(settings.CATALOG_FALLBACK_PATH),
        )
    return provider


__all__ = [
    'ApiCatalogProvider',
    'FallbackCatalogProvider',
    'StaticCatalogProvider',
    'get_catalog_provider',
]
