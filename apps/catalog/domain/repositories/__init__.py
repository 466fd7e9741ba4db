from .catalog_provider import CatalogProvider

__all__ = ['CatalogProvider']
