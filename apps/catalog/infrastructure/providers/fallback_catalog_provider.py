"""
Catalog provider that falls back to a secondary source when the primary is down.
"""
import logging
from typing import List

from ...domain.entities.customization_option import CustomizationOption
from ...domain.entities.product import MenuProduct
from ...domain.exceptions import CatalogUnavailableError
from ...domain.repositories.catalog_provider import CatalogProvider

logger = logging.getLogger(__name__)


class FallbackCatalogProvider(CatalogProvider):
    """Use ``primary``; on CatalogUnavailableError answer from ``fallback``."""

    def __init__(self, primary: CatalogProvider, fallback: CatalogProvider):
        self.primary = primary
        self.fallback = fallback

    def _call(self, method: str, *args):
        try:
            return getattr(self.primary, method)(*args)
        except CatalogUnavailableError as e:
            logger.warning(f"{e.message}. Using fallback menu for {method}.")
            return getattr(self.fallback, method)(*args)

    def list_products(self) -> List[MenuProduct]:
        return self._call('list_products')

    def get_product(self, code: str) -> MenuProduct:
        return self._call('get_product', code)

    def list_customization_options(self) -> List[CustomizationOption]:
        return self._call('list_customization_options')
