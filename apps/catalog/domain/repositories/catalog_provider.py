"""
Catalog provider interface.
"""
from abc import ABC, abstractmethod
from typing import List

from ..entities.customization_option import CustomizationOption
from ..entities.product import MenuProduct


class CatalogProvider(ABC):
    """Source of products, sizes, prices and customization options."""

    @abstractmethod
    def list_products(self) -> List[MenuProduct]:
        """List published products."""
        pass

    @abstractmethod
    def get_product(self, code: str) -> MenuProduct:
        """Get a product by its product code or raise ProductNotFoundError."""
        pass

    @abstractmethod
    def list_customization_options(self) -> List[CustomizationOption]:
        """List active customization options."""
        pass
