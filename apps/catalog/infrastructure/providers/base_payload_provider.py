"""
Shared mapping logic for providers that read backend-shaped payloads.
"""
import logging
from abc import abstractmethod
from typing import Any, Dict, List, Optional

from ...domain.entities.customization_option import CustomizationOption
from ...domain.entities.product import MenuProduct
from ...domain.exceptions import InvalidPriceError, MalformedCatalogRecordError, ProductNotFoundError
from ...domain.repositories.catalog_provider import CatalogProvider
from ..mappers.catalog_mapper import CatalogMapper

logger = logging.getLogger(__name__)

UNUSABLE_RECORD_ERRORS = (InvalidPriceError, MalformedCatalogRecordError)


def _record_id(payload: Any, key: str) -> Any:
    return payload.get(key) if isinstance(payload, dict) else repr(payload)


class PayloadCatalogProvider(CatalogProvider):
    """Catalog provider over raw product and customization payloads."""

    def __init__(self, currency: str):
        self.mapper = CatalogMapper(currency=currency)

    @abstractmethod
    def _product_payloads(self) -> List[Dict[str, Any]]:
        pass

    @abstractmethod
    def _customization_payloads(self) -> List[Dict[str, Any]]:
        pass

    def _product_payload(self, code: str) -> Optional[Dict[str, Any]]:
        for payload in self._product_payloads():
            if isinstance(payload, dict) and payload.get('productCode') == code:
                return payload
        return None

    def list_products(self) -> List[MenuProduct]:
        products = []
        for payload in self._product_payloads():
            try:
                products.append(self.mapper.to_product(payload))
            except UNUSABLE_RECORD_ERRORS as e:
                logger.warning(f"Skipping product {_record_id(payload, 'productCode')}: {e.message}")
        return products

    def get_product(self, code: str) -> MenuProduct:
        payload = self._product_payload(code)
        if payload is None:
            raise ProductNotFoundError(code)
        return self.mapper.to_product(payload)

    def list_customization_options(self) -> List[CustomizationOption]:
        options = []
        for payload in self._customization_payloads():
            try:
                option = self.mapper.to_customization_option(payload)
            except UNUSABLE_RECORD_ERRORS as e:
                logger.warning(
                    f"Skipping customization option {_record_id(payload, 'customizationOptionId')}: {e.message}"
                )
                continue
            if option.is_active:
                options.append(option)
        return sorted(options, key=lambda option: option.display_order)
