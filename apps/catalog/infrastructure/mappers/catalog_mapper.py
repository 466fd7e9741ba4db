"""
Mapping from the catalog backend's JSON payloads to domain entities.
"""
from typing import Any, Dict

from ...domain.entities.customization_option import CustomizationOption
from ...domain.entities.product import MenuProduct
from ...domain.exceptions import MalformedCatalogRecordError
from ...domain.value_objects.money import Money

# Errors a record with missing keys or wrong types raises while being read.
_SHAPE_ERRORS = (AttributeError, KeyError, TypeError, ValueError)


class CatalogMapper:
    """Maps camelCase backend payloads to catalog entities.

    Structural problems surface as MalformedCatalogRecordError and bad
    prices as InvalidPriceError, so callers can skip a single record.
    """

    def __init__(self, currency: str):
        self.currency = currency

    def to_product(self, payload: Dict[str, Any]) -> MenuProduct:
        try:
            return self._product(payload)
        except _SHAPE_ERRORS as e:
            raise MalformedCatalogRecordError("product", f"{type(e).__name__}: {e}") from e

    def to_customization_option(self, payload: Dict[str, Any]) -> CustomizationOption:
        try:
            return self._customization_option(payload)
        except _SHAPE_ERRORS as e:
            raise MalformedCatalogRecordError("customization option", f"{type(e).__name__}: {e}") from e

    def _product(self, payload: Dict[str, Any]) -> MenuProduct:
        code = payload['productCode']
        if not isinstance(code, str) or not code:
            raise ValueError(f"productCode must be a non-empty string, got {code!r}")
        prices = {
            entry['size'].lower(): Money(amount=entry['price'], currency=self.currency)
            for entry in payload.get('prices') or []
            if entry.get('isActive', True)
        }
        product_id = payload.get('productId')
        return MenuProduct(
            code=code,
            product_id=str(product_id) if product_id is not None else None,
            name_en=payload.get('nameEn') or '',
            name_ar=payload.get('nameAr') or '',
            prices=prices,
            category=payload.get('categoryName') or '',
            tags=tuple(payload.get('tags') or ()),
            flavors=tuple(payload.get('flavors') or ()),
            caffeine_index=int(payload.get('caffeineIndex') or 0),
            is_customizable=bool(payload.get('isCustomizable', False)),
            is_active=bool(payload.get('isActive', True)),
            image_url=payload.get('imageUrl') or None,
            customization_option_ids=tuple(
                str(option_id) for option_id in payload.get('customizationOptionIds') or ()
            ),
        )

    def _customization_option(self, payload: Dict[str, Any]) -> CustomizationOption:
        return CustomizationOption(
            id=str(payload['customizationOptionId']),
            code=payload.get('optionCode') or '',
            name_en=payload.get('nameEn') or '',
            name_ar=payload.get('nameAr') or '',
            price=Money(amount=payload.get('price', 0), currency=self.currency),
            is_active=bool(payload.get('isActive', True)),
            display_order=int(payload.get('displayOrder') or 0),
        )
