"""
Menu DTOs.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ...domain.entities.customization_option import CustomizationOption
from ...domain.entities.product import MenuProduct
from ...domain.services.menu_filter import ALL


@dataclass
class MenuQueryDTO:
    """DTO for a menu search."""
    search: str = ""
    temperature: str = ALL
    category: str = ALL


@dataclass
class CustomizationOptionDTO:
    """DTO for customization option output."""
    id: str
    code: str
    name_en: str
    name_ar: str
    price: int
    price_display: str

    @classmethod
    def from_entity(cls, option: CustomizationOption) -> 'CustomizationOptionDTO':
        return cls(
            id=option.id,
            code=option.code,
            name_en=option.name_en,
            name_ar=option.name_ar,
            price=option.price.amount,
            price_display=option.price.formatted,
        )


@dataclass
class MenuItemDTO:
    """DTO for menu item output."""
    code: str
    name_en: str
    name_ar: str
    category: str
    tags: List[str]
    flavors: List[str]
    caffeine_index: int
    is_customizable: bool
    prices: Dict[str, int]
    currency: str
    image_url: Optional[str] = None
    customization_options: List[CustomizationOptionDTO] = field(default_factory=list)

    @classmethod
    def from_entity(
        cls,
        product: MenuProduct,
        customization_options: List[CustomizationOption],
        currency: str,
    ) -> 'MenuItemDTO':
        return cls(
            code=product.code,
            name_en=product.name_en,
            name_ar=product.name_ar,
            category=product.category,
            tags=list(product.tags),
            flavors=list(product.flavors),
            caffeine_index=product.caffeine_index,
            is_customizable=product.is_customizable,
            prices={size: price.amount for size, price in product.prices.items()},
            currency=currency,
            image_url=product.image_url,
            customization_options=[
                CustomizationOptionDTO.from_entity(option) for option in customization_options
            ],
        )
