"""
Menu product entity.
"""
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from ..exceptions import InvalidPriceError, SizeNotAvailableError
from ..value_objects.money import Money


@dataclass(frozen=True)
class MenuProduct:
    """A drink or food item as published by the catalog."""
    code: str
    name_en: str
    name_ar: str
    prices: Dict[str, Money]
    product_id: Optional[str] = None
    category: str = ""
    tags: Tuple[str, ...] = ()
    flavors: Tuple[str, ...] = ()
    caffeine_index: int = 0
    is_customizable: bool = False
    is_active: bool = True
    image_url: Optional[str] = None
    customization_option_ids: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        prices = {}
        for size, price in self.prices.items():
            if not isinstance(price, Money):
                price = Money(amount=price)
            if price.is_negative:
                raise InvalidPriceError(price.amount, field=f"prices.{size}")
            prices[size.lower()] = price
        object.__setattr__(self, 'prices', prices)

    def price_for(self, size: str) -> Money:
        """Get the base price for a size."""
        try:
            return self.prices[size.lower()]
        except KeyError:
            raise SizeNotAvailableError(self.code, size)

    def offers_customization(self, option_id: str) -> bool:
        return self.is_customizable and option_id in self.customization_option_ids
