"""
Customization option entity.
"""
from dataclasses import dataclass

from ..exceptions import InvalidPriceError
from ..value_objects.money import Money


@dataclass(frozen=True)
class CustomizationOption:
    """An add-on (extra shot, syrup, ...) with its own price."""
    id: str
    name_en: str
    name_ar: str
    price: Money
    code: str = ""
    is_active: bool = True
    display_order: int = 0

    def __post_init__(self):
        if not isinstance(self.price, Money):
            object.__setattr__(self, 'price', Money(amount=self.price))
        if self.price.is_negative:
            raise InvalidPriceError(self.price.amount, field="customization_price")
