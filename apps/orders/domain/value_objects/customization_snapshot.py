"""
Customization snapshot value object.
"""
from dataclasses import dataclass

from apps.catalog.domain.entities.customization_option import CustomizationOption
from apps.catalog.domain.exceptions import InvalidPriceError
from apps.catalog.domain.value_objects.money import Money
from shared.domain import ValueObject


@dataclass(frozen=True, eq=False)
class CustomizationSnapshot(ValueObject):
    """A customization as it was priced when the line item was added."""
    id: str
    name_en: str
    name_ar: str
    price: Money

    def __post_init__(self):
        if not isinstance(self.price, Money):
            object.__setattr__(self, 'price', Money(amount=self.price))
        if self.price.is_negative:
            raise InvalidPriceError(self.price.amount, field="customization_price")

    @classmethod
    def from_option(cls, option: CustomizationOption) -> 'CustomizationSnapshot':
        return cls(
            id=option.id,
            name_en=option.name_en,
            name_ar=option.name_ar,
            price=option.price,
        )
