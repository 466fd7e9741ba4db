"""
Cart item entity.
"""
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from apps.catalog.domain.exceptions import CurrencyMismatchError, InvalidPriceError
from apps.catalog.domain.value_objects.money import Money
from ..exceptions import InvalidQuantityError
from ..value_objects.customization_snapshot import CustomizationSnapshot
from ..value_objects.line_item_id import LineItemId


@dataclass(eq=False)
class CartItem:
    """
    One configured product in the cart.

    Names and prices are captured when the item is added and never
    refreshed from the catalog afterwards.
    """
    product_id: str
    product_name_en: str
    product_name_ar: str
    size: str
    unit_price: Money
    customizations: Tuple[CustomizationSnapshot, ...] = ()
    quantity: int = 1
    image: Optional[str] = None
    id: str = field(init=False)

    def __post_init__(self):
        if not isinstance(self.unit_price, Money):
            self.unit_price = Money(amount=self.unit_price)
        if self.unit_price.is_negative:
            raise InvalidPriceError(self.unit_price.amount, field="unit_price")
        self._check_quantity(self.quantity)

        unique = {}
        for customization in self.customizations:
            unique.setdefault(customization.id, customization)
        self.customizations = tuple(unique.values())
        for customization in self.customizations:
            if customization.price.currency != self.unit_price.currency:
                raise CurrencyMismatchError(self.unit_price.currency, customization.price.currency)

        self.id = LineItemId.derive(
            self.product_id,
            self.size,
            [customization.id for customization in self.customizations],
        ).value

    @classmethod
    def compose(
        cls,
        product_id: str,
        product_name_en: str,
        product_name_ar: str,
        size: str,
        unit_price: Money,
        customizations: Iterable[CustomizationSnapshot] = (),
        image: Optional[str] = None,
    ) -> 'CartItem':
        """Build a quantity-1 candidate for Cart.add_item."""
        return cls(
            product_id=product_id,
            product_name_en=product_name_en,
            product_name_ar=product_name_ar,
            size=size,
            unit_price=unit_price,
            customizations=tuple(customizations),
            image=image,
        )

    @staticmethod
    def _check_quantity(quantity) -> None:
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise InvalidQuantityError(quantity)

    def set_quantity(self, quantity: int) -> None:
        self._check_quantity(quantity)
        self.quantity = quantity

    @property
    def currency(self) -> str:
        return self.unit_price.currency

    @property
    def customization_total(self) -> Money:
        return Money.sum(
            (customization.price for customization in self.customizations),
            currency=self.currency,
        )

    @property
    def unit_total(self) -> Money:
        """Price of one unit including customizations."""
        return self.unit_price.add(self.customization_total)

    @property
    def subtotal(self) -> Money:
        """Calculate the item subtotal."""
        return self.unit_total.multiply(self.quantity)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CartItem):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
