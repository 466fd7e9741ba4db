"""
Cart entity (Aggregate Root).
"""
from dataclasses import dataclass, field, replace
from typing import Dict, Iterable, Optional, Tuple
from uuid import UUID

from apps.catalog.domain.value_objects.money import DEFAULT_CURRENCY, Money
from shared.domain import AggregateRoot
from ..events.cart_item_added import CartItemAdded
from ..exceptions import CurrencyMismatchError
from .cart_item import CartItem


@dataclass(kw_only=True, eq=False)
class Cart(AggregateRoot):
    """Shopping cart: line items keyed by their derived id, in insertion order."""
    currency: str = DEFAULT_CURRENCY
    _items: Dict[str, CartItem] = field(default_factory=dict, repr=False)

    @classmethod
    def create(cls, currency: str = DEFAULT_CURRENCY) -> 'Cart':
        """Create a new empty cart."""
        return cls(currency=currency)

    @classmethod
    def restore(
        cls,
        cart_id: UUID,
        items: Iterable[CartItem],
        currency: str = DEFAULT_CURRENCY,
    ) -> 'Cart':
        """Rebuild a cart from stored line items, keeping their order."""
        return cls(id=cart_id, currency=currency, _items={item.id: item for item in items})

    def add_item(self, candidate: CartItem) -> str:
        """
        Add one unit of a configured product.

        A line with the same derived id gets its quantity bumped by one;
        otherwise the candidate is appended with quantity 1.
        """
        if candidate.currency != self.currency:
            raise CurrencyMismatchError(self.currency, candidate.currency)

        existing = self._items.get(candidate.id)
        if existing:
            existing.set_quantity(existing.quantity + 1)
            item = existing
        else:
            item = replace(candidate, quantity=1)
            self._items[item.id] = item

        self.touch()
        self.record_event(
            CartItemAdded(
                cart_id=self.id,
                line_item_id=item.id,
                quantity=item.quantity,
            )
        )
        return item.id

    def update_item_quantity(self, line_item_id: str, quantity: int) -> None:
        """Update the quantity of an item; zero or less removes it."""
        if quantity <= 0:
            self.remove_item(line_item_id)
            return

        item = self._items.get(line_item_id)
        if item:
            item.set_quantity(quantity)
            self.touch()

    def remove_item(self, line_item_id: str) -> None:
        """Remove an item from the cart; unknown ids are ignored."""
        if self._items.pop(line_item_id, None) is not None:
            self.touch()

    def clear(self) -> None:
        """Clear all items from the cart."""
        self._items = {}
        self.touch()

    def get_item(self, line_item_id: str) -> Optional[CartItem]:
        item = self._items.get(line_item_id)
        return replace(item) if item else None

    @property
    def items(self) -> Tuple[CartItem, ...]:
        """Ordered copies of the line items, safe to hand to renderers."""
        return tuple(replace(item) for item in self._items.values())

    @property
    def total_amount(self) -> Money:
        """Calculate the total cart amount."""
        return Money.sum((item.subtotal for item in self._items.values()), currency=self.currency)

    @property
    def item_count(self) -> int:
        """Get the total number of units, not lines."""
        return sum(item.quantity for item in self._items.values())

    @property
    def line_count(self) -> int:
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        """Check if the cart is empty."""
        return len(self._items) == 0
