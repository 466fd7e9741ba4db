"""
Cart item added domain event.
"""
from dataclasses import dataclass
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True, kw_only=True)
class CartItemAdded(DomainEvent):
    """Event raised when a unit of a configured product is added to a cart."""
    cart_id: UUID
    line_item_id: str
    quantity: int
