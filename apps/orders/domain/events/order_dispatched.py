"""
Order dispatched domain event.
"""
from dataclasses import dataclass
from uuid import UUID

from shared.domain import DomainEvent


@dataclass(frozen=True, kw_only=True)
class OrderDispatched(DomainEvent):
    """Event raised when an order summary is handed to the messaging channel."""
    cart_id: UUID
    channel: str
    destination: str
    total_amount: int
    currency: str
    item_count: int
