"""
Checkout DTOs.
"""
from dataclasses import dataclass


@dataclass
class CheckoutDTO:
    """DTO for checkout output."""
    channel: str
    destination: str
    url: str
    message: str
    total_amount: int
    item_count: int
    currency: str
