"""
Cart DTOs.
"""
from dataclasses import dataclass, field
from typing import List, Optional
from uuid import UUID

from ...domain.entities.cart import Cart
from ...domain.entities.cart_item import CartItem


@dataclass
class AddToCartDTO:
    """DTO for adding a configured product to the cart."""
    product_code: str
    size: str
    customization_ids: List[str] = field(default_factory=list)


@dataclass
class UpdateQuantityDTO:
    """DTO for changing a line item's quantity."""
    line_item_id: str
    quantity: int


@dataclass
class CartCustomizationDTO:
    id: str
    name_en: str
    name_ar: str
    price: int


@dataclass
class CartItemDTO:
    """DTO for cart item output."""
    id: str
    product_id: str
    product_name_en: str
    product_name_ar: str
    size: str
    unit_price: int
    quantity: int
    customizations: List[CartCustomizationDTO]
    subtotal: int
    image: Optional[str] = None

    @classmethod
    def from_entity(cls, item: CartItem) -> 'CartItemDTO':
        return cls(
            id=item.id,
            product_id=item.product_id,
            product_name_en=item.product_name_en,
            product_name_ar=item.product_name_ar,
            size=item.size,
            unit_price=item.unit_price.amount,
            quantity=item.quantity,
            customizations=[
                CartCustomizationDTO(
                    id=customization.id,
                    name_en=customization.name_en,
                    name_ar=customization.name_ar,
                    price=customization.price.amount,
                )
                for customization in item.customizations
            ],
            subtotal=item.subtotal.amount,
            image=item.image,
        )


@dataclass
class CartDTO:
    """DTO for cart output."""
    id: UUID
    items: List[CartItemDTO]
    total_amount: int
    total_display: str
    item_count: int
    currency: str
    is_empty: bool
    line_item_id: Optional[str] = None

    @classmethod
    def from_entity(cls, cart: Cart, line_item_id: Optional[str] = None) -> 'CartDTO':
        total = cart.total_amount
        return cls(
            id=cart.id,
            items=[CartItemDTO.from_entity(item) for item in cart.items],
            total_amount=total.amount,
            total_display=total.formatted,
            item_count=cart.item_count,
            currency=cart.currency,
            is_empty=cart.is_empty,
            line_item_id=line_item_id,
        )
