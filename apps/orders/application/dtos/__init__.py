from .cart_dto import (
    AddToCartDTO,
    UpdateQuantityDTO,
    CartDTO,
    CartItemDTO,
    CartCustomizationDTO,
)
from .checkout_dto import CheckoutDTO

__all__ = [
    'AddToCartDTO',
    'UpdateQuantityDTO',
    'CartDTO',
    'CartItemDTO',
    'CartCustomizationDTO',
    'CheckoutDTO',
]
