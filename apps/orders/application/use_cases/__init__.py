from .add_to_cart import AddToCartUseCase
from .checkout import CheckoutUseCase
from .manage_cart import (
    GetCartUseCase,
    UpdateCartItemUseCase,
    RemoveCartItemUseCase,
    ClearCartUseCase,
)

__all__ = [
    'AddToCartUseCase',
    'CheckoutUseCase',
    'GetCartUseCase',
    'UpdateCartItemUseCase',
    'RemoveCartItemUseCase',
    'ClearCartUseCase',
]
