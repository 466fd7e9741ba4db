# Serializers
from .cart_serializer import (
    CartSerializer,
    CartItemSerializer,
    CartItemCreateSerializer,
    CartItemUpdateSerializer,
)
from .checkout_serializer import CheckoutSerializer

__all__ = [
    'CartSerializer',
    'CartItemSerializer',
    'CartItemCreateSerializer',
    'CartItemUpdateSerializer',
    'CheckoutSerializer',
]
