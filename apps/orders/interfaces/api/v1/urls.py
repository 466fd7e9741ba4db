"""
Orders API v1 URLs.
"""
from django.urls import path

from .views import CartItemView, CartView, CheckoutView

urlpatterns = [
    # Cart
    path('cart/', CartView.as_view(), name='cart'),
    path('cart/items/<path:line_item_id>/', CartItemView.as_view(), name='cart-item'),

    # Checkout
    path('checkout/', CheckoutView.as_view(), name='checkout'),
]
