# Domain events
from .cart_item_added import CartItemAdded
from .order_dispatched import OrderDispatched

__all__ = ['CartItemAdded', 'OrderDispatched']
