# Domain services
from .checkout_dispatcher import CheckoutDispatcher, DispatchReceipt
from .order_message_formatter import OrderMessageFormatter

__all__ = ['CheckoutDispatcher', 'DispatchReceipt', 'OrderMessageFormatter']
