from .session_cart_repository import SessionCartRepository

__all__ = ['SessionCartRepository']
