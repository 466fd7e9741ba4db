# Value objects
from .money import Money, DEFAULT_CURRENCY

__all__ = ['Money', 'DEFAULT_CURRENCY']
