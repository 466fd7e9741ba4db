# Domain entities
from .customization_option import CustomizationOption
from .product import MenuProduct

__all__ = ['CustomizationOption', 'MenuProduct']
