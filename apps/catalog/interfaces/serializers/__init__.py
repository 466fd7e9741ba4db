# Serializers
from .menu_serializer import (
    MenuQuerySerializer,
    MenuItemSerializer,
    CustomizationOptionSerializer,
)

__all__ = [
    'MenuQuerySerializer',
    'MenuItemSerializer',
    'CustomizationOptionSerializer',
]
