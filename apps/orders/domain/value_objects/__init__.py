# Value objects
from .customization_snapshot import CustomizationSnapshot
from .line_item_id import LineItemId

__all__ = ['CustomizationSnapshot', 'LineItemId']
