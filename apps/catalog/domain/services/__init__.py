# Domain services
from .customization_lookup import resolve_customizations, customization_options_for
from .menu_filter import MenuQuery, filter_menu, list_categories

__all__ = [
    'resolve_customizations',
    'customization_options_for',
    'MenuQuery',
    'filter_menu',
    'list_categories',
]
