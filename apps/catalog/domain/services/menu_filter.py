"""
Menu search and filtering.
"""
from dataclasses import dataclass
from typing import Iterable, List

from ..entities.product import MenuProduct

ALL = "all"
TEMPERATURE_COLD = "Cold"
TEMPERATURE_HOT = "Hot"
CAFFEINE_FREE = "caffeine-free"
TEMPERATURE_FILTERS = (ALL, TEMPERATURE_COLD, TEMPERATURE_HOT, CAFFEINE_FREE)


@dataclass(frozen=True)
class MenuQuery:
    """Search text plus the temperature and category filters."""
    search: str = ""
    temperature: str = ALL
    category: str = ALL


def _matches_search(product: MenuProduct, needle: str) -> bool:
    return (
        needle in product.name_en.lower()
        or needle in product.name_ar.lower()
        or needle in product.code.lower()
    )


def _matches_temperature(product: MenuProduct, temperature: str) -> bool:
    if temperature in (TEMPERATURE_COLD, TEMPERATURE_HOT):
        return temperature in product.tags
    if temperature == CAFFEINE_FREE:
        return product.caffeine_index == 0
    return True


def filter_menu(products: Iterable[MenuProduct], query: MenuQuery) -> List[MenuProduct]:
    """Apply a menu query; inactive products never show up."""
    needle = query.search.strip().lower()
    filtered = []

    for product in products:
        if not product.is_active:
            continue
        if needle and not _matches_search(product, needle):
            continue
        if not _matches_temperature(product, query.temperature):
            continue
        if query.category != ALL and product.category != query.category:
            continue
        filtered.append(product)

    return filtered


def list_categories(products: Iterable[MenuProduct]) -> List[str]:
    """Unique categories in first-seen order, prefixed with ``all``."""
    categories = [ALL]
    for product in products:
        if product.is_active and product.category and product.category not in categories:
            categories.append(product.category)
    return categories
