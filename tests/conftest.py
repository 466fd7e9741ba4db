"""
Pytest configuration and fixtures.
"""
import copy

import pytest
from django.core.cache import cache

from apps.catalog.domain.value_objects.money import Money
from apps.catalog.infrastructure.providers.static_catalog_provider import StaticCatalogProvider
from apps.orders.domain.entities.cart_item import CartItem
from apps.orders.domain.value_objects.customization_snapshot import CustomizationSnapshot

MENU_DOCUMENT = {
    'products': [
        {
            'productId': 1,
            'productCode': 'P1',
            'nameEn': 'Spanish Latte',
            'nameAr': 'سبانش لاتيه',
            'imageUrl': '/images/p1.jpg',
            'categoryName': 'Coffee',
            'caffeineIndex': 3,
            'isCustomizable': True,
            'isActive': True,
            'prices': [
                {'productPriceId': 1, 'size': 'Small', 'price': 2500, 'isActive': True},
                {'productPriceId': 2, 'size': 'Medium', 'price': 3000, 'isActive': True},
                {'productPriceId': 3, 'size': 'Large', 'price': 3500, 'isActive': False},
            ],
            'tags': ['Hot'],
            'flavors': ['Sweet'],
            'customizationOptionIds': [1, 2, 4],
        },
        {
            'productId': 2,
            'productCode': 'P2',
            'nameEn': 'Iced Americano',
            'nameAr': 'ايس امريكانو',
            'categoryName': 'Coffee',
            'caffeineIndex': 4,
            'isCustomizable': False,
            'isActive': True,
            'prices': [
                {'productPriceId': 4, 'size': 'Small', 'price': 2000, 'isActive': True},
            ],
            'tags': ['Cold'],
            'flavors': [],
            'customizationOptionIds': [],
        },
        {
            'productId': 3,
            'productCode': 'P3',
            'nameEn': 'Hibiscus Tea',
            'nameAr': 'شاي الكركديه',
            'categoryName': 'Tea',
            'caffeineIndex': 0,
            'isCustomizable': False,
            'isActive': True,
            'prices': [
                {'productPriceId': 5, 'size': 'Medium', 'price': 1500, 'isActive': True},
            ],
            'tags': ['Cold', 'Hot'],
            'flavors': ['Floral'],
            'customizationOptionIds': [],
        },
        {
            'productId': 4,
            'productCode': 'P4',
            'nameEn': 'Seasonal Mocha',
            'nameAr': 'موكا موسمية',
            'categoryName': 'Seasonal',
            'caffeineIndex': 2,
            'isCustomizable': False,
            'isActive': False,
            'prices': [
                {'productPriceId': 6, 'size': 'Medium', 'price': 4000, 'isActive': True},
            ],
            'tags': ['Hot'],
            'flavors': [],
            'customizationOptionIds': [],
        },
    ],
    'customizationOptions': [
        {'customizationOptionId': 1, 'optionCode': 'extra_shot', 'nameEn': 'Extra Shot',
         'nameAr': 'شوت إضافي', 'price': 500, 'isActive': True, 'displayOrder': 1},
        {'customizationOptionId': 2, 'optionCode': 'vanilla', 'nameEn': 'Vanilla Syrup',
         'nameAr': 'سيرب فانيلا', 'price': 250, 'isActive': True, 'displayOrder': 2},
        {'customizationOptionId': 3, 'optionCode': 'caramel', 'nameEn': 'Caramel Syrup',
         'nameAr': 'سيرب كراميل', 'price': 250, 'isActive': True, 'displayOrder': 3},
        {'customizationOptionId': 4, 'optionCode': 'oat_milk', 'nameEn': 'Oat Milk',
         'nameAr': 'حليب الشوفان', 'price': 750, 'isActive': False, 'displayOrder': 4},
    ],
}


@pytest.fixture(autouse=True)
def clear_cache():
    """Sessions and catalog payloads live in the cache; start every test empty."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def menu_document():
    return copy.deepcopy(MENU_DOCUMENT)


@pytest.fixture
def catalog(menu_document):
    """Catalog provider serving the test menu."""
    return StaticCatalogProvider(menu_document, currency='IQD')


@pytest.fixture
def use_test_catalog(monkeypatch, catalog):
    """Route every view to the test menu instead of the REST backend."""
    factory = lambda: catalog  # noqa: E731
    monkeypatch.setattr('apps.catalog.interfaces.api.v1.views.get_catalog_provider', factory)
    monkeypatch.setattr('apps.orders.interfaces.api.v1.views.get_catalog_provider', factory)
    monkeypatch.setattr('shared.interfaces.health_views.get_catalog_provider', factory)
    return catalog


@pytest.fixture
def api_client():
    """Create an API client for testing."""
    from rest_framework.test import APIClient
    return APIClient()


@pytest.fixture
def extra_shot():
    return CustomizationSnapshot(id='extra_shot', name_en='Extra Shot', name_ar='شوت إضافي', price=Money(500))


@pytest.fixture
def vanilla():
    return CustomizationSnapshot(id='vanilla', name_en='Vanilla Syrup', name_ar='سيرب فانيلا', price=Money(250))


@pytest.fixture
def make_item():
    """Factory for line item candidates."""
    def _make_item(product_id='P1', size='medium', unit_price=3000, customizations=(), name='Latte'):
        return CartItem.compose(
            product_id=product_id,
            product_name_en=name,
            product_name_ar=name,
            size=size,
            unit_price=Money(unit_price),
            customizations=customizations,
        )
    return _make_item
