"""
Session cart repository tests.
"""
import pytest
from django.contrib.sessions.backends.cache import SessionStore

from apps.catalog.domain.value_objects.money import Money
from apps.orders.infrastructure.repositories.session_cart_repository import (
    SESSION_KEY,
    SessionCartRepository,
)


@pytest.fixture
def session():
    return SessionStore()


def test_load_without_stored_cart_returns_empty_cart(session):
    cart = SessionCartRepository(session, currency='IQD').load()
    assert cart.is_empty
    assert cart.currency == 'IQD'


def test_round_trip_keeps_lines_order_and_price_snapshots(session, make_item, extra_shot, vanilla):
    repository = SessionCartRepository(session, currency='IQD')
    cart = repository.load()
    first = cart.add_item(make_item('P2', 'small', 2000))
    second = cart.add_item(make_item('P1', 'medium', 3000, [vanilla, extra_shot]))
    cart.update_item_quantity(second, 3)
    repository.save(cart)

    restored = SessionCartRepository(session, currency='IQD').load()

    assert restored.id == cart.id
    assert [item.id for item in restored.items] == [first, second]
    assert restored.get_item(second).quantity == 3
    assert restored.get_item(second).customizations[0].price == Money(250)
    assert restored.total_amount == cart.total_amount
    assert session.modified


def test_stored_document_is_json_friendly(session, make_item):
    repository = SessionCartRepository(session, currency='IQD')
    cart = repository.load()
    cart.add_item(make_item())
    repository.save(cart)

    document = session[SESSION_KEY]
    assert isinstance(document['id'], str)
    assert document['items'][0]['unit_price'] == 3000

