"""
Cart and checkout use case tests.
"""
from unittest.mock import MagicMock

import pytest
from django.contrib.sessions.backends.cache import SessionStore

from apps.catalog.domain.exceptions import ProductNotFoundError, SizeNotAvailableError
from apps.orders.application.dtos.cart_dto import AddToCartDTO, UpdateQuantityDTO
from apps.orders.application.use_cases.add_to_cart import AddToCartUseCase
from apps.orders.application.use_cases.checkout import CheckoutUseCase
from apps.orders.application.use_cases.manage_cart import (
    ClearCartUseCase,
    GetCartUseCase,
    RemoveCartItemUseCase,
    UpdateCartItemUseCase,
)
from apps.orders.domain.exceptions import EmptyCartError
from apps.orders.domain.services.order_message_formatter import OrderMessageFormatter
from apps.orders.infrastructure.dispatchers.whatsapp_dispatcher import WhatsAppDispatcher
from apps.orders.infrastructure.repositories.session_cart_repository import SessionCartRepository


@pytest.fixture
def repository():
    return SessionCartRepository(SessionStore(), currency='IQD')


@pytest.fixture
def add_to_cart(catalog, repository):
    def _add(product_code='P1', size='medium', customization_ids=()):
        use_case = AddToCartUseCase(catalog=catalog, cart_repository=repository)
        return use_case.execute(
            AddToCartDTO(product_code=product_code, size=size, customization_ids=list(customization_ids))
        ).data
    return _add


class TestAddToCart:

    def test_result_carries_cart_item_added_event(self, catalog, repository):
        use_case = AddToCartUseCase(catalog=catalog, cart_repository=repository)

        result = use_case.execute(AddToCartDTO(product_code='P2', size='small', customization_ids=[]))

        assert [event.event_type for event in result.events] == ['CartItemAdded']
        assert result.events[0].line_item_id == result.data.line_item_id

    def test_prices_from_catalog_at_add_time(self, add_to_cart):
        cart = add_to_cart('P1', 'Medium', ['1'])

        assert cart.line_item_id == 'P1-medium-["1"]'
        item = cart.items[0]
        assert item.product_name_en == 'Spanish Latte'
        assert item.unit_price == 3000
        assert item.customizations[0].name_en == 'Extra Shot'
        assert cart.total_amount == 3500

    def test_second_add_bumps_quantity(self, add_to_cart):
        add_to_cart('P1', 'medium', ['1'])
        cart = add_to_cart('P1', 'medium', ['1'])

        assert len(cart.items) == 1
        assert cart.items[0].quantity == 2
        assert cart.total_amount == 7000

    def test_unlinked_unknown_and_inactive_customizations_are_dropped(self, add_to_cart):
        # 3 is not linked to P1, 4 is linked but inactive, 99 does not exist
        cart = add_to_cart('P1', 'medium', ['2', '3', '4', '99'])

        assert [c.id for c in cart.items[0].customizations] == ['2']
        assert cart.total_amount == 3250

    def test_price_snapshot_survives_catalog_changes(self, add_to_cart, menu_document):
        add_to_cart('P1', 'medium')
        menu_document['products'][0]['prices'][1]['price'] = 9999

        cart = add_to_cart('P2', 'small')

        assert cart.total_amount == 3000 + 2000

    def test_unknown_size_raises(self, add_to_cart):
        with pytest.raises(SizeNotAvailableError):
            add_to_cart('P1', 'large')

    def test_inactive_product_cannot_be_added(self, add_to_cart):
        with pytest.raises(ProductNotFoundError):
            add_to_cart('P4', 'medium')


class TestManageCart:

    def test_update_remove_and_clear(self, add_to_cart, repository):
        line_id = add_to_cart('P1', 'medium').line_item_id
        other_id = add_to_cart('P2', 'small').line_item_id

        cart = UpdateCartItemUseCase(repository).execute(UpdateQuantityDTO(line_id, 3)).data
        assert cart.item_count == 4

        cart = UpdateCartItemUseCase(repository).execute(UpdateQuantityDTO(line_id, 0)).data
        assert [item.id for item in cart.items] == [other_id]

        cart = RemoveCartItemUseCase(repository).execute('missing').data
        assert cart.item_count == 1

        cart = ClearCartUseCase(repository).execute().data
        assert cart.is_empty
        assert GetCartUseCase(repository).execute().data.total_amount == 0


class TestCheckout:

    def make_use_case(self, repository, dispatcher=None):
        return CheckoutUseCase(
            cart_repository=repository,
            formatter=OrderMessageFormatter(brand_name='Dr.Coffee'),
            dispatcher=dispatcher or WhatsAppDispatcher(),
            destination='9647772270005',
        )

    def test_checkout_dispatches_and_clears(self, add_to_cart, repository):
        add_to_cart('P1', 'medium', ['1'])
        add_to_cart('P1', 'medium', ['1'])

        checkout = self.make_use_case(repository).execute().data

        assert checkout.url.startswith('https://wa.me/9647772270005?text=')
        assert checkout.total_amount == 7000
        assert checkout.item_count == 2
        assert '*Total: 7,000 IQD*' in checkout.message
        assert repository.load().is_empty

    def test_checkout_reports_dispatch_event(self, add_to_cart, repository):
        add_to_cart('P2', 'small')

        result = self.make_use_case(repository).execute()

        assert [event.event_type for event in result.events] == ['OrderDispatched']
        assert result.events[0].total_amount == 2000
        assert result.events[0].channel == 'whatsapp'

    def test_empty_cart_cannot_checkout(self, repository):
        with pytest.raises(EmptyCartError):
            self.make_use_case(repository).execute()

    def test_failed_dispatch_keeps_cart(self, add_to_cart, repository):
        add_to_cart('P2', 'small')
        dispatcher = MagicMock()
        dispatcher.dispatch.side_effect = RuntimeError('channel down')

        with pytest.raises(RuntimeError):
            self.make_use_case(repository, dispatcher).execute()

        assert repository.load().item_count == 1
