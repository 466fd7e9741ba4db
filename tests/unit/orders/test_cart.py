"""
Cart aggregate tests.
"""
import pytest

from apps.catalog.domain.value_objects.money import Money
from apps.orders.domain.entities.cart import Cart
from apps.orders.domain.events.cart_item_added import CartItemAdded
from apps.orders.domain.exceptions import CurrencyMismatchError
from apps.orders.domain.entities.cart_item import CartItem
from apps.orders.domain.value_objects.customization_snapshot import CustomizationSnapshot


@pytest.fixture
def cart():
    return Cart.create(currency='IQD')


class TestAddItem:

    def test_same_configuration_collapses_into_one_line(self, cart, make_item, extra_shot):
        first = cart.add_item(make_item(customizations=[extra_shot]))
        second = cart.add_item(make_item(customizations=[extra_shot]))

        assert first == second
        assert cart.line_count == 1
        assert cart.item_count == 2
        assert cart.get_item(first).subtotal == Money(7000)
        assert cart.total_amount == Money(7000)

    def test_repeated_adds_count_every_call(self, cart, make_item, extra_shot, vanilla):
        for _ in range(7):
            cart.add_item(make_item(customizations=[vanilla, extra_shot]))
        assert cart.item_count == 7
        assert cart.line_count == 1

    def test_customization_order_is_irrelevant(self, cart, make_item, extra_shot, vanilla):
        cart.add_item(make_item(customizations=[extra_shot, vanilla]))
        cart.add_item(make_item(customizations=[vanilla, extra_shot]))
        assert cart.line_count == 1

    def test_different_configurations_are_separate_lines(self, cart, make_item, extra_shot):
        cart.add_item(make_item())
        cart.add_item(make_item(customizations=[extra_shot]))
        cart.add_item(make_item(size='small', unit_price=2500))
        assert cart.line_count == 3

    def test_two_products_example(self, cart, make_item):
        cart.add_item(make_item('P1', 'medium', 3000))
        cart.add_item(make_item('P2', 'small', 2000))

        assert cart.total_amount == Money(5000)
        assert cart.item_count == 2

    def test_candidate_quantity_is_ignored(self, cart, make_item):
        candidate = make_item()
        candidate.set_quantity(5)
        cart.add_item(candidate)
        assert cart.item_count == 1

    def test_lines_keep_insertion_order(self, cart, make_item):
        ids = [cart.add_item(make_item(product_id)) for product_id in ('P3', 'P1', 'P2')]
        cart.add_item(make_item('P3'))
        assert [item.id for item in cart.items] == ids

    def test_add_emits_event(self, cart, make_item):
        line_id = cart.add_item(make_item())
        events = cart.clear_domain_events()

        assert len(events) == 1
        assert isinstance(events[0], CartItemAdded)
        assert events[0].line_item_id == line_id
        assert cart.domain_events == []

    def test_rejects_other_currency(self, cart):
        item = CartItem.compose('P1', 'Latte', 'لاتيه', 'medium', Money(5, 'USD'))
        with pytest.raises(CurrencyMismatchError):
            cart.add_item(item)

    def test_line_with_mixed_currencies_never_reaches_the_cart(self):
        cart = Cart.create('USD')
        shot = CustomizationSnapshot(id='extra_shot', name_en='Extra Shot', name_ar='شوت إضافي', price=500)

        with pytest.raises(CurrencyMismatchError):
            cart.add_item(CartItem.compose('P1', 'Latte', 'لاتيه', 'medium', Money(3000, 'USD'), [shot]))

        assert cart.is_empty
        assert cart.total_amount == Money.zero('USD')


class TestRemoveAndUpdate:

    def test_remove_unknown_id_is_a_no_op(self, cart, make_item):
        cart.add_item(make_item())
        before = cart.total_amount

        cart.remove_item('nope')

        assert cart.total_amount == before

    def test_update_quantity_in_place_keeps_position(self, cart, make_item):
        first = cart.add_item(make_item('P1'))
        second = cart.add_item(make_item('P2'))

        cart.update_item_quantity(first, 4)

        assert [item.id for item in cart.items] == [first, second]
        assert cart.get_item(first).quantity == 4
        assert cart.item_count == 5

    @pytest.mark.parametrize('quantity', [0, -3])
    def test_update_to_zero_or_less_removes(self, cart, make_item, quantity):
        kept = cart.add_item(make_item('P1'))
        dropped = cart.add_item(make_item('P2'))
        cart.update_item_quantity(dropped, 3)
        count_before = cart.item_count

        cart.update_item_quantity(dropped, quantity)

        assert cart.get_item(dropped) is None
        assert cart.item_count == count_before - 3
        assert [item.id for item in cart.items] == [kept]

    def test_update_unknown_id_is_a_no_op(self, cart, make_item):
        cart.add_item(make_item())
        cart.update_item_quantity('nope', 3)
        assert cart.item_count == 1


class TestTotalsAndState:

    def test_empty_cart_totals(self, cart):
        assert cart.is_empty
        assert cart.total_amount == Money(0)
        assert cart.item_count == 0

    def test_clear_resets_totals(self, cart, make_item, extra_shot):
        cart.add_item(make_item(customizations=[extra_shot]))
        cart.add_item(make_item('P2'))

        cart.clear()

        assert cart.is_empty
        assert cart.total_amount == Money(0)
        assert cart.item_count == 0

    def test_removing_last_line_returns_to_empty(self, cart, make_item):
        line_id = cart.add_item(make_item())
        assert not cart.is_empty
        cart.remove_item(line_id)
        assert cart.is_empty

    def test_total_is_exact_sum_of_subtotals(self, cart, make_item, extra_shot, vanilla):
        prices = [1, 333, 2999, 10001, 7]
        for index, price in enumerate(prices):
            line_id = cart.add_item(make_item(f'P{index}', unit_price=price, customizations=[vanilla]))
            cart.update_item_quantity(line_id, index + 1)
        cart.add_item(make_item('PX', unit_price=0, customizations=[extra_shot, vanilla]))

        assert cart.total_amount.amount == sum(item.subtotal.amount for item in cart.items)

    def test_items_snapshot_cannot_mutate_cart(self, cart, make_item):
        line_id = cart.add_item(make_item())
        cart.items[0].set_quantity(9)
        assert cart.get_item(line_id).quantity == 1
