"""
Checkout use case.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.events.order_dispatched import OrderDispatched
from ...domain.exceptions import EmptyCartError
from ...domain.repositories.cart_repository import CartRepository
from ...domain.services.checkout_dispatcher import CheckoutDispatcher
from ...domain.services.order_message_formatter import OrderMessageFormatter
from ..dtos.checkout_dto import CheckoutDTO

logger = logging.getLogger(__name__)


@dataclass
class CheckoutUseCase(UseCase[None, CheckoutDTO]):
    """
    Format the cart as an order message and hand it to the dispatcher.

    The cart is cleared only once the dispatcher has accepted the message;
    if dispatch raises, the cart is left as it was.
    """

    cart_repository: CartRepository
    formatter: OrderMessageFormatter
    dispatcher: CheckoutDispatcher
    destination: str

    def execute(self, input_dto: None = None) -> UseCaseResult[CheckoutDTO]:
        cart = self.cart_repository.load()
        if cart.is_empty:
            raise EmptyCartError()

        message = self.formatter.format(cart)
        total = cart.total_amount
        item_count = cart.item_count

        receipt = self.dispatcher.dispatch(message, self.destination)

        cart.record_event(
            OrderDispatched(
                cart_id=cart.id,
                channel=receipt.channel,
                destination=receipt.destination,
                total_amount=total.amount,
                currency=total.currency,
                item_count=item_count,
            )
        )
        cart.clear()
        self.cart_repository.save(cart)

        logger.info(
            f"Cart {cart.id} checked out: total={total.formatted} "
            f"items={item_count} via {receipt.channel}"
        )
        return UseCaseResult.ok(
            CheckoutDTO(
                channel=receipt.channel,
                destination=receipt.destination,
                url=receipt.url,
                message=message,
                total_amount=total.amount,
                item_count=item_count,
                currency=total.currency,
            ),
            events=self.collect_events(cart),
        )
