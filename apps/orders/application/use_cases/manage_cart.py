"""
Cart read and maintenance use cases.
"""
import logging
from dataclasses import dataclass

from shared.application import UseCase, UseCaseResult
from ...domain.repositories.cart_repository import CartRepository
from ..dtos.cart_dto import CartDTO, UpdateQuantityDTO

logger = logging.getLogger(__name__)


@dataclass
class GetCartUseCase(UseCase[None, CartDTO]):
    """Return the session's cart."""

    cart_repository: CartRepository

    def execute(self, input_dto: None = None) -> UseCaseResult[CartDTO]:
        return UseCaseResult.ok(CartDTO.from_entity(self.cart_repository.load()))


@dataclass
class UpdateCartItemUseCase(UseCase[UpdateQuantityDTO, CartDTO]):
    """Set a line's quantity; zero or less removes the line."""

    cart_repository: CartRepository

    def execute(self, input_dto: UpdateQuantityDTO) -> UseCaseResult[CartDTO]:
        cart = self.cart_repository.load()
        cart.update_item_quantity(input_dto.line_item_id, input_dto.quantity)
        self.cart_repository.save(cart)
        logger.info(f"Cart {cart.id}: line {input_dto.line_item_id} quantity -> {input_dto.quantity}")
        return UseCaseResult.ok(CartDTO.from_entity(cart))


@dataclass
class RemoveCartItemUseCase(UseCase[str, CartDTO]):
    """Remove a line; unknown ids leave the cart untouched."""

    cart_repository: CartRepository

    def execute(self, input_dto: str) -> UseCaseResult[CartDTO]:
        cart = self.cart_repository.load()
        cart.remove_item(input_dto)
        self.cart_repository.save(cart)
        logger.info(f"Cart {cart.id}: removed line {input_dto}")
        return UseCaseResult.ok(CartDTO.from_entity(cart))


@dataclass
class ClearCartUseCase(UseCase[None, CartDTO]):
    """Empty the cart."""

    cart_repository: CartRepository

    def execute(self, input_dto: None = None) -> UseCaseResult[CartDTO]:
        cart = self.cart_repository.load()
        cart.clear()
        self.cart_repository.save(cart)
        logger.info(f"Cart {cart.id} cleared")
        return UseCaseResult.ok(CartDTO.from_entity(cart))
