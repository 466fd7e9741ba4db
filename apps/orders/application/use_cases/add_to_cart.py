"""
Add to cart use case.
"""
import logging
from dataclasses import dataclass

from apps.catalog.domain.exceptions import ProductNotFoundError
from apps.catalog.domain.repositories.catalog_provider import CatalogProvider
from apps.catalog.domain.services.customization_lookup import resolve_customizations
from shared.application import UseCase, UseCaseResult
from ...domain.entities.cart_item import CartItem
from ...domain.repositories.cart_repository import CartRepository
from ...domain.value_objects.customization_snapshot import CustomizationSnapshot
from ..dtos.cart_dto import AddToCartDTO, CartDTO

logger = logging.getLogger(__name__)


@dataclass
class AddToCartUseCase(UseCase[AddToCartDTO, CartDTO]):
    """
    Price a product configuration against the catalog and add it to the cart.

    The catalog is consulted only here; the resulting line keeps the names
    and prices it was added with.
    """

    catalog: CatalogProvider
    cart_repository: CartRepository

    def execute(self, input_dto: AddToCartDTO) -> UseCaseResult[CartDTO]:
        product = self.catalog.get_product(input_dto.product_code)
        if not product.is_active:
            raise ProductNotFoundError(input_dto.product_code)

        size = input_dto.size.lower()
        unit_price = product.price_for(size)

        requested = [str(option_id) for option_id in input_dto.customization_ids]
        linked = [option_id for option_id in requested if product.offers_customization(option_id)]
        if len(linked) != len(requested):
            logger.warning(
                f"Dropping customizations not offered for {product.code}: "
                f"{sorted(set(requested) - set(linked))}"
            )
        options = resolve_customizations(linked, self.catalog.list_customization_options()) if linked else []

        candidate = CartItem.compose(
            product_id=product.code,
            product_name_en=product.name_en,
            product_name_ar=product.name_ar,
            size=size,
            unit_price=unit_price,
            customizations=[CustomizationSnapshot.from_option(option) for option in options],
            image=product.image_url,
        )

        cart = self.cart_repository.load()
        line_item_id = cart.add_item(candidate)
        self.cart_repository.save(cart)

        logger.info(f"Cart {cart.id}: added {line_item_id} for {unit_price.formatted}")
        return UseCaseResult.ok(
            CartDTO.from_entity(cart, line_item_id=line_item_id),
            events=self.collect_events(cart),
        )
