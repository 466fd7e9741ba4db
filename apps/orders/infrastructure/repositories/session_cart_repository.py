"""
Django session implementation of CartRepository.
"""
import logging
from typing import Any, Dict
from uuid import UUID

from apps.catalog.domain.value_objects.money import Money
from ...domain.entities.cart import Cart
from ...domain.entities.cart_item import CartItem
from ...domain.repositories.cart_repository import CartRepository
from ...domain.value_objects.customization_snapshot import CustomizationSnapshot

logger = logging.getLogger(__name__)

SESSION_KEY = 'cart'


class SessionCartRepository(CartRepository):
    """Keeps the cart in the visitor's Django session as a JSON document."""

    def __init__(self, session, currency: str):
        self.session = session
        self.currency = currency

    def load(self) -> Cart:
        document = self.session.get(SESSION_KEY)
        if not document:
            return Cart.create(currency=self.currency)
        return self._to_entity(document)

    def save(self, cart: Cart) -> Cart:
        self.session[SESSION_KEY] = self._to_document(cart)
        self.session.modified = True
        return cart

    def _to_document(self, cart: Cart) -> Dict[str, Any]:
        return {
            'id': str(cart.id),
            'currency': cart.currency,
            'items': [
                {
                    'product_id': item.product_id,
                    'product_name_en': item.product_name_en,
                    'product_name_ar': item.product_name_ar,
                    'size': item.size,
                    'unit_price': item.unit_price.amount,
                    'quantity': item.quantity,
                    'image': item.image,
                    'customizations': [
                        {
                            'id': customization.id,
                            'name_en': customization.name_en,
                            'name_ar': customization.name_ar,
                            'price': customization.price.amount,
                        }
                        for customization in item.customizations
                    ],
                }
                for item in cart.items
            ],
        }

    def _to_entity(self, document: Dict[str, Any]) -> Cart:
        currency = document.get('currency', self.currency)
        items = [
            CartItem(
                product_id=entry['product_id'],
                product_name_en=entry['product_name_en'],
                product_name_ar=entry['product_name_ar'],
                size=entry['size'],
                unit_price=Money(amount=entry['unit_price'], currency=currency),
                quantity=entry['quantity'],
                image=entry.get('image'),
                customizations=tuple(
                    CustomizationSnapshot(
                        id=customization['id'],
                        name_en=customization['name_en'],
                        name_ar=customization['name_ar'],
                        price=Money(amount=customization['price'], currency=currency),
                    )
                    for customization in entry.get('customizations', [])
                ),
            )
            for entry in document.get('items', [])
        ]
        logger.debug(f"Restored cart {document['id']} with {len(items)} line(s)")
        return Cart.restore(cart_id=UUID(document['id']), items=items, currency=currency)
