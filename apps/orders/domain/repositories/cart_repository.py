"""
Cart repository interface.

A repository is bound to one shopper (one session), so none of the methods
take a cart id: there is exactly one cart to load or save.
"""
from abc import ABC, abstractmethod

from ..entities.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def load(self) -> Cart:
        """The shopper's cart, or a fresh empty one."""

    @abstractmethod
    def save(self, cart: Cart) -> Cart:
        ...
