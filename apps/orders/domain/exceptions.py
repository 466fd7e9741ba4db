"""
Order domain exceptions.
"""
from apps.catalog.domain.exceptions import CurrencyMismatchError
from shared.domain.exceptions import BusinessRuleViolationError, ValidationError


class EmptyCartError(BusinessRuleViolationError):
    """Raised when trying to checkout an empty cart."""

    def __init__(self):
        super().__init__(
            message="Cannot checkout an empty cart",
            rule="cart_not_empty",
            code="EMPTY_CART",
        )


class InvalidQuantityError(ValidationError):
    """Raised when a line item is given a quantity that is not a positive integer."""

    def __init__(self, quantity):
        super().__init__(
            message=f"Quantity must be a positive integer, got {quantity!r}",
            field="quantity",
            code="INVALID_QUANTITY",
        )
        self.quantity = quantity


class InvalidDestinationError(ValidationError):
    """Raised when a checkout destination cannot receive messages."""

    def __init__(self, destination: str):
        super().__init__(
            message=f"Invalid checkout destination: '{destination}'",
            field="destination",
            code="INVALID_DESTINATION",
        )
        self.destination = destination


__all__ = [
    'CurrencyMismatchError',
    'EmptyCartError',
    'InvalidQuantityError',
    'InvalidDestinationError',
]
