"""
Catalog domain exceptions.
"""
from shared.domain.exceptions import (
    EntityNotFoundError,
    ExternalServiceError,
    ValidationError,
)


class InvalidPriceError(ValidationError):
    """Raised when price data is negative or not a whole number of minor units."""

    def __init__(self, value, field: str = "price"):
        super().__init__(
            message=f"Invalid price value: {value!r}",
            field=field,
            code="INVALID_PRICE",
        )
        self.value = value


class SizeNotAvailableError(ValidationError):
    """Raised when a product is not sold in the requested size."""

    def __init__(self, product_code: str, size: str):
        super().__init__(
            message=f"Product '{product_code}' is not available in size '{size}'",
            field="size",
            code="SIZE_NOT_AVAILABLE",
        )
        self.product_code = product_code
        self.size = size


class ProductNotFoundError(EntityNotFoundError):
    """Raised when a product code is unknown to the catalog."""

    def __init__(self, identifier: str):
        super().__init__(entity_name="Product", entity_id=identifier, code="PRODUCT_NOT_FOUND")
        self.identifier = identifier


class MalformedCatalogRecordError(ValidationError):
    """Raised when a catalog record is missing required fields or has unusable values."""

    def __init__(self, record: str, reason: str):
        super().__init__(
            message=f"Malformed catalog {record}: {reason}",
            code="MALFORMED_CATALOG_RECORD",
        )
        self.record = record
        self.reason = reason


class CurrencyMismatchError(ValidationError):
    """Raised when amounts in different currencies are combined."""

    def __init__(self, expected: str, actual: str):
        super().__init__(
            message=f"Expected an amount in {expected}, got {actual}",
            field="currency",
            code="CURRENCY_MISMATCH",
        )
        self.expected = expected
        self.actual = actual


class CatalogUnavailableError(ExternalServiceError):
    """Raised when the catalog backend cannot be reached."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Catalog service unavailable: {reason}",
            service="catalog",
            code="CATALOG_UNAVAILABLE",
        )
        self.reason = reason


__all__ = [
    'InvalidPriceError',
    'SizeNotAvailableError',
    'ProductNotFoundError',
    'CurrencyMismatchError',
    'MalformedCatalogRecordError',
    'CatalogUnavailableError',
]
