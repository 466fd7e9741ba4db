"""
Money value object.

Amounts are whole numbers of the currency's smallest unit, so every sum
and product is exact.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterable

from shared.domain import ValueObject
from ..exceptions import CurrencyMismatchError, InvalidPriceError

DEFAULT_CURRENCY = "IQD"


def _to_minor_units(value) -> int:
    if isinstance(value, bool):
        raise InvalidPriceError(value)
    if isinstance(value, int):
        return value
    try:
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        raise InvalidPriceError(value)
    if not amount.is_finite() or amount != amount.to_integral_value():
        raise InvalidPriceError(value)
    return int(amount)


@dataclass(frozen=True, eq=False)
class Money(ValueObject):
    """Money value object with currency."""
    amount: int
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self):
        object.__setattr__(self, 'amount', _to_minor_units(self.amount))

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> 'Money':
        return cls(amount=0, currency=currency)

    @classmethod
    def sum(cls, values: Iterable['Money'], currency: str = DEFAULT_CURRENCY) -> 'Money':
        """Add up money values, starting from zero."""
        total = cls.zero(currency)
        for value in values:
            total = total.add(value)
        return total

    def add(self, other: 'Money') -> 'Money':
        """Add two money values."""
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def multiply(self, factor: int) -> 'Money':
        """Multiply money by a whole factor."""
        return Money(amount=self.amount * factor, currency=self.currency)

    @property
    def is_negative(self) -> bool:
        return self.amount < 0

    @property
    def formatted(self) -> str:
        """Get formatted money string, e.g. ``3,500 IQD``."""
        return f"{self.amount:,} {self.currency}"

    def __str__(self) -> str:
        return self.formatted
