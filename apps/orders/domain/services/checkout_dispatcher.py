"""
Checkout dispatcher interface.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class DispatchReceipt:
    """What the channel accepted: where the message goes and how to open it."""
    channel: str
    destination: str
    url: str


class CheckoutDispatcher(ABC):
    """Hands a formatted order to an external messaging channel."""

    channel: str = ""

    @abstractmethod
    def dispatch(self, message: str, destination: str) -> DispatchReceipt:
        """Accept the message for delivery; delivery itself is not confirmed."""
        pass
