"""
Order summary text for the messaging checkout.
"""
import re
from typing import List

from ..entities.cart import Cart

SEPARATOR = "━" * 16

_SUBTOTAL_RE = re.compile(r"^\s+\*Subtotal: ([\d,]+) \w+\*$", re.MULTILINE)
_TOTAL_RE = re.compile(r"^\*Total: ([\d,]+) \w+\*$", re.MULTILINE)


def _parse_amount(text: str) -> int:
    return int(text.replace(',', ''))


class OrderMessageFormatter:
    """Renders a cart as the order message customers send to the shop."""

    def __init__(self, brand_name: str = "Dr.Coffee"):
        self.brand_name = brand_name

    def format(self, cart: Cart) -> str:
        lines = [f"🍵 *{self.brand_name} Order*", ""]

        for index, item in enumerate(cart.items, start=1):
            lines.append(f"{index}. *{item.product_name_en}* ({item.size})")
            lines.append(f"   Quantity: {item.quantity}")
            lines.append(f"   Price: {item.unit_price.formatted}")
            if item.customizations:
                lines.append("   Customizations:")
                for customization in item.customizations:
                    lines.append(f"   - {customization.name_en} (+{customization.price.formatted})")
            lines.append(f"   *Subtotal: {item.subtotal.formatted}*")
            lines.append("")

        lines.append(SEPARATOR)
        lines.append(f"*Total: {cart.total_amount.formatted}*")
        lines.append("")
        lines.append("Thank you! 🙏")
        return "\n".join(lines)

    @staticmethod
    def parse_subtotals(message: str) -> List[int]:
        """Read the line subtotals back out of a formatted message."""
        return [_parse_amount(match) for match in _SUBTOTAL_RE.findall(message)]

    @staticmethod
    def parse_total(message: str) -> int:
        """Read the grand total back out of a formatted message."""
        match = _TOTAL_RE.search(message)
        if match is None:
            raise ValueError("Message has no total line")
        return _parse_amount(match.group(1))
