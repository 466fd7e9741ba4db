"""
Line item identity value object.
"""
import json
from dataclasses import dataclass
from typing import Iterable

from shared.domain import ValueObject


@dataclass(frozen=True, eq=False)
class LineItemId(ValueObject):
    """
    Identity of a cart line: product, size and the customization set.

    Customization ids are de-duplicated and sorted before they become part
    of the key, so the order a customer picked them in does not matter.
    """
    value: str

    @classmethod
    def derive(cls, product_id: str, size: str, customization_ids: Iterable[str]) -> 'LineItemId':
        ids = sorted({str(option_id) for option_id in customization_ids})
        encoded = json.dumps(ids, separators=(',', ':'), ensure_ascii=False)
        return cls(value=f"{product_id}-{size}-{encoded}")

    def __str__(self) -> str:
        return self.value
