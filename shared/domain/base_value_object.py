"""
Value objects: immutable and compared by their field values.
"""
from dataclasses import dataclass, fields
from typing import Any, Tuple


@dataclass(frozen=True, eq=False)
class ValueObject:
    """Subclasses are frozen dataclasses; instances of different classes never compare equal."""

    def _components(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, f.name) for f in fields(self) if f.compare)

    def __eq__(self, other: Any) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._components() == other._components()

    def __hash__(self) -> int:
        return hash((type(self).__name__,) + self._components())
