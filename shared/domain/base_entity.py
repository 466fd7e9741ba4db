"""
Entities and aggregate roots.
"""
from abc import ABC
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List
from uuid import UUID, uuid4

from .domain_event import DomainEvent


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(kw_only=True, eq=False)
class BaseEntity(ABC):
    """Domain object with an identity; equality follows the id only."""
    id: UUID = field(default_factory=uuid4)
    updated_at: datetime = field(default_factory=utcnow)

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and other.id == self.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    def touch(self) -> None:
        self.updated_at = utcnow()


@dataclass(kw_only=True, eq=False)
class AggregateRoot(BaseEntity):
    """
    Consistency boundary that records what happened to it.

    Events stay pending until the application layer drains them with
    clear_domain_events(); they are never persisted with the aggregate.
    """
    _pending_events: List[DomainEvent] = field(default_factory=list, repr=False)

    def record_event(self, event: DomainEvent) -> None:
        self._pending_events.append(event)

    def clear_domain_events(self) -> List[DomainEvent]:
        events, self._pending_events = self._pending_events, []
        return events

    @property
    def domain_events(self) -> List[DomainEvent]:
        return list(self._pending_events)
