"""
Application-layer building blocks.

Use cases raise domain exceptions on failure; a returned result is always a
success and carries whatever domain events the use case drained from the
aggregates it touched.
"""
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Iterable, Tuple, TypeVar

from shared.domain import AggregateRoot, DomainEvent

logger = logging.getLogger(__name__)

InputDTO = TypeVar('InputDTO')
OutputDTO = TypeVar('OutputDTO')


@dataclass(frozen=True)
class UseCaseResult(Generic[OutputDTO]):
    data: OutputDTO
    events: Tuple[DomainEvent, ...] = ()

    @classmethod
    def ok(cls, data: OutputDTO, events: Iterable[DomainEvent] = ()) -> 'UseCaseResult[OutputDTO]':
        return cls(data=data, events=tuple(events))


class UseCase(ABC, Generic[InputDTO, OutputDTO]):

    @abstractmethod
    def execute(self, input_dto: InputDTO) -> UseCaseResult[OutputDTO]:
        pass

    def collect_events(self, aggregate: AggregateRoot) -> Tuple[DomainEvent, ...]:
        """Drain the aggregate's pending events, logging each one."""
        events = tuple(aggregate.clear_domain_events())
        for event in events:
            logger.info(
                f"{type(self).__name__}: {event.event_type} on "
                f"{type(aggregate).__name__} {aggregate.id} {event.payload()}"
            )
        return events
