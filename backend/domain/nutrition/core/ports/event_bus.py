"""Event bus port (interface).

Application handlers publish profile events through this contract;
infrastructure decides how they are delivered.
"""

from typing import Awaitable, Callable, Protocol, Type, TypeVar

from ..events.base import DomainEvent

TEvent = TypeVar("TEvent", bound=DomainEvent)

EventHandler = Callable[[TEvent], Awaitable[None]]


class IEventBus(Protocol):
    """Interface for event publishing and subscription.

    Example usage (application layer):
        >>> async def on_targets_recalculated(event: TargetsRecalculated) -> None:
        ...     print(f"New goal {event.calorie_goal} for {event.user_id}")
        ...
        >>> event_bus.subscribe(TargetsRecalculated, on_targets_recalculated)
        >>> await event_bus.publish(event)
    """

    def subscribe(
        self,
        event_type: Type[TEvent],
        handler: EventHandler[TEvent],
    ) -> None:
        """Subscribe a handler to an event type."""
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish an event to all handlers subscribed to its type.

        Handlers run in subscription order; a failing handler must not
        prevent the others from running.
        """
        ...

    def unsubscribe(
        self,
        event_type: Type[TEvent],
        handler: EventHandler[TEvent],
    ) -> bool:
        """Unsubscribe a handler; True if it was subscribed."""
        ...
