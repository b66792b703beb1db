"""
Event Hub
---------

Keeps track of the handlers subscribed to a set of events and calls them,
in order of subscription, when an event is emitted.
"""

from collections import defaultdict
from inspect import signature
from typing import Callable, Dict, List, Type

from .event_list import EventList
from .exceptions import InvalidHandlerError, NoSuchEventError, NoSuchListenerError


class BoundEvent:
    """An event accessed through a hub, allowing ``hub.event += handler`` and ``hub.event(...)``."""

    def __init__(self, hub: 'EventHub', event: Callable):
        self.hub = hub
        self.event = event

    def __iadd__(self, handler: Callable):
        self.hub.subscribe(self.event, handler)
        return self

    def __isub__(self, handler: Callable):
        self.hub.unsubscribe(self.event, handler)
        return self

    def __call__(self, *args, **kwargs):
        self.hub.emit(self.event, *args, **kwargs)


class EventHub:
    """Dispatches the events of one or more event lists to their subscribers."""

    def __init__(self, *event_lists: Type[EventList]):
        self._event_lists: List[Type[EventList]] = list(event_lists)
        self._listeners: Dict[Callable, List[Callable]] = defaultdict(list)

    def __contains__(self, item) -> bool:
        """Checks whether an event list or a single event is available on the hub."""
        if isinstance(item, type) and issubclass(item, EventList):
            return item in self._event_lists
        return any(item in event_list for event_list in self._event_lists)

    def __getattr__(self, name: str) -> BoundEvent:
        for event_list in self.__dict__.get("_event_lists", ()):
            event = getattr(event_list, name, None)
            if callable(event) and event in event_list:
                return BoundEvent(self, event)
        raise NoSuchEventError(f"No event {name} on this hub.")

    def __setattr__(self, name, value):
        # ``hub.event += handler`` assigns the bound event back to the hub
        if isinstance(value, BoundEvent):
            return
        super().__setattr__(name, value)

    def subscribe(self, event, handler: Callable):
        """
        Subscribes a handler to an event.

        :raises NoSuchEventError: If the event is not on the hub.
        :raises InvalidHandlerError: If the handler cannot be called with the event's arguments.
        """
        event = self._resolve(event)
        event_parameters = signature(event).parameters
        try:
            signature(handler).bind(*event_parameters)
        except TypeError as e:
            raise InvalidHandlerError(f"Handler {handler} does not match the signature of {event.__name__}.") from e

        self._listeners[event].append(handler)

    def unsubscribe(self, event, handler: Callable):
        """
        Un-subscribes a handler from an event.

        :raises NoSuchListenerError: If the handler was not subscribed to the event.
        """
        event = event.event if isinstance(event, BoundEvent) else event
        try:
            self._listeners[event].remove(handler)
        except ValueError:
            raise NoSuchListenerError(handler)

    def emit(self, event, *args, **kwargs):
        """Calls every handler of the event with the given arguments."""
        event = self._resolve(event)
        for handler in list(self._listeners[event]):
            handler(*args, **kwargs)

    def _resolve(self, event) -> Callable:
        event = event.event if isinstance(event, BoundEvent) else event
        if event not in self:
            raise NoSuchEventError(f"Event {getattr(event, '__name__', event)} is not on this hub.")
        return event
