"""
.. autoclasstree:: scooters.events

This module provides a simple event system. It is centered around the use of hubs.
A hub is created by passing a number of event lists in. These event lists provide
typed callback signatures which subscribers can use to implement their handlers.

>>> class FleetEvents(EventList):
>>>     @staticmethod
>>>     def scooter_added(scooter_id: str):
>>>         "A scooter joined the fleet."
>>>
>>> def fleet_handler(scooter_id):
>>>     print(f"New scooter: {scooter_id}")
>>>
>>> hub = EventHub(FleetEvents)
>>> hub.subscribe(FleetEvents.scooter_added, fleet_handler)
>>> hub.emit(FleetEvents.scooter_added, "A-1")
New scooter: A-1
"""

from .event_hub import EventHub
from .event_list import EventList
from .exceptions import NoSuchEventError, NoSuchListenerError, InvalidHandlerError
