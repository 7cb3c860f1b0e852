"""Shared test utilities."""
from __future__ import annotations
from typing import List
from dice_turn.core.turn_event import TurnEvent, TurnEventType

class EventCollector:
    """Simple event sink used in tests to capture published TurnEvents.

    Usage:
        collector = EventCollector()
        session.event_listener.subscribe(collector.on_event)
        # ... run code ...
        types = collector.types()
    """
    def __init__(self) -> None:
        self.events: List[TurnEvent] = []
    def on_event(self, event: TurnEvent):
        self.events.append(event)
    def types(self) -> List[TurnEventType]:
        return [e.type for e in self.events]
    def clear(self):
        self.events.clear()

__all__ = ["EventCollector"]
