from __future__ import annotations
from collections import defaultdict
from typing import Callable, Iterable, Optional
from dice_turn.core.turn_event import TurnEvent, TurnEventType

TurnEventCallback = Callable[[TurnEvent], None]

class EventListener:
    """Central hub for publishing TurnEvents to subscribed callbacks.

    Subscribers can optionally specify a set of TurnEventType filters; if omitted they
    receive all events. A failing subscriber is reported and skipped so one bad
    listener cannot stall a turn.
    """

    def __init__(self):
        self._subs_all: list[TurnEventCallback] = []
        self._subs_specific: dict[TurnEventType, list[TurnEventCallback]] = defaultdict(list)
        # Events published from inside a callback are queued and dispatched afterward
        self._queue: list[TurnEvent] = []
        self._dispatching: bool = False

    def subscribe(self, callback: TurnEventCallback, types: Optional[Iterable[TurnEventType]] = None):
        if types is None:
            if callback not in self._subs_all:
                self._subs_all.append(callback)
        else:
            for t in types:
                lst = self._subs_specific[t]
                if callback not in lst:
                    lst.append(callback)

    def unsubscribe(self, callback: TurnEventCallback):
        if callback in self._subs_all:
            self._subs_all.remove(callback)
        for lst in self._subs_specific.values():
            if callback in lst:
                lst.remove(callback)

    def publish(self, event: TurnEvent):
        self._queue.append(event)
        if self._dispatching:
            return
        self._dispatching = True
        try:
            while self._queue:
                ev = self._queue.pop(0)
                for cb in list(self._subs_all) + list(self._subs_specific.get(ev.type, [])):
                    self._dispatch(cb, ev)
        finally:
            self._dispatching = False

    def _dispatch(self, cb: TurnEventCallback, ev: TurnEvent):
        try:
            cb(ev)
        except Exception as e:
            print(f"Warning: subscriber {getattr(cb, '__qualname__', cb)!r} failed on {ev.type.name}: {e}")
