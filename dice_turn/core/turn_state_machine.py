"""Reroll-on-six turn state machine.

One turn: roll a six-sided die; a six means roll again, anything else ends
the turn with that value as the result.

    machine = TurnStateMachine.create()
    while not machine.is_done:
        machine.roll_once()
    machine.result  # 1..5
"""
from __future__ import annotations
from typing import Callable, Optional, TYPE_CHECKING

from dice_turn.core.random_source import DieSource, RandomSource
from dice_turn.core.turn_event import TurnEvent, TurnEventType
from dice_turn.core.turn_state import Done, TurnState, WaitingToRoll

if TYPE_CHECKING:
    from dice_turn.core.event_listener import EventListener

DIE_FACES = 6
ROLL_LIMIT = 1000

StateChangeCallback = Callable[[TurnState, TurnState], None]


class TurnAlreadyDone(RuntimeError):
    """Raised when rolling a turn that has already recorded its result."""

    def __init__(self, result: int):
        super().__init__(f"Turn is already done with result {result}; start a new turn")
        self.result = result


class RollLimitExceeded(RuntimeError):
    """Raised by play_out when the die keeps showing six past the roll cap."""

    def __init__(self, max_rolls: int):
        super().__init__(f"Turn not finished after {max_rolls} rolls")
        self.max_rolls = max_rolls


class TurnStateMachine:
    def __init__(self, rng: Optional[DieSource] = None,
                 on_change: Optional[StateChangeCallback] = None,
                 event_listener: Optional["EventListener"] = None):
        self._rng: DieSource = rng if rng is not None else RandomSource()
        self._state: TurnState = WaitingToRoll()
        self._on_change = on_change
        self.event_listener = event_listener
        self._rolls: list[int] = []
        self._publish(TurnEventType.TURN_START)

    @classmethod
    def create(cls, rng: Optional[DieSource] = None,
               on_change: Optional[StateChangeCallback] = None,
               event_listener: Optional["EventListener"] = None) -> "TurnStateMachine":
        return cls(rng=rng, on_change=on_change, event_listener=event_listener)

    # --- Read-only views -------------------------------------------------
    def current_state(self) -> TurnState:
        return self._state

    @property
    def state(self) -> TurnState:
        return self._state

    @property
    def is_done(self) -> bool:
        return isinstance(self._state, Done)

    @property
    def result(self) -> int | None:
        return self._state.result if isinstance(self._state, Done) else None

    @property
    def rolls(self) -> tuple[int, ...]:
        return tuple(self._rolls)

    @property
    def roll_count(self) -> int:
        return len(self._rolls)

    # --- Transitions -----------------------------------------------------
    def roll_once(self) -> int:
        """Roll the die once and return the face shown (1..6).

        A six keeps the turn waiting; 1..5 ends it with that result.
        Raises TurnAlreadyDone if the turn has already ended, without drawing.
        """
        if isinstance(self._state, Done):
            raise TurnAlreadyDone(self._state.result)
        value = self._rng.randint(1, DIE_FACES)
        if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= DIE_FACES:
            raise ValueError(f"Die source produced {value!r}, expected an int in 1..{DIE_FACES}")
        self._rolls.append(value)
        roll_index = len(self._rolls)
        self._publish(TurnEventType.DIE_ROLLED, value=value, roll_index=roll_index)
        if value == DIE_FACES:
            self._publish(TurnEventType.REROLL, value=value, roll_index=roll_index)
        else:
            self._set(Done(value))
            self._publish(TurnEventType.TURN_DONE, result=value, rolls=self.rolls)
        return value

    def play_out(self, max_rolls: int = ROLL_LIMIT) -> int:
        """Roll until the turn is done and return the result."""
        while not isinstance(self._state, Done):
            if len(self._rolls) >= max_rolls:
                raise RollLimitExceeded(max_rolls)
            self.roll_once()
        return self._state.result

    def _set(self, new_state: TurnState):
        old = self._state
        self._state = new_state
        self._publish(TurnEventType.STATE_CHANGED, old=old.phase, new=new_state.phase)
        if self._on_change:
            try:
                self._on_change(old, new_state)
            except Exception as e:
                print(f"Warning: turn state change callback failed: {e}")

    def _publish(self, event_type: TurnEventType, **payload):
        if self.event_listener is not None:
            self.event_listener.publish(TurnEvent(event_type, source=self, payload=payload))

    def __repr__(self) -> str:
        return f"TurnStateMachine(state={self._state!r}, rolls={self._rolls})"


__all__ = [
    "DIE_FACES", "ROLL_LIMIT", "TurnStateMachine", "TurnAlreadyDone", "RollLimitExceeded",
]
