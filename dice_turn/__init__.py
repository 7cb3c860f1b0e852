"""dice_turn package public API.

Exports the reroll-on-six turn state machine, its states and the session
that strings turns together.
"""
from __future__ import annotations

from .core.turn_state import Done, TurnPhase, TurnState, WaitingToRoll
from .core.turn_state_machine import RollLimitExceeded, TurnAlreadyDone, TurnStateMachine
from .session import TurnSession

__all__ = [
    "Done",
    "RollLimitExceeded",
    "TurnAlreadyDone",
    "TurnPhase",
    "TurnSession",
    "TurnState",
    "TurnStateMachine",
    "WaitingToRoll",
]
