"""Turn states for a single reroll-on-six turn.

A turn is exactly one of two variants:

    WaitingToRoll()   no non-six roll yet
    Done(result)      stopped on result, 1..5 (terminal)

TurnPhase is the plain enum tag for each variant, used in event payloads and
state-change callbacks where the payload itself is not needed.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class TurnPhase(Enum):
    WAITING_TO_ROLL = auto()  # Turn created, still rolling
    DONE = auto()             # Non-six rolled, result recorded


@dataclass(frozen=True, slots=True)
class WaitingToRoll:
    @property
    def phase(self) -> TurnPhase:
        return TurnPhase.WAITING_TO_ROLL

    def __repr__(self) -> str:
        return "WaitingToRoll()"


@dataclass(frozen=True, slots=True)
class Done:
    result: int

    def __post_init__(self):
        # Six never stops a turn, so it can never be a result.
        if isinstance(self.result, bool) or not isinstance(self.result, int) or not 1 <= self.result <= 5:
            raise ValueError(f"Done result must be an int in 1..5, got {self.result!r}")

    @property
    def phase(self) -> TurnPhase:
        return TurnPhase.DONE

    def __repr__(self) -> str:
        return f"Done({self.result})"


TurnState = Union[WaitingToRoll, Done]

__all__ = ["TurnPhase", "WaitingToRoll", "Done", "TurnState"]
