from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional

class TurnEventType(Enum):
    TURN_START = auto()
    DIE_ROLLED = auto()
    REROLL = auto()         # Rolled a six, turn continues
    STATE_CHANGED = auto()
    TURN_DONE = auto()

@dataclass(slots=True)
class TurnEvent:
    type: TurnEventType
    source: Any | None = None
    payload: Optional[dict[str, Any]] = None

    def get(self, key: str, default: Any = None) -> Any:
        return self.payload.get(key, default) if self.payload else default

    def __repr__(self) -> str:  # Helpful for debugging
        return f"TurnEvent(type={self.type}, payload={self.payload})"
