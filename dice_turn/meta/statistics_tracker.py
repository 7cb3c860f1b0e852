"""Statistics tracker that records turn events for a play session.

Listens to the session's event stream and keeps running totals that are
later folded into lifetime statistics (see persistence.py).
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from dice_turn.core.turn_event import TurnEvent, TurnEventType

if TYPE_CHECKING:
    from dice_turn.session import TurnSession


def _empty_result_counts() -> dict[int, int]:
    return {v: 0 for v in range(1, 6)}


@dataclass
class SessionStatistics:
    """Container for statistics from a single play session."""

    turns_played: int = 0
    dice_rolled: int = 0
    sixes_rerolled: int = 0
    longest_turn: int = 0  # Most rolls needed to finish one turn
    total_result: int = 0
    result_counts: dict[int, int] = field(default_factory=_empty_result_counts)

    def add_turn_done(self, event: TurnEvent) -> None:
        """Record a finished turn."""
        result = event.get('result', 0)
        rolls = event.get('rolls', ())
        self.turns_played += 1
        self.total_result += result
        if result in self.result_counts:
            self.result_counts[result] += 1
        if len(rolls) > self.longest_turn:
            self.longest_turn = len(rolls)

    def average_result(self) -> float:
        if self.turns_played == 0:
            return 0.0
        return self.total_result / self.turns_played

    def get_summary(self) -> dict[str, Any]:
        """Get a summary of all statistics."""
        return {
            'turns': {
                'played': self.turns_played,
                'longest': self.longest_turn,
                'average_result': self.average_result(),
            },
            'dice': {
                'rolled': self.dice_rolled,
                'sixes_rerolled': self.sixes_rerolled,
            },
            'results': {str(k): v for k, v in self.result_counts.items()},
        }

    def to_dict(self) -> dict[str, Any]:
        """Serialize statistics for saving."""
        return {
            'turns_played': self.turns_played,
            'dice_rolled': self.dice_rolled,
            'sixes_rerolled': self.sixes_rerolled,
            'longest_turn': self.longest_turn,
            'total_result': self.total_result,
            # JSON object keys are strings
            'result_counts': {str(k): v for k, v in self.result_counts.items()},
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SessionStatistics":
        """Restore statistics from saved data."""
        stats = cls()
        stats.turns_played = data.get('turns_played', 0)
        stats.dice_rolled = data.get('dice_rolled', 0)
        stats.sixes_rerolled = data.get('sixes_rerolled', 0)
        stats.longest_turn = data.get('longest_turn', 0)
        stats.total_result = data.get('total_result', 0)
        for key, count in data.get('result_counts', {}).items():
            stats.result_counts[int(key)] = count
        return stats


class StatisticsTracker:
    """Tracks session statistics by listening to turn events.

    Subscribes to the session's event listener on construction.
    """

    def __init__(self, session: TurnSession):
        """Initialize the statistics tracker.

        Args:
            session: TurnSession whose event stream to track
        """
        self.session = session
        self.current_session = SessionStatistics()
        self.session.event_listener.subscribe(self.on_event)

    def on_event(self, event: TurnEvent) -> None:
        if event.type == TurnEventType.DIE_ROLLED:
            self.current_session.dice_rolled += 1
        elif event.type == TurnEventType.REROLL:
            self.current_session.sixes_rerolled += 1
        elif event.type == TurnEventType.TURN_DONE:
            self.current_session.add_turn_done(event)

    def get_statistics(self) -> SessionStatistics:
        return self.current_session

    def reset(self) -> None:
        """Reset statistics for a new session."""
        self.current_session = SessionStatistics()

    def export_summary(self) -> dict[str, Any]:
        """Export a summary of current statistics.

        Returns:
            Dictionary with summary of all tracked statistics
        """
        return self.current_session.get_summary()
