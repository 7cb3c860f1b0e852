"""Persistent statistics storage across play sessions."""
from __future__ import annotations
import json
from pathlib import Path
from typing import Any
from dataclasses import dataclass, field, asdict


def _empty_result_counts() -> dict[str, int]:
    return {str(v): 0 for v in range(1, 6)}


def _count(name: str, value: Any) -> int:
    # bool is an int subclass but never a valid counter
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
    return value


@dataclass
class PersistentStats:
    """Cumulative statistics across all play sessions."""

    total_sessions: int = 0

    # Cumulative stats
    lifetime_turns: int = 0
    lifetime_dice_rolled: int = 0
    lifetime_sixes_rerolled: int = 0

    # Records
    longest_turn_ever: int = 0

    # Keyed by result as a string so the dict round-trips through JSON unchanged
    lifetime_result_counts: dict[str, int] = field(default_factory=_empty_result_counts)

    def merge_session(self, session_stats: dict[str, Any]) -> None:
        """Merge statistics from a completed play session.

        Args:
            session_stats: Summary from StatisticsTracker.export_summary()
        """
        self.total_sessions += 1

        turns = session_stats.get('turns', {})
        self.lifetime_turns += turns.get('played', 0)
        longest = turns.get('longest', 0)
        if longest > self.longest_turn_ever:
            self.longest_turn_ever = longest

        dice = session_stats.get('dice', {})
        self.lifetime_dice_rolled += dice.get('rolled', 0)
        self.lifetime_sixes_rerolled += dice.get('sixes_rerolled', 0)

        for key, count in session_stats.get('results', {}).items():
            key = str(key)
            self.lifetime_result_counts[key] = self.lifetime_result_counts.get(key, 0) + count

    def average_result(self) -> float:
        if self.lifetime_turns == 0:
            return 0.0
        total = sum(int(k) * v for k, v in self.lifetime_result_counts.items())
        return total / self.lifetime_turns

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PersistentStats:
        """Create from dictionary loaded from JSON.

        Raises ValueError when a field is present with the wrong type.
        """
        # Missing fields fall back to defaults so older files still load
        raw_counts = data.get('lifetime_result_counts', {})
        if not isinstance(raw_counts, dict):
            raise ValueError(f"lifetime_result_counts must be an object, got {type(raw_counts).__name__}")
        counts = _empty_result_counts()
        for key, count in raw_counts.items():
            counts[str(key)] = _count(f"lifetime_result_counts[{key!r}]", count)
        return cls(
            total_sessions=_count('total_sessions', data.get('total_sessions', 0)),
            lifetime_turns=_count('lifetime_turns', data.get('lifetime_turns', 0)),
            lifetime_dice_rolled=_count('lifetime_dice_rolled', data.get('lifetime_dice_rolled', 0)),
            lifetime_sixes_rerolled=_count('lifetime_sixes_rerolled', data.get('lifetime_sixes_rerolled', 0)),
            longest_turn_ever=_count('longest_turn_ever', data.get('longest_turn_ever', 0)),
            lifetime_result_counts=counts,
        )


class PersistenceManager:
    """Manages loading and saving persistent statistics to disk."""

    def __init__(self, save_path: str | Path | None = None):
        """Initialize the persistence manager.

        Args:
            save_path: Path to save file. If None, uses ~/.dice_turn/stats.json.
        """
        if save_path is None:
            save_dir = Path.home() / '.dice_turn'
            save_dir.mkdir(exist_ok=True)
            self.save_path = save_dir / 'stats.json'
        else:
            self.save_path = Path(save_path)

        self.stats = self.load()

    def load(self) -> PersistentStats:
        """Load statistics from disk, or create new if file doesn't exist."""
        if not self.save_path.exists():
            return PersistentStats()

        try:
            with open(self.save_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object, got {type(data).__name__}")
            return PersistentStats.from_dict(data)
        except (json.JSONDecodeError, ValueError, OSError) as e:
            print(f"Warning: Could not load stats from {self.save_path}: {e}")
            return PersistentStats()

    def save(self) -> None:
        """Save current statistics to disk."""
        try:
            self.save_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.save_path, 'w', encoding='utf-8') as f:
                json.dump(self.stats.to_dict(), f, indent=2)
        except OSError as e:
            print(f"Warning: Could not save stats to {self.save_path}: {e}")

    def merge_and_save(self, session_stats: dict[str, Any]) -> None:
        """Merge session statistics and save to disk."""
        self.stats.merge_session(session_stats)
        self.save()

    def get_stats(self) -> PersistentStats:
        return self.stats

    def reset(self) -> None:
        """Reset all statistics (useful for debugging/testing)."""
        self.stats = PersistentStats()
        self.save()
