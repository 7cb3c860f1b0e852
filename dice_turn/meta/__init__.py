"""Session and lifetime statistics for reroll-on-six turns."""

from .statistics_tracker import StatisticsTracker, SessionStatistics
from .persistence import PersistenceManager, PersistentStats

__all__ = [
    'StatisticsTracker',
    'SessionStatistics',
    'PersistenceManager',
    'PersistentStats',
]
