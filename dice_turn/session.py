from __future__ import annotations
from typing import Optional

from dice_turn.core.event_listener import EventListener
from dice_turn.core.random_source import DieSource, RandomSource
from dice_turn.core.turn_state_machine import ROLL_LIMIT, TurnStateMachine
from dice_turn.meta.statistics_tracker import StatisticsTracker


class TurnSession:
    def __init__(self, *, rng_seed: int | None = None, rng: Optional[DieSource] = None):
        """A run of consecutive turns sharing one die, event stream and tracker.

        Args:
            rng_seed: Seed for the session RandomSource (ignored when rng is given)
            rng: Explicit die source, e.g. a ScriptedRandomSource in tests
        """
        self.rng: DieSource = rng if rng is not None else RandomSource(seed=rng_seed)
        self.event_listener = EventListener()
        self.statistics_tracker = StatisticsTracker(self)
        self.machine: TurnStateMachine | None = None

    def new_turn(self) -> TurnStateMachine:
        self.machine = TurnStateMachine.create(rng=self.rng, event_listener=self.event_listener)
        return self.machine

    def roll(self) -> int:
        """Roll the current turn, starting a fresh one if there is none or it is done."""
        if self.machine is None or self.machine.is_done:
            self.new_turn()
        return self.machine.roll_once()

    def play_turn(self, max_rolls: int = ROLL_LIMIT) -> int:
        return self.new_turn().play_out(max_rolls)

    def current_state(self):
        return self.machine.current_state() if self.machine else None
