"""Randomness sources for die rolls.

Usage:
    rng = RandomSource(seed=123)        # deterministic
    value = rng.roll_die()              # 1..6

    scripted = ScriptedRandomSource([6, 6, 3])
    scripted.randint(1, 6)              # -> 6, then 6, then 3

Anything exposing randint(a, b) can drive a TurnStateMachine; both classes
here do, and so does a plain random.Random.
"""

from __future__ import annotations
import random
from typing import Any, Iterable, Protocol


class DieSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class RandomSource:
    def __init__(self, seed: int | None = None):
        self._seed = seed
        self._rng = random.Random(seed) if seed is not None else random.Random()

    @property
    def seed(self) -> int | None:
        return self._seed

    def reseed(self, seed: int | None):
        """Reseed RNG (None -> fresh non-deterministic)."""
        self._seed = seed
        if seed is None:
            self._rng = random.Random()
        else:
            self._rng = random.Random(seed)

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)

    def roll_die(self, faces: int = 6) -> int:
        return self._rng.randint(1, faces)

    def state(self) -> Any:
        """Return internal state (for advanced test assertions)."""
        return self._rng.getstate()

    def set_state(self, state: Any):
        self._rng.setstate(state)


class ScriptedRandomSource:
    """Replays a fixed sequence of values, ignoring the requested bounds.

    Raises IndexError once the script runs out so a test that rolls more
    often than it planned fails loudly instead of looping.
    """

    def __init__(self, values: Iterable[int]):
        self._values = list(values)
        self._pos = 0

    @property
    def consumed(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._values) - self._pos

    def randint(self, a: int, b: int) -> int:
        if self._pos >= len(self._values):
            raise IndexError(f"ScriptedRandomSource exhausted after {self._pos} values")
        value = self._values[self._pos]
        self._pos += 1
        return value

    def roll_die(self, faces: int = 6) -> int:
        return self.randint(1, faces)


__all__ = ["DieSource", "RandomSource", "ScriptedRandomSource"]
