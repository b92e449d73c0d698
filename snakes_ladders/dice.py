"""Dice: the only source of randomness in a game."""

from __future__ import annotations

import itertools
import random
from typing import Iterable, Protocol, runtime_checkable


@runtime_checkable
class Roller(Protocol):
    """Structural interface: anything with ``roll()`` can drive a game."""

    def roll(self) -> int: ...


class Die:
    """Fair die with *sides* faces, backed by its own ``random.Random``."""

    def __init__(self, sides: int = 6, seed: int | None = None):
        if sides < 1:
            raise ValueError(f"A die needs at least one side (got {sides}).")
        self.sides = sides
        self._rng = random.Random(seed)

    def roll(self) -> int:
        return self._rng.randint(1, self.sides)

    def roll_multiple(self, count: int) -> int:
        """Sum of *count* rolls, for games played with several dice."""
        return sum(self.roll() for _ in range(count))

    def reseed(self, seed: int | None) -> None:
        self._rng = random.Random(seed)

    def __repr__(self) -> str:
        return f"Die(sides={self.sides})"


class ScriptedDie:
    """Replays a fixed sequence of rolls, cycling when it runs out."""

    def __init__(self, values: Iterable[int]):
        self.values = list(values)
        if not self.values:
            raise ValueError("ScriptedDie needs at least one value.")
        self._cycle = itertools.cycle(self.values)
        self.rolls = 0

    def roll(self) -> int:
        self.rolls += 1
        return next(self._cycle)
