"""
Pair of six-sided dice.
"""

import random
from typing import Optional, Tuple


class Dice:
    """Two dice drawing from an injectable random source."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.die1 = 1
        self.die2 = 1

    def roll(self) -> int:
        """Roll both dice and return the total."""
        self.die1 = self.rng.randint(1, 6)
        self.die2 = self.rng.randint(1, 6)
        return self.die1 + self.die2

    @property
    def total(self) -> int:
        return self.die1 + self.die2

    @property
    def values(self) -> Tuple[int, int]:
        return (self.die1, self.die2)

    def is_doubles(self) -> bool:
        """Check if the last roll was doubles."""
        return self.die1 == self.die2

    def __repr__(self) -> str:
        return f"Dice(die1={self.die1}, die2={self.die2}, doubles={self.is_doubles()})"
