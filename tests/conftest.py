"""Shared test fixtures for the Monopoly engine tests."""

from typing import Iterable, List, Tuple

import pytest
from monopoly.config import GameConfig
from monopoly.dice import Dice
from monopoly.game import create_game


class ScriptedDice(Dice):
    """Dice that replay a fixed sequence of (die1, die2) rolls."""

    def __init__(self, rolls: Iterable[Tuple[int, int]] = ()):
        super().__init__()
        self.rolls: List[Tuple[int, int]] = list(rolls)

    def queue(self, *rolls: Tuple[int, int]) -> None:
        self.rolls.extend(rolls)

    def roll(self) -> int:
        if not self.rolls:
            raise AssertionError("ScriptedDice ran out of rolls")
        self.die1, self.die2 = self.rolls.pop(0)
        return self.die1 + self.die2


@pytest.fixture
def game_config():
    """Default game configuration with fixed seed for reproducibility."""
    return GameConfig(seed=42)


@pytest.fixture
def dice():
    """Scripted dice; tests queue the rolls they need."""
    return ScriptedDice()


@pytest.fixture
def basic_game(game_config, dice):
    """Started two-player game driven by scripted dice."""
    return create_game(["Alice", "Bob"], game_config, dice=dice)


@pytest.fixture
def four_player_game(game_config, dice):
    """Started four-player game driven by scripted dice."""
    return create_game(["Alice", "Bob", "Charlie", "Diana"], game_config, dice=dice)


@pytest.fixture
def seeded_game(game_config):
    """Started two-player game using real seeded dice."""
    return create_game(["Alice", "Bob"], game_config)
