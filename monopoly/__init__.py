"""
Monopoly Rules Engine

A deterministic, turn-based implementation of classic Monopoly game rules
for 2-8 players.
"""

from .board import Board
from .config import GameConfig
from .dice import Dice
from .exceptions import GameNotFoundError, InvalidActionError, MonopolyError, ValidationError
from .game import GameState, GameStatus, TurnResult, create_game
from .player import Player, PlayerStatus
from .properties import Property, PropertyGroup, PropertyKind
from .registry import GameRegistry
from .snapshot import serialize_snapshot

__all__ = [
    "Board",
    "Dice",
    "GameConfig",
    "GameNotFoundError",
    "GameRegistry",
    "GameState",
    "GameStatus",
    "InvalidActionError",
    "MonopolyError",
    "Player",
    "PlayerStatus",
    "Property",
    "PropertyGroup",
    "PropertyKind",
    "TurnResult",
    "ValidationError",
    "create_game",
    "serialize_snapshot",
]
