"""
Custom exception hierarchy for the Monopoly engine.

Ordinary rule rejections (not enough cash, incomplete color group, ...)
are reported as ``False`` by the engine. These exceptions are reserved for
host misuse and configuration problems.
"""


class MonopolyError(Exception):
    """Base exception for all game-related errors."""


class GameNotFoundError(MonopolyError):
    """Game does not exist."""


class InvalidActionError(MonopolyError):
    """Action is not legal in the current state."""


class ValidationError(MonopolyError):
    """Input validation failed."""
