"""
Structured in-memory event log of everything that happens in a game.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class EventType(Enum):
    """Types of game events."""

    GAME_START = "game_start"
    PLAYER_JOINED = "player_joined"
    TURN_START = "turn_start"
    DICE_ROLL = "dice_roll"
    MOVE = "move"
    PASS_GO = "pass_go"
    LAND = "land"

    PURCHASE = "purchase"

    RENT_PAYMENT = "rent_payment"
    TAX_PAYMENT = "tax_payment"

    CARD_DRAW = "card_draw"
    CARD_EFFECT = "card_effect"

    BUILD_HOUSE = "build_house"
    BUILD_HOTEL = "build_hotel"
    SELL_BUILDING = "sell_building"

    MORTGAGE = "mortgage"
    UNMORTGAGE = "unmortgage"

    GO_TO_JAIL = "go_to_jail"
    JAIL_ATTEMPT = "jail_attempt"
    JAIL_RELEASE = "jail_release"

    BANKRUPTCY = "bankruptcy"
    GAME_END = "game_end"


@dataclass
class GameEvent:
    """A logged event in the game."""

    event_type: EventType
    player_id: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        player_str = self.player_id if self.player_id is not None else "System"
        return f"[{player_str}] {self.event_type.value}: {self.details}"


class EventLog:
    """Manages the game event log."""

    def __init__(self):
        self.events: List[GameEvent] = []

    def log(self, event_type: EventType, player_id: Optional[str] = None, **details: Any) -> None:
        """Log a game event."""
        self.events.append(GameEvent(event_type, player_id, details))

    def get_events(self, event_type: Optional[EventType] = None) -> List[GameEvent]:
        """Get logged events, optionally only those of one type."""
        if event_type is None:
            return self.events.copy()
        return [e for e in self.events if e.event_type == event_type]

    def get_recent_events(self, count: int = 10) -> List[GameEvent]:
        """Get the most recent N events."""
        return self.events[-count:]

    def clear(self) -> None:
        self.events.clear()

    def __len__(self) -> int:
        return len(self.events)
