"""
Game configuration settings.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from monopoly.exceptions import ValidationError

if TYPE_CHECKING:
    from monopoly.properties import PropertyGroup, PropertyKind
    from monopoly.settings import EngineSettings


@dataclass
class GameConfig:
    """Configuration for a Monopoly game."""

    starting_cash: int = 1500
    go_salary: int = 200
    jail_fine: int = 50
    mortgage_interest_rate: float = 0.10

    max_jail_turns: int = 3
    max_consecutive_doubles: int = 3

    min_players: int = 2
    max_players: int = 8

    max_turns: int = 1000

    seed: Optional[int] = None

    def __post_init__(self) -> None:
        if self.starting_cash < 0 or self.go_salary < 0 or self.jail_fine < 0:
            raise ValidationError("Money amounts in the game config must be non-negative")
        if not 2 <= self.min_players <= self.max_players <= 8:
            raise ValidationError(
                f"Player limits must satisfy 2 <= min <= max <= 8, got {self.min_players}..{self.max_players}"
            )
        if self.max_turns < 1:
            raise ValidationError("max_turns must be at least 1")

    @classmethod
    def from_settings(cls, settings: Optional["EngineSettings"] = None) -> "GameConfig":
        """Build a config from environment-backed engine settings."""
        from monopoly.settings import get_engine_settings

        settings = settings or get_engine_settings()
        return cls(
            starting_cash=settings.starting_cash,
            go_salary=settings.go_salary,
            jail_fine=settings.jail_fine,
            mortgage_interest_rate=settings.mortgage_interest_rate,
            max_turns=settings.max_turns,
            seed=settings.seed,
        )


@dataclass(frozen=True)
class PropertyData:
    """Static title-deed data for an ownable space."""

    property_id: str
    name: str
    position: int
    kind: "PropertyKind"
    group: "PropertyGroup"
    price: int
    base_rent: int = 0
    house_cost: int = 0
    hotel_cost: int = 0

    @property
    def mortgage_value(self) -> int:
        return self.price // 2


@dataclass(frozen=True)
class TaxData:
    """Data for a tax space."""

    name: str
    position: int
    amount: int
