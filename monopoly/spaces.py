"""
Board space definitions and types.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SpaceType(Enum):
    """Types of spaces on the board."""

    GO = "go"
    PROPERTY = "property"
    RAILROAD = "railroad"
    UTILITY = "utility"
    TAX = "tax"
    CHANCE = "chance"
    COMMUNITY_CHEST = "community_chest"
    JAIL = "jail"
    GO_TO_JAIL = "go_to_jail"
    FREE_PARKING = "free_parking"


OWNABLE_SPACE_TYPES = frozenset({SpaceType.PROPERTY, SpaceType.RAILROAD, SpaceType.UTILITY})


@dataclass(frozen=True)
class Space:
    """
    Per-position metadata.

    Ownable spaces (street, railroad, utility) carry the id of the linked
    property; tax spaces carry the amount due.
    """

    position: int
    name: str
    space_type: SpaceType
    property_id: Optional[str] = None
    tax_amount: int = 0

    @property
    def is_ownable(self) -> bool:
        return self.space_type in OWNABLE_SPACE_TYPES and self.property_id is not None

    @property
    def is_tax(self) -> bool:
        return self.space_type == SpaceType.TAX

    def __repr__(self) -> str:
        return f"Space(name='{self.name}', position={self.position}, type={self.space_type.value})"
