"""
Ownable properties: streets, railroads and utilities.

A Property only knows its owner's id. Operations that need the owner's
cash or holdings take the owning Player and the owner's count of
properties in this group as arguments; the game engine resolves both
from its id-indexed registries.
"""

from enum import Enum
from typing import TYPE_CHECKING, Optional

from monopoly.config import PropertyData

if TYPE_CHECKING:
    from monopoly.player import Player


RAILROAD_BASE_RENT = 25


class PropertyKind(Enum):
    """What kind of ownable space a property is."""

    STREET = "street"
    RAILROAD = "railroad"
    UTILITY = "utility"


class PropertyGroup(Enum):
    """Property groups with the number of properties that complete them."""

    BROWN = ("Brown", 2)
    LIGHT_BLUE = ("Light Blue", 3)
    PINK = ("Pink", 3)
    ORANGE = ("Orange", 3)
    RED = ("Red", 3)
    YELLOW = ("Yellow", 3)
    GREEN = ("Green", 3)
    DARK_BLUE = ("Dark Blue", 2)
    RAILROAD = ("Railroad", 4)
    UTILITY = ("Utility", 2)

    def __init__(self, display_name: str, property_count: int):
        self.display_name = display_name
        self.property_count = property_count

    def __str__(self) -> str:
        return self.display_name


class Property:
    """Mutable ownership and development record for one title deed."""

    def __init__(
        self,
        property_id: str,
        name: str,
        kind: PropertyKind,
        group: PropertyGroup,
        price: int,
        base_rent: int = 0,
        house_cost: int = 0,
        hotel_cost: int = 0,
        position: Optional[int] = None,
    ):
        self.property_id = property_id
        self.name = name
        self.kind = kind
        self.group = group
        self.price = price
        self.base_rent = base_rent
        self.house_cost = house_cost
        self.hotel_cost = hotel_cost
        self.position = position

        self.owner_id: Optional[str] = None
        self.houses = 0
        self.has_hotel = False
        self.is_mortgaged = False

    @classmethod
    def from_data(cls, data: PropertyData) -> "Property":
        return cls(
            data.property_id,
            data.name,
            data.kind,
            data.group,
            data.price,
            base_rent=data.base_rent,
            house_cost=data.house_cost,
            hotel_cost=data.hotel_cost,
            position=data.position,
        )

    @property
    def mortgage_value(self) -> int:
        return self.price // 2

    def is_owned(self) -> bool:
        """Check if property is owned by any player."""
        return self.owner_id is not None

    def is_owned_by(self, player: "Player") -> bool:
        return self.owner_id is not None and self.owner_id == player.player_id

    def _is_complete(self, owned_in_group: int) -> bool:
        return owned_in_group >= self.group.property_count

    # === Ownership ===

    def buy(self, player: "Player") -> bool:
        """
        Sell this property to a player at the printed price.

        Both sides of the ownership link are updated, or neither is.
        """
        if self.is_owned() or not player.can_afford(self.price):
            return False
        if not player.subtract_money(self.price):
            return False
        self.assign_owner(player)
        return True

    def assign_owner(self, player: "Player") -> None:
        """Link this property to a player without any payment."""
        if self.owner_id is not None and self.owner_id != player.player_id:
            raise ValueError(f"{self.name} is already owned by {self.owner_id}")
        self.owner_id = player.player_id
        player.properties.add(self.property_id)

    def release_owner(self, player: "Player") -> None:
        """Unlink this property from its owner."""
        player.properties.discard(self.property_id)
        if self.owner_id == player.player_id:
            self.owner_id = None

    # === Development ===

    def can_build_house(self, owned_in_group: int) -> bool:
        """
        Check if a house can be added.

        Requirements:
        - Street kind, no hotel yet, fewer than 4 houses
        - Not mortgaged
        - Owner holds every property in the group
        """
        if self.kind != PropertyKind.STREET or self.has_hotel or self.houses >= 4:
            return False
        if self.is_mortgaged or not self.is_owned():
            return False
        return self._is_complete(owned_in_group)

    def build_house(self, owner: "Player", owned_in_group: int) -> bool:
        if not self.is_owned_by(owner) or not self.can_build_house(owned_in_group):
            return False
        if not owner.subtract_money(self.house_cost):
            return False
        self.houses += 1
        return True

    def can_build_hotel(self, owned_in_group: int) -> bool:
        if self.kind != PropertyKind.STREET or self.houses != 4 or self.has_hotel:
            return False
        if self.is_mortgaged or not self.is_owned():
            return False
        return self._is_complete(owned_in_group)

    def build_hotel(self, owner: "Player", owned_in_group: int) -> bool:
        """Replace four houses with a hotel."""
        if not self.is_owned_by(owner) or not self.can_build_hotel(owned_in_group):
            return False
        if not owner.subtract_money(self.hotel_cost):
            return False
        self.houses = 0
        self.has_hotel = True
        return True

    def sell_house(self, owner: "Player") -> bool:
        """Sell one house back to the bank for half its cost."""
        if not self.is_owned_by(owner) or self.houses <= 0 or self.has_hotel or self.is_mortgaged:
            return False
        self.houses -= 1
        owner.add_money(self.house_cost // 2)
        return True

    def sell_hotel(self, owner: "Player") -> bool:
        """Sell the hotel for half its cost; the lot goes back to four houses."""
        if not self.is_owned_by(owner) or not self.has_hotel or self.is_mortgaged:
            return False
        self.has_hotel = False
        self.houses = 4
        owner.add_money(self.hotel_cost // 2)
        return True

    def liquidate_buildings(self) -> int:
        """Remove all buildings, returning the half-cost refund owed for them."""
        refund = (self.houses * self.house_cost) // 2
        if self.has_hotel:
            refund += self.hotel_cost // 2
        self.houses = 0
        self.has_hotel = False
        return refund

    # === Mortgage ===

    def mortgage(self, owner: "Player") -> bool:
        """Mortgage to the bank for half the purchase price."""
        if not self.is_owned_by(owner):
            return False
        if self.is_mortgaged or self.houses > 0 or self.has_hotel:
            return False
        self.is_mortgaged = True
        owner.add_money(self.mortgage_value)
        return True

    def unmortgage_cost(self, interest_rate: float = 0.10) -> int:
        return round(self.mortgage_value * (1 + interest_rate))

    def unmortgage(self, owner: "Player", interest_rate: float = 0.10) -> bool:
        """Lift the mortgage by repaying its value plus interest."""
        if not self.is_owned_by(owner) or not self.is_mortgaged:
            return False
        if not owner.subtract_money(self.unmortgage_cost(interest_rate)):
            return False
        self.is_mortgaged = False
        return True

    # === Rent ===

    def calculate_rent(self, dice_total: int, owned_in_group: int) -> int:
        """
        Calculate the rent owed for landing here.

        Args:
            dice_total: Total of the roll that brought the player here (utilities)
            owned_in_group: How many properties of this group the owner holds

        Returns:
            Rent amount, 0 if unowned or mortgaged
        """
        if not self.is_owned() or self.is_mortgaged:
            return 0

        if self.kind == PropertyKind.STREET:
            if self.has_hotel:
                return self.base_rent * 5
            if self.houses > 0:
                return self.base_rent * self.houses
            if self._is_complete(owned_in_group):
                return self.base_rent * 2
            return self.base_rent

        if self.kind == PropertyKind.RAILROAD:
            if owned_in_group < 1:
                return 0
            return RAILROAD_BASE_RENT * (2 ** (owned_in_group - 1))

        multiplier = 10 if self._is_complete(owned_in_group) else 4
        return multiplier * dice_total

    def current_value(self) -> int:
        """Purchase price plus buildings, less the mortgage if mortgaged."""
        value = self.price + self.houses * self.house_cost
        if self.has_hotel:
            value += self.hotel_cost
        if self.is_mortgaged:
            value -= self.mortgage_value
        return value

    def __repr__(self) -> str:
        return (
            f"Property(id='{self.property_id}', name='{self.name}', group={self.group.name}, "
            f"owner={self.owner_id}, houses={self.houses}, hotel={self.has_hotel})"
        )
