"""
Player state and management.
"""

from enum import Enum
from typing import TYPE_CHECKING, Mapping, Set

if TYPE_CHECKING:
    from monopoly.properties import Property, PropertyGroup


BOARD_SIZE = 40
JAIL_POSITION = 10
DEFAULT_GO_SALARY = 200
MAX_JAIL_TURNS = 3
MAX_CONSECUTIVE_DOUBLES = 3


class PlayerStatus(Enum):
    ACTIVE = "active"
    BANKRUPT = "bankrupt"


class Player:
    """Represents the complete state of a player in the game."""

    def __init__(self, player_id: str, name: str, starting_cash: int = 1500):
        self.player_id = player_id
        self.name = name.strip()
        self.cash = starting_cash
        self.position = 0
        self.in_jail = False
        self.jail_turns = 0
        self.has_jail_card = False
        self.properties: Set[str] = set()
        self.consecutive_doubles = 0
        self.status = PlayerStatus.ACTIVE

    # === Cash ===

    def add_money(self, amount: int) -> bool:
        if amount < 0:
            return False
        self.cash += amount
        return True

    def subtract_money(self, amount: int) -> bool:
        """Debit the full amount, or nothing if the balance cannot cover it."""
        if amount < 0 or amount > self.cash:
            return False
        self.cash -= amount
        return True

    def can_afford(self, amount: int) -> bool:
        return 0 <= amount <= self.cash

    # === Movement ===

    def set_position(self, position: int) -> None:
        self.position = position % BOARD_SIZE

    def move_by(self, spaces: int, go_salary: int = DEFAULT_GO_SALARY) -> bool:
        """
        Move forward (or backward for negative offsets) around the board.

        Returns True if the player passed GO. The salary is only paid to
        players who are not in jail.
        """
        old_position = self.position
        new_position = (old_position + spaces) % BOARD_SIZE
        passed_go = spaces > 0 and (new_position < old_position or spaces >= BOARD_SIZE)
        self.position = new_position

        if passed_go and not self.in_jail:
            self.add_money(go_salary)
        return passed_go

    # === Jail ===

    def send_to_jail(self) -> None:
        self.in_jail = True
        self.jail_turns = 0
        self.position = JAIL_POSITION
        self.consecutive_doubles = 0

    def release_from_jail(self) -> None:
        self.in_jail = False
        self.jail_turns = 0

    def increment_jail_turns(self, max_turns: int = MAX_JAIL_TURNS) -> None:
        """Count a failed attempt to leave jail; the last allowed one releases."""
        if not self.in_jail:
            return
        self.jail_turns += 1
        if self.jail_turns >= max_turns:
            self.release_from_jail()

    def give_jail_card(self) -> None:
        self.has_jail_card = True

    def use_jail_card(self) -> bool:
        if not self.has_jail_card or not self.in_jail:
            return False
        self.has_jail_card = False
        self.release_from_jail()
        return True

    # === Doubles ===

    def increment_consecutive_doubles(self, limit: int = MAX_CONSECUTIVE_DOUBLES) -> None:
        self.consecutive_doubles += 1
        if self.consecutive_doubles >= limit:
            self.send_to_jail()

    def reset_consecutive_doubles(self) -> None:
        self.consecutive_doubles = 0

    # === Holdings ===

    def owns(self, property_id: str) -> bool:
        return property_id in self.properties

    def owned_in_group(self, group: "PropertyGroup", registry: Mapping[str, "Property"]) -> int:
        """Count owned properties belonging to a group, looked up by id."""
        return sum(1 for pid in self.properties if registry[pid].group == group)

    def owns_complete_group(self, group: "PropertyGroup", registry: Mapping[str, "Property"]) -> bool:
        return self.owned_in_group(group, registry) == group.property_count

    def net_worth(self, registry: Mapping[str, "Property"]) -> int:
        """Cash plus the current value of every owned property."""
        return self.cash + sum(registry[pid].current_value() for pid in self.properties)

    # === Status ===

    def declare_bankrupt(self) -> None:
        self.status = PlayerStatus.BANKRUPT

    @property
    def is_bankrupt(self) -> bool:
        return self.status == PlayerStatus.BANKRUPT

    @property
    def is_active(self) -> bool:
        return self.status == PlayerStatus.ACTIVE

    def __repr__(self) -> str:
        return (
            f"Player(id='{self.player_id}', name='{self.name}', "
            f"cash={self.cash}, position={self.position}, bankrupt={self.is_bankrupt})"
        )
