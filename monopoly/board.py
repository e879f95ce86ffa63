import random
from typing import Dict, List, Optional

from monopoly.cards import Card, Deck, create_chance_deck, create_community_chest_deck
from monopoly.config import PropertyData, TaxData
from monopoly.properties import Property, PropertyGroup, PropertyKind
from monopoly.spaces import Space, SpaceType

BOARD_SIZE = 40

RAILROAD_POSITIONS = (5, 15, 25, 35)
UTILITY_POSITIONS = (12, 28)

_STREET = PropertyKind.STREET
_RAILROAD = PropertyKind.RAILROAD
_UTILITY = PropertyKind.UTILITY

STANDARD_PROPERTIES = (
    PropertyData("PROP001", "Mediterranean Avenue", 1, _STREET, PropertyGroup.BROWN, 60, 2, 50, 50),
    PropertyData("PROP002", "Baltic Avenue", 3, _STREET, PropertyGroup.BROWN, 60, 4, 50, 50),
    PropertyData("PROP003", "Reading Railroad", 5, _RAILROAD, PropertyGroup.RAILROAD, 200, 25),
    PropertyData("PROP004", "Oriental Avenue", 6, _STREET, PropertyGroup.LIGHT_BLUE, 100, 6, 50, 50),
    PropertyData("PROP005", "Vermont Avenue", 8, _STREET, PropertyGroup.LIGHT_BLUE, 100, 6, 50, 50),
    PropertyData("PROP006", "Connecticut Avenue", 9, _STREET, PropertyGroup.LIGHT_BLUE, 120, 8, 50, 50),
    PropertyData("PROP007", "St. Charles Place", 11, _STREET, PropertyGroup.PINK, 140, 10, 100, 100),
    PropertyData("PROP008", "Electric Company", 12, _UTILITY, PropertyGroup.UTILITY, 150),
    PropertyData("PROP009", "States Avenue", 13, _STREET, PropertyGroup.PINK, 140, 10, 100, 100),
    PropertyData("PROP010", "Virginia Avenue", 14, _STREET, PropertyGroup.PINK, 160, 12, 100, 100),
    PropertyData("PROP011", "Pennsylvania Railroad", 15, _RAILROAD, PropertyGroup.RAILROAD, 200, 25),
    PropertyData("PROP012", "St. James Place", 16, _STREET, PropertyGroup.ORANGE, 180, 14, 100, 100),
    PropertyData("PROP013", "Tennessee Avenue", 18, _STREET, PropertyGroup.ORANGE, 180, 14, 100, 100),
    PropertyData("PROP014", "New York Avenue", 19, _STREET, PropertyGroup.ORANGE, 200, 16, 100, 100),
    PropertyData("PROP015", "Kentucky Avenue", 21, _STREET, PropertyGroup.RED, 220, 18, 150, 150),
    PropertyData("PROP016", "Indiana Avenue", 23, _STREET, PropertyGroup.RED, 220, 18, 150, 150),
    PropertyData("PROP017", "Illinois Avenue", 24, _STREET, PropertyGroup.RED, 240, 20, 150, 150),
    PropertyData("PROP018", "B&O Railroad", 25, _RAILROAD, PropertyGroup.RAILROAD, 200, 25),
    PropertyData("PROP019", "Atlantic Avenue", 26, _STREET, PropertyGroup.YELLOW, 260, 22, 150, 150),
    PropertyData("PROP020", "Ventnor Avenue", 27, _STREET, PropertyGroup.YELLOW, 260, 22, 150, 150),
    PropertyData("PROP021", "Water Works", 28, _UTILITY, PropertyGroup.UTILITY, 150),
    PropertyData("PROP022", "Marvin Gardens", 29, _STREET, PropertyGroup.YELLOW, 280, 24, 150, 150),
    PropertyData("PROP023", "Pacific Avenue", 31, _STREET, PropertyGroup.GREEN, 300, 26, 200, 200),
    PropertyData("PROP024", "North Carolina Avenue", 32, _STREET, PropertyGroup.GREEN, 300, 26, 200, 200),
    PropertyData("PROP025", "Pennsylvania Avenue", 34, _STREET, PropertyGroup.GREEN, 320, 28, 200, 200),
    PropertyData("PROP026", "Short Line Railroad", 35, _RAILROAD, PropertyGroup.RAILROAD, 200, 25),
    PropertyData("PROP027", "Park Place", 37, _STREET, PropertyGroup.DARK_BLUE, 350, 35, 200, 200),
    PropertyData("PROP028", "Boardwalk", 39, _STREET, PropertyGroup.DARK_BLUE, 400, 50, 200, 200),
)

STANDARD_TAXES = (
    TaxData("Income Tax", 4, 200),
    TaxData("Luxury Tax", 38, 100),
)

_SPECIAL_SPACES = {
    0: ("GO", SpaceType.GO),
    2: ("Community Chest", SpaceType.COMMUNITY_CHEST),
    7: ("Chance", SpaceType.CHANCE),
    10: ("Jail", SpaceType.JAIL),
    17: ("Community Chest", SpaceType.COMMUNITY_CHEST),
    20: ("Free Parking", SpaceType.FREE_PARKING),
    22: ("Chance", SpaceType.CHANCE),
    30: ("Go to Jail", SpaceType.GO_TO_JAIL),
    33: ("Community Chest", SpaceType.COMMUNITY_CHEST),
    36: ("Chance", SpaceType.CHANCE),
}

_SPACE_TYPE_FOR_KIND = {
    PropertyKind.STREET: SpaceType.PROPERTY,
    PropertyKind.RAILROAD: SpaceType.RAILROAD,
    PropertyKind.UTILITY: SpaceType.UTILITY,
}


class Board:
    """The Monopoly game board with 40 spaces, the title deeds and both card decks."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.properties: Dict[str, Property] = {
            data.property_id: Property.from_data(data) for data in STANDARD_PROPERTIES
        }
        self.spaces: List[Space] = self._create_standard_board()
        self.chance_deck: Deck = create_chance_deck(self.rng)
        self.community_chest_deck: Deck = create_community_chest_deck(self.rng)

    def _create_standard_board(self) -> List[Space]:
        """Create the standard 40-space board from the static tables."""
        by_position: Dict[int, Space] = {}
        for position, (name, space_type) in _SPECIAL_SPACES.items():
            by_position[position] = Space(position, name, space_type)
        for tax in STANDARD_TAXES:
            by_position[tax.position] = Space(tax.position, tax.name, SpaceType.TAX, tax_amount=tax.amount)
        for data in STANDARD_PROPERTIES:
            by_position[data.position] = Space(
                data.position,
                data.name,
                _SPACE_TYPE_FOR_KIND[data.kind],
                property_id=data.property_id,
            )

        if sorted(by_position) != list(range(BOARD_SIZE)):
            raise ValueError("Standard board layout must cover exactly 40 positions")
        return [by_position[pos] for pos in range(BOARD_SIZE)]

    def space_at(self, position: int) -> Space:
        """Get the space at the given position (wraps around the board)."""
        return self.spaces[position % BOARD_SIZE]

    def get_property(self, property_id: str) -> Optional[Property]:
        return self.properties.get(property_id)

    def property_at(self, position: int) -> Optional[Property]:
        """Get the property linked to a space, or None for non-ownable spaces."""
        space = self.space_at(position)
        if space.property_id is None:
            return None
        return self.properties[space.property_id]

    def position_of(self, property_id: str) -> int:
        """Board position of a property, -1 if unknown."""
        prop = self.properties.get(property_id)
        if prop is None or prop.position is None:
            return -1
        return prop.position

    def properties_in_group(self, group: PropertyGroup) -> List[Property]:
        return [p for p in self.properties.values() if p.group == group]

    def draw_chance(self) -> Card:
        return self.chance_deck.draw()

    def draw_community_chest(self) -> Card:
        return self.community_chest_deck.draw()

    @staticmethod
    def _next_after(position: int, candidates) -> int:
        for candidate in candidates:
            if candidate > position:
                return candidate
        return candidates[0]

    def find_nearest_railroad(self, position: int) -> int:
        """First railroad strictly ahead of the position, wrapping past GO."""
        return self._next_after(position, RAILROAD_POSITIONS)

    def find_nearest_utility(self, position: int) -> int:
        """First utility strictly ahead of the position, wrapping past GO."""
        return self._next_after(position, UTILITY_POSITIONS)
