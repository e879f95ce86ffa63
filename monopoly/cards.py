"""
Chance and Community Chest card system.
"""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional


class CardType(Enum):
    """Types of card effects."""

    MOVE_TO = "move_to"
    MOVE_RELATIVE = "move_relative"
    MOVE_TO_NEAREST = "move_to_nearest"
    MONEY = "money"
    GO_TO_JAIL = "go_to_jail"
    GET_OUT_OF_JAIL = "get_out_of_jail"
    COLLECT_FROM_PLAYERS = "collect_from_players"
    PROPERTY_TAX = "property_tax"


class NearestTarget(Enum):
    RAILROAD = "railroad"
    UTILITY = "utility"


@dataclass(frozen=True)
class Card:
    """
    Represents a Chance or Community Chest card.

    Only the fields relevant to ``card_type`` are set:
    - MOVE_TO: target_position
    - MOVE_RELATIVE: value (signed offset)
    - MOVE_TO_NEAREST: nearest
    - MONEY: value (positive = receive, negative = pay)
    - COLLECT_FROM_PLAYERS: value (from each other player)
    - PROPERTY_TAX: value per house, hotel_value per hotel
    """

    card_id: str
    description: str
    card_type: CardType
    value: int = 0
    target_position: Optional[int] = None
    nearest: Optional[NearestTarget] = None
    hotel_value: int = 0

    def __repr__(self) -> str:
        return f"Card('{self.card_id}', '{self.description}')"


class Deck:
    """
    A cyclic deck drawn from the front.

    When exhausted, the deck is rebuilt from its factory and reshuffled
    with the deck's own random source, so draws never fail.
    """

    def __init__(self, name: str, factory: Callable[[], List[Card]], rng: random.Random):
        self.name = name
        self.factory = factory
        self.rng = rng
        self.cards: List[Card] = []
        self.reshuffles = 0
        self.restock()

    def restock(self) -> None:
        """Replace the deck with a fresh, shuffled full set."""
        self.cards = list(self.factory())
        self.shuffle()

    def shuffle(self) -> None:
        self.rng.shuffle(self.cards)

    def draw(self) -> Card:
        if not self.cards:
            self.restock()
            self.reshuffles += 1
        return self.cards.pop(0)

    def __len__(self) -> int:
        return len(self.cards)


def chance_cards() -> List[Card]:
    """The standard Chance cards."""
    return [
        Card("CHANCE001", "Advance to GO", CardType.MOVE_TO, target_position=0),
        Card("CHANCE002", "Advance to Illinois Ave", CardType.MOVE_TO, target_position=24),
        Card("CHANCE003", "Advance to St. Charles Place", CardType.MOVE_TO, target_position=11),
        Card("CHANCE004", "Advance to nearest Railroad", CardType.MOVE_TO_NEAREST, nearest=NearestTarget.RAILROAD),
        Card("CHANCE005", "Advance to nearest Utility", CardType.MOVE_TO_NEAREST, nearest=NearestTarget.UTILITY),
        Card("CHANCE006", "Bank pays you $50", CardType.MONEY, value=50),
        Card("CHANCE007", "Get out of Jail Free", CardType.GET_OUT_OF_JAIL),
        Card("CHANCE008", "Go back 3 spaces", CardType.MOVE_RELATIVE, value=-3),
        Card("CHANCE009", "Go to Jail", CardType.GO_TO_JAIL),
        Card("CHANCE010", "Pay poor tax of $15", CardType.MONEY, value=-15),
        Card("CHANCE011", "Take a trip to Reading Railroad", CardType.MOVE_TO, target_position=5),
        Card("CHANCE012", "Take a walk on the Boardwalk", CardType.MOVE_TO, target_position=39),
        Card(
            "CHANCE013",
            "You have been elected Chairman of the Board. Collect $50 from every player",
            CardType.COLLECT_FROM_PLAYERS,
            value=50,
        ),
        Card("CHANCE014", "Your building loan matures. Collect $150", CardType.MONEY, value=150),
        Card("CHANCE015", "You have won a crossword competition. Collect $100", CardType.MONEY, value=100),
        Card("CHANCE016", "Speeding fine $15", CardType.MONEY, value=-15),
    ]


def community_chest_cards() -> List[Card]:
    """The standard Community Chest cards."""
    return [
        Card("CC001", "Advance to GO", CardType.MOVE_TO, target_position=0),
        Card("CC002", "Bank error in your favor. Collect $200", CardType.MONEY, value=200),
        Card("CC003", "Doctor's fees. Pay $50", CardType.MONEY, value=-50),
        Card("CC004", "From sale of stock you get $50", CardType.MONEY, value=50),
        Card("CC005", "Get out of Jail Free", CardType.GET_OUT_OF_JAIL),
        Card("CC006", "Go to Jail", CardType.GO_TO_JAIL),
        Card("CC007", "Holiday fund matures. Receive $100", CardType.MONEY, value=100),
        Card("CC008", "Income tax refund. Collect $20", CardType.MONEY, value=20),
        Card("CC009", "It is your birthday. Collect $10 from every player", CardType.COLLECT_FROM_PLAYERS, value=10),
        Card("CC010", "Life insurance matures. Collect $100", CardType.MONEY, value=100),
        Card("CC011", "Hospital fees. Pay $100", CardType.MONEY, value=-100),
        Card("CC012", "School fees. Pay $50", CardType.MONEY, value=-50),
        Card("CC013", "Receive $25 consultancy fee", CardType.MONEY, value=25),
        Card(
            "CC014",
            "You are assessed for street repairs: Pay $40 per house, $115 per hotel",
            CardType.PROPERTY_TAX,
            value=40,
            hotel_value=115,
        ),
        Card("CC015", "You have won second prize in a beauty contest. Collect $10", CardType.MONEY, value=10),
        Card("CC016", "You inherit $100", CardType.MONEY, value=100),
    ]


def create_chance_deck(rng: random.Random) -> Deck:
    """Create a shuffled Chance deck."""
    return Deck("chance", chance_cards, rng)


def create_community_chest_deck(rng: random.Random) -> Deck:
    """Create a shuffled Community Chest deck."""
    return Deck("community_chest", community_chest_cards, rng)
