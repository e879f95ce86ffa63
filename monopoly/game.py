"""
Main game engine and state management.
"""

import logging
import random
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from monopoly.board import Board
from monopoly.cards import Card, CardType, NearestTarget
from monopoly.config import GameConfig
from monopoly.dice import Dice
from monopoly.events import EventLog, EventType
from monopoly.exceptions import InvalidActionError
from monopoly.player import Player
from monopoly.properties import Property
from monopoly.spaces import Space, SpaceType

logger = logging.getLogger(__name__)

# Card spaces reached by a card move are resolved, but chains stop here.
MAX_CARD_CHAIN = 2


class GameStatus(Enum):
    """Lifecycle of a game. Transitions only move forward."""

    WAITING_FOR_PLAYERS = "waiting_for_players"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


@dataclass(frozen=True)
class TurnResult:
    """Outcome of a single ``take_turn`` call."""

    player_id: str
    die1: int
    die2: int
    doubles: bool
    message: str
    extra_turn: bool = False

    @property
    def total(self) -> int:
        return self.die1 + self.die2


class GameState:
    """
    Represents the complete state of a Monopoly game.
    This is the main interface for the game engine.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        dice: Optional[Dice] = None,
        game_id: Optional[str] = None,
    ):
        self.config = config or GameConfig()
        self.game_id = game_id or uuid.uuid4().hex[:12]
        self.event_log = EventLog()

        self.rng = random.Random(self.config.seed)
        self.board = Board(self.rng)
        self.dice = dice or Dice(self.rng)

        self.players: List[Player] = []
        self._players_by_id: Dict[str, Player] = {}

        self.status = GameStatus.WAITING_FOR_PLAYERS
        self.current_player_index = 0
        self.turn_count = 0
        self.winner: Optional[Player] = None

    @property
    def max_turns(self) -> int:
        return self.config.max_turns

    # === Setup ===

    def add_player(self, name: str) -> Player:
        """Seat a new player. Only allowed before the game starts."""
        if self.status != GameStatus.WAITING_FOR_PLAYERS:
            raise InvalidActionError("Cannot add players after game has started")
        if len(self.players) >= self.config.max_players:
            raise InvalidActionError(f"Maximum {self.config.max_players} players allowed")

        player_id = f"PLAYER{len(self.players) + 1:02d}"
        player = Player(player_id, name, self.config.starting_cash)
        self.players.append(player)
        self._players_by_id[player_id] = player

        self.event_log.log(EventType.PLAYER_JOINED, player_id=player_id, name=player.name)
        return player

    def start_game(self) -> bool:
        """Begin play. Returns False while fewer than the minimum players are seated."""
        if self.status != GameStatus.WAITING_FOR_PLAYERS:
            return False
        if len(self.players) < self.config.min_players:
            logger.debug(f"Game {self.game_id}: cannot start with {len(self.players)} player(s)")
            return False

        self.status = GameStatus.IN_PROGRESS
        self.current_player_index = 0

        self.event_log.log(
            EventType.GAME_START,
            players=[p.name for p in self.players],
            starting_cash=self.config.starting_cash,
            seed=self.config.seed,
        )
        logger.info(f"Game {self.game_id} started with {len(self.players)} players")
        return True

    # === Queries ===

    def get_player(self, player_id: str) -> Optional[Player]:
        return self._players_by_id.get(player_id)

    def get_current_player(self) -> Optional[Player]:
        if not self.players:
            return None
        return self.players[self.current_player_index]

    def get_active_players(self) -> List[Player]:
        """Get all non-bankrupt players in seating order."""
        return [p for p in self.players if not p.is_bankrupt]

    def owned_in_group(self, prop: Property) -> int:
        """How many properties of this property's group its owner holds."""
        owner = self.get_player(prop.owner_id) if prop.owner_id else None
        if owner is None:
            return 0
        return owner.owned_in_group(prop.group, self.board.properties)

    def calculate_rent(self, property_id: str, dice_total: int = 0) -> int:
        prop = self.board.get_property(property_id)
        if prop is None:
            return 0
        return prop.calculate_rent(dice_total, self.owned_in_group(prop))

    def net_worth(self, player_id: str) -> int:
        player = self._players_by_id[player_id]
        return player.net_worth(self.board.properties)

    # === Turn flow ===

    def take_turn(self, player_id: str) -> TurnResult:
        """
        Play one roll for the current player.

        Raises:
            InvalidActionError: game not in progress, or not this player's turn
        """
        if self.status != GameStatus.IN_PROGRESS:
            raise InvalidActionError("Game is not in progress")

        player = self.get_current_player()
        if player.player_id != player_id:
            raise InvalidActionError(f"Not {player_id}'s turn (current: {player.player_id})")

        if player.is_bankrupt:
            self._advance_to_next_player()
            return TurnResult(player.player_id, 0, 0, False, "Player is bankrupt")

        self.event_log.log(EventType.TURN_START, player_id=player.player_id, turn=self.turn_count)

        if player.in_jail:
            result = self._handle_jail_turn(player)
        else:
            result = self._handle_regular_turn(player)

        logger.debug(f"Game {self.game_id} turn {self.turn_count}: {player.name} - {result.message}")

        self._check_game_end()
        if self.status == GameStatus.IN_PROGRESS and not result.extra_turn:
            player.reset_consecutive_doubles()
            self._advance_to_next_player()

        self.turn_count += 1
        if self.status == GameStatus.IN_PROGRESS and self.turn_count >= self.config.max_turns:
            self._end_game_by_turn_limit()

        return result

    def _roll(self, player: Player) -> int:
        total = self.dice.roll()
        self.event_log.log(
            EventType.DICE_ROLL,
            player_id=player.player_id,
            die1=self.dice.die1,
            die2=self.dice.die2,
            total=total,
            doubles=self.dice.is_doubles(),
        )
        return total

    def _result(self, player: Player, message: str, extra_turn: bool = False) -> TurnResult:
        return TurnResult(
            player.player_id,
            self.dice.die1,
            self.dice.die2,
            self.dice.is_doubles(),
            message,
            extra_turn,
        )

    def _handle_regular_turn(self, player: Player) -> TurnResult:
        total = self._roll(player)
        doubles = self.dice.is_doubles()

        if doubles:
            player.increment_consecutive_doubles(self.config.max_consecutive_doubles)
            if player.in_jail:
                self.event_log.log(EventType.GO_TO_JAIL, player_id=player.player_id, reason="three_doubles")
                return self._result(player, "Sent to jail for rolling 3 doubles in a row")
        else:
            player.reset_consecutive_doubles()

        self._move(player, total)
        message = self._resolve_landing(player, total)
        extra_turn = doubles and not player.in_jail and not player.is_bankrupt
        return self._result(player, message, extra_turn)

    def _handle_jail_turn(self, player: Player) -> TurnResult:
        """
        Rolling in jail: doubles release the player and move them with that
        roll. The last allowed failure forces the fine, then the move.
        """
        total = self._roll(player)
        self.event_log.log(
            EventType.JAIL_ATTEMPT,
            player_id=player.player_id,
            attempt=player.jail_turns + 1,
            doubles=self.dice.is_doubles(),
        )

        if self.dice.is_doubles():
            player.release_from_jail()
            self.event_log.log(EventType.JAIL_RELEASE, player_id=player.player_id, method="doubles")
            self._move(player, total)
            return self._result(player, "Got out of jail with doubles! " + self._resolve_landing(player, total))

        player.increment_jail_turns(self.config.max_jail_turns)
        if player.in_jail:
            return self._result(
                player, f"Still in jail (turn {player.jail_turns}/{self.config.max_jail_turns})"
            )

        fine = self.config.jail_fine
        if not player.subtract_money(fine):
            self._declare_bankruptcy(player, creditor=None, reason="jail_fine")
            return self._result(player, f"Cannot afford ${fine} jail fine - declared bankrupt")

        self.event_log.log(EventType.JAIL_RELEASE, player_id=player.player_id, method="forced_fine", amount=fine)
        self._move(player, total)
        return self._result(player, f"Paid ${fine} fine to get out of jail. " + self._resolve_landing(player, total))

    def _advance_to_next_player(self) -> None:
        """Move to the next non-bankrupt player in seating order."""
        for _ in range(len(self.players)):
            self.current_player_index = (self.current_player_index + 1) % len(self.players)
            if not self.get_current_player().is_bankrupt:
                break

    def _check_game_end(self) -> None:
        active = self.get_active_players()
        if len(active) > 1:
            return

        self.status = GameStatus.FINISHED
        self.winner = active[0] if active else None
        self.event_log.log(
            EventType.GAME_END,
            player_id=self.winner.player_id if self.winner else None,
            reason="last_player_standing",
        )
        logger.info(f"Game {self.game_id} finished: winner {self.winner.name if self.winner else 'none'}")

    def _end_game_by_turn_limit(self) -> None:
        """End game due to the turn ceiling; richest active player wins."""
        best: Optional[Player] = None
        best_worth = -1
        for player in self.get_active_players():
            worth = player.net_worth(self.board.properties)
            if worth > best_worth:
                best, best_worth = player, worth

        self.status = GameStatus.FINISHED
        self.winner = best
        self.event_log.log(
            EventType.GAME_END,
            player_id=best.player_id if best else None,
            reason="turn_limit",
            net_worth=best_worth,
        )
        logger.info(f"Game {self.game_id} hit turn limit {self.config.max_turns}; winner {best.name if best else 'none'}")

    # === Movement ===

    def _move(self, player: Player, spaces: int) -> None:
        old_position = player.position
        passed_go = player.move_by(spaces, self.config.go_salary)
        self.event_log.log(
            EventType.MOVE, player_id=player.player_id, **{"from": old_position, "to": player.position, "spaces": spaces}
        )
        if passed_go and not player.in_jail:
            self.event_log.log(EventType.PASS_GO, player_id=player.player_id, amount=self.config.go_salary)

    def _move_to(self, player: Player, position: int) -> bool:
        """Jump to a position, collecting GO salary if the jump wraps past start."""
        old_position = player.position
        passed_go = position < old_position
        player.set_position(position)
        if passed_go:
            player.add_money(self.config.go_salary)
            self.event_log.log(EventType.PASS_GO, player_id=player.player_id, amount=self.config.go_salary)
        self.event_log.log(
            EventType.MOVE, player_id=player.player_id, **{"from": old_position, "to": position, "direct": True}
        )
        return passed_go

    # === Landing ===

    def _resolve_landing(self, player: Player, dice_total: int, depth: int = 0) -> str:
        space = self.board.space_at(player.position)
        self.event_log.log(EventType.LAND, player_id=player.player_id, position=space.position, space=space.name)

        if space.is_ownable:
            return self._handle_property_space(player, self.board.properties[space.property_id], dice_total)
        if space.space_type == SpaceType.GO:
            return "Landed on GO"
        if space.space_type == SpaceType.TAX:
            return self._handle_tax(player, space)
        if space.space_type in (SpaceType.CHANCE, SpaceType.COMMUNITY_CHEST):
            if depth >= MAX_CARD_CHAIN:
                return f"Landed on {space.name}"
            if space.space_type == SpaceType.CHANCE:
                card = self.board.draw_chance()
            else:
                card = self.board.draw_community_chest()
            self.event_log.log(
                EventType.CARD_DRAW, player_id=player.player_id, deck=space.space_type.value, card=card.card_id
            )
            return f"Drew {space.name} card: " + self.execute_card(player, card, dice_total, depth + 1)
        if space.space_type == SpaceType.GO_TO_JAIL:
            self._send_to_jail(player, reason="go_to_jail_space")
            return "Go to Jail!"
        if space.space_type == SpaceType.JAIL:
            return "Just visiting jail"
        return "Free parking - nothing happens"

    def _handle_property_space(self, player: Player, prop: Property, dice_total: int) -> str:
        if not prop.is_owned():
            return f"{prop.name} is available for purchase (${prop.price})"
        if prop.is_owned_by(player):
            return f"You own {prop.name}"

        owner = self._players_by_id[prop.owner_id]
        rent = prop.calculate_rent(dice_total, self.owned_in_group(prop))
        if rent == 0:
            return f"{prop.name} is mortgaged - no rent due"

        if not player.subtract_money(rent):
            self._declare_bankruptcy(player, creditor=owner, reason="rent")
            return f"Cannot afford rent of ${rent} - declared bankrupt"

        owner.add_money(rent)
        self.event_log.log(
            EventType.RENT_PAYMENT,
            player_id=player.player_id,
            owner=owner.player_id,
            property=prop.property_id,
            amount=rent,
            payer_balance=player.cash,
            owner_balance=owner.cash,
        )
        return f"Paid ${rent} rent to {owner.name} for {prop.name}"

    def _handle_tax(self, player: Player, space: Space) -> str:
        amount = space.tax_amount
        if not player.subtract_money(amount):
            self._declare_bankruptcy(player, creditor=None, reason="tax")
            return f"Cannot afford {space.name} - declared bankrupt"
        self.event_log.log(EventType.TAX_PAYMENT, player_id=player.player_id, amount=amount, new_balance=player.cash)
        return f"Paid {space.name} of ${amount}"

    def _send_to_jail(self, player: Player, reason: str) -> None:
        player.send_to_jail()
        self.event_log.log(EventType.GO_TO_JAIL, player_id=player.player_id, reason=reason)

    # === Cards ===

    def execute_card(self, player: Player, card: Card, dice_total: int = 0, depth: int = 1) -> str:
        """Apply a drawn card to a player and describe what happened."""
        self.event_log.log(
            EventType.CARD_EFFECT, player_id=player.player_id, card=card.card_id, type=card.card_type.value
        )

        if card.card_type == CardType.MOVE_TO:
            passed_go = self._move_to(player, card.target_position)
            suffix = f" - collected ${self.config.go_salary}" if passed_go else ""
            return card.description + suffix + self._after_card_move(player, dice_total, depth)

        if card.card_type == CardType.MOVE_RELATIVE:
            self._move(player, card.value)
            return card.description + self._after_card_move(player, dice_total, depth)

        if card.card_type == CardType.MOVE_TO_NEAREST:
            if card.nearest == NearestTarget.RAILROAD:
                target = self.board.find_nearest_railroad(player.position)
            else:
                target = self.board.find_nearest_utility(player.position)
            passed_go = self._move_to(player, target)
            suffix = f" - passed GO, collected ${self.config.go_salary}" if passed_go else ""
            return card.description + suffix + self._after_card_move(player, dice_total, depth)

        if card.card_type == CardType.MONEY:
            if card.value >= 0:
                player.add_money(card.value)
                return f"{card.description} - received ${card.value}"
            if not player.subtract_money(-card.value):
                self._declare_bankruptcy(player, creditor=None, reason="card")
                return f"{card.description} - cannot afford payment, declared bankrupt"
            return f"{card.description} - paid ${-card.value}"

        if card.card_type == CardType.GO_TO_JAIL:
            self._send_to_jail(player, reason="card")
            return card.description

        if card.card_type == CardType.GET_OUT_OF_JAIL:
            player.give_jail_card()
            return f"{card.description} - keep this card"

        if card.card_type == CardType.COLLECT_FROM_PLAYERS:
            collected = self._collect_from_players(player, card.value)
            return f"{card.description} - collected ${collected} from other players"

        if card.card_type == CardType.PROPERTY_TAX:
            amount = self._repair_assessment(player, card.value, card.hotel_value)
            if not player.subtract_money(amount):
                self._declare_bankruptcy(player, creditor=None, reason="card")
                return f"{card.description} - cannot afford ${amount}, declared bankrupt"
            return f"{card.description} - paid ${amount}"

        return card.description

    def _after_card_move(self, player: Player, dice_total: int, depth: int) -> str:
        if player.in_jail:
            return ""
        return ". " + self._resolve_landing(player, dice_total, depth)

    def _collect_from_players(self, player: Player, amount: int) -> int:
        """Every other solvent player pays; those who cannot pay hand over all they have."""
        collected = 0
        for other in self.players:
            if other is player or other.is_bankrupt:
                continue
            if other.subtract_money(amount):
                collected += amount
                continue
            collected += other.cash
            other.cash = 0
            self._declare_bankruptcy(other, creditor=player, reason="card")
        player.add_money(collected)
        return collected

    def _repair_assessment(self, player: Player, per_house: int, per_hotel: int) -> int:
        total = 0
        for pid in player.properties:
            prop = self.board.properties[pid]
            total += prop.houses * per_house
            if prop.has_hotel:
                total += per_hotel
        return total

    # === Bankruptcy ===

    def _declare_bankruptcy(self, player: Player, creditor: Optional[Player], reason: str) -> None:
        """
        Retire a player who cannot cover a mandatory payment.

        Buildings are sold back to the bank at half cost. A creditor player
        receives the remaining cash and every property (mortgages kept);
        when the bank is the creditor the cash is forfeited and properties
        return to the bank unowned and unmortgaged.
        """
        owned = sorted(player.properties)
        building_cash = 0
        for pid in owned:
            building_cash += self.board.properties[pid].liquidate_buildings()
        player.add_money(building_cash)

        for pid in owned:
            prop = self.board.properties[pid]
            prop.release_owner(player)
            if creditor is not None:
                prop.assign_owner(creditor)
            else:
                prop.is_mortgaged = False

        if creditor is not None:
            creditor.add_money(player.cash)
        player.cash = 0
        player.has_jail_card = False
        player.release_from_jail()
        player.reset_consecutive_doubles()
        player.declare_bankrupt()

        self.event_log.log(
            EventType.BANKRUPTCY,
            player_id=player.player_id,
            creditor=creditor.player_id if creditor else None,
            properties=owned,
            building_cash=building_cash,
            reason=reason,
        )
        logger.info(
            f"Game {self.game_id}: {player.name} is bankrupt ({reason}), "
            f"assets to {creditor.name if creditor else 'the bank'}"
        )

    # === Property commands ===

    def _owner_and_property(self, player_id: str, property_id: str):
        player = self._players_by_id.get(player_id)
        prop = self.board.get_property(property_id)
        if player is None or prop is None or player.is_bankrupt:
            return None, None
        if self.status == GameStatus.FINISHED:
            return None, None
        return player, prop

    def buy_property(self, player_id: str, property_id: str) -> bool:
        """
        Buy an unowned property the player is standing on.
        Returns True if successful, False otherwise.
        """
        player, prop = self._owner_and_property(player_id, property_id)
        if player is None:
            return False
        if player.position != prop.position:
            logger.debug(f"{player_id} is not standing on {property_id}")
            return False
        if not prop.buy(player):
            logger.debug(f"{player_id} could not buy {property_id}")
            return False

        self.event_log.log(
            EventType.PURCHASE,
            player_id=player_id,
            property=property_id,
            price=prop.price,
            new_balance=player.cash,
        )
        return True

    def build_house(self, player_id: str, property_id: str) -> bool:
        player, prop = self._owner_and_property(player_id, property_id)
        if player is None or not prop.is_owned_by(player):
            return False
        if not prop.build_house(player, self.owned_in_group(prop)):
            return False
        self.event_log.log(
            EventType.BUILD_HOUSE,
            player_id=player_id,
            property=property_id,
            cost=prop.house_cost,
            houses=prop.houses,
            new_balance=player.cash,
        )
        return True

    def build_hotel(self, player_id: str, property_id: str) -> bool:
        player, prop = self._owner_and_property(player_id, property_id)
        if player is None or not prop.is_owned_by(player):
            return False
        if not prop.build_hotel(player, self.owned_in_group(prop)):
            return False
        self.event_log.log(
            EventType.BUILD_HOTEL,
            player_id=player_id,
            property=property_id,
            cost=prop.hotel_cost,
            new_balance=player.cash,
        )
        return True

    def sell_house(self, player_id: str, property_id: str) -> bool:
        player, prop = self._owner_and_property(player_id, property_id)
        if player is None or not prop.sell_house(player):
            return False
        self.event_log.log(
            EventType.SELL_BUILDING,
            player_id=player_id,
            property=property_id,
            type="house",
            houses=prop.houses,
            new_balance=player.cash,
        )
        return True

    def sell_hotel(self, player_id: str, property_id: str) -> bool:
        player, prop = self._owner_and_property(player_id, property_id)
        if player is None or not prop.sell_hotel(player):
            return False
        self.event_log.log(
            EventType.SELL_BUILDING,
            player_id=player_id,
            property=property_id,
            type="hotel",
            houses=prop.houses,
            new_balance=player.cash,
        )
        return True

    def mortgage_property(self, player_id: str, property_id: str) -> bool:
        player, prop = self._owner_and_property(player_id, property_id)
        if player is None or not prop.mortgage(player):
            return False
        self.event_log.log(
            EventType.MORTGAGE,
            player_id=player_id,
            property=property_id,
            value=prop.mortgage_value,
            new_balance=player.cash,
        )
        return True

    def unmortgage_property(self, player_id: str, property_id: str) -> bool:
        player, prop = self._owner_and_property(player_id, property_id)
        if player is None:
            return False
        cost = prop.unmortgage_cost(self.config.mortgage_interest_rate)
        if not prop.unmortgage(player, self.config.mortgage_interest_rate):
            return False
        self.event_log.log(
            EventType.UNMORTGAGE,
            player_id=player_id,
            property=property_id,
            cost=cost,
            new_balance=player.cash,
        )
        return True

    # === Voluntary jail exits ===

    def pay_jail_fine(self, player_id: str) -> bool:
        """
        Player pays fine to get out of jail.
        Returns True if successful, False if not jailed or insufficient funds.
        """
        player = self._players_by_id.get(player_id)
        if player is None or not player.in_jail:
            return False
        if not player.subtract_money(self.config.jail_fine):
            return False
        player.release_from_jail()
        self.event_log.log(
            EventType.JAIL_RELEASE, player_id=player_id, method="fine", amount=self.config.jail_fine
        )
        return True

    def use_jail_card(self, player_id: str) -> bool:
        """Spend the Get Out of Jail Free token, if held."""
        player = self._players_by_id.get(player_id)
        if player is None or not player.use_jail_card():
            return False
        self.event_log.log(EventType.JAIL_RELEASE, player_id=player_id, method="card")
        return True

    def __repr__(self) -> str:
        current = self.get_current_player()
        return (
            f"GameState(id='{self.game_id}', players={len(self.players)}, status={self.status.value}, "
            f"turn={self.turn_count}, current={current.name if current else None})"
        )


def create_game(
    player_names: List[str],
    config: Optional[GameConfig] = None,
    dice: Optional[Dice] = None,
    start: bool = True,
) -> GameState:
    """
    Create a new game with the specified players.

    Args:
        player_names: Display names in seating order
        config: Game configuration (defaults to GameConfig())
        dice: Optional dice, e.g. a scripted source for tests
        start: Start the game immediately

    Returns:
        Initialized GameState
    """
    game = GameState(config, dice=dice)
    for name in player_names:
        game.add_player(name)
    if start and not game.start_game():
        raise InvalidActionError(f"Game requires at least {game.config.min_players} players")
    return game
