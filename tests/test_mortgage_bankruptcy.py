"""
Tests for mortgages and bankruptcy.
"""

from monopoly.config import GameConfig
from monopoly.events import EventType
from monopoly.game import GameStatus, create_game


def test_mortgage_property(basic_game):
    """Mortgaging pays half the price; lifting it costs 110% of that."""
    alice = basic_game.get_player("PLAYER01")
    basic_game.board.properties["PROP001"].assign_owner(alice)

    assert basic_game.mortgage_property("PLAYER01", "PROP001")
    assert basic_game.board.properties["PROP001"].is_mortgaged
    assert alice.cash == 1530

    assert basic_game.unmortgage_property("PLAYER01", "PROP001")
    assert alice.cash == 1530 - 33
    assert not basic_game.board.properties["PROP001"].is_mortgaged


def test_cannot_mortgage_others_property(basic_game):
    alice = basic_game.get_player("PLAYER01")
    basic_game.board.properties["PROP001"].assign_owner(alice)

    assert not basic_game.mortgage_property("PLAYER02", "PROP001")
    assert not basic_game.unmortgage_property("PLAYER01", "PROP001")


def test_unmortgage_requires_funds(basic_game):
    alice = basic_game.get_player("PLAYER01")
    basic_game.board.properties["PROP028"].assign_owner(alice)
    assert basic_game.mortgage_property("PLAYER01", "PROP028")
    alice.cash = 219

    assert not basic_game.unmortgage_property("PLAYER01", "PROP028")
    assert basic_game.board.properties["PROP028"].is_mortgaged
    assert alice.cash == 219


def test_tax_bankruptcy_ends_two_player_game(basic_game, dice):
    """
    A player who cannot pay tax goes bankrupt; their estate returns to the
    bank and the other player wins.
    """
    alice = basic_game.get_player("PLAYER01")
    med = basic_game.board.properties["PROP001"]
    med.assign_owner(alice)
    basic_game.mortgage_property("PLAYER01", "PROP001")
    alice.cash = 100
    dice.queue((1, 3))

    result = basic_game.take_turn("PLAYER01")

    assert alice.is_bankrupt
    assert alice.cash == 0
    assert alice.properties == set()
    assert med.owner_id is None
    assert not med.is_mortgaged
    assert "bankrupt" in result.message
    assert basic_game.status == GameStatus.FINISHED
    assert basic_game.winner.player_id == "PLAYER02"


def test_rent_bankruptcy_transfers_estate_to_creditor(four_player_game, dice):
    game = four_player_game
    alice = game.get_player("PLAYER01")
    bob = game.get_player("PLAYER02")

    boardwalk = game.board.properties["PROP028"]
    boardwalk.assign_owner(bob)
    boardwalk.has_hotel = True

    for pid in ("PROP001", "PROP002"):
        game.board.properties[pid].assign_owner(alice)
    game.board.properties["PROP002"].houses = 2
    game.board.properties["PROP004"].assign_owner(alice)
    game.mortgage_property("PLAYER01", "PROP004")
    alice.cash = 100
    alice.give_jail_card()
    alice.set_position(35)
    dice.queue((1, 3))

    game.take_turn("PLAYER01")

    assert alice.is_bankrupt
    assert alice.cash == 0
    assert not alice.has_jail_card
    # Houses sold back at half cost before the estate moves over.
    assert bob.cash == 1500 + 100 + 50
    assert {"PROP001", "PROP002", "PROP004", "PROP028"} == bob.properties
    assert game.board.properties["PROP002"].houses == 0
    assert game.board.properties["PROP004"].is_mortgaged
    assert game.board.properties["PROP004"].owner_id == "PLAYER02"

    assert game.status == GameStatus.IN_PROGRESS
    assert [p.player_id for p in game.get_active_players()] == ["PLAYER02", "PLAYER03", "PLAYER04"]
    assert game.get_current_player().player_id == "PLAYER02"

    bankruptcies = game.event_log.get_events(EventType.BANKRUPTCY)
    assert bankruptcies[0].details["creditor"] == "PLAYER02"


def test_turn_order_skips_bankrupt_players(four_player_game, dice):
    game = four_player_game
    game.get_player("PLAYER02").declare_bankrupt()
    dice.queue((1, 2))

    game.take_turn("PLAYER01")

    assert game.get_current_player().player_id == "PLAYER03"


def test_bankrupt_player_commands_rejected(basic_game):
    alice = basic_game.get_player("PLAYER01")
    alice.set_position(1)
    alice.declare_bankrupt()

    assert not basic_game.buy_property("PLAYER01", "PROP001")


def test_last_player_standing_wins_full_game():
    """Starting broke, the game still finishes with a single winner."""
    game = create_game(["Alice", "Bob"], GameConfig(seed=5, starting_cash=0))

    while game.status == GameStatus.IN_PROGRESS:
        game.take_turn(game.get_current_player().player_id)

    assert game.winner is not None
    assert len(game.get_active_players()) <= 1 or game.turn_count == game.max_turns
