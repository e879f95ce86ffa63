"""
Tests for player cash, movement, jail state and holdings.
"""

import random

import pytest
from monopoly.board import Board
from monopoly.player import JAIL_POSITION, Player, PlayerStatus


@pytest.fixture
def player():
    return Player("PLAYER01", "Alice")


def test_initial_state(player):
    assert player.cash == 1500
    assert player.position == 0
    assert not player.in_jail
    assert player.status == PlayerStatus.ACTIVE
    assert player.properties == set()


def test_money_rejects_negative_amounts(player):
    assert not player.add_money(-5)
    assert not player.subtract_money(-5)
    assert player.cash == 1500


def test_subtract_is_all_or_nothing(player):
    assert not player.subtract_money(1501)
    assert player.cash == 1500

    assert player.subtract_money(1500)
    assert player.cash == 0
    assert player.can_afford(0)
    assert not player.can_afford(1)


def test_move_passing_go_pays_salary(player):
    player.set_position(35)

    passed = player.move_by(10)

    assert passed
    assert player.position == 5
    assert player.cash == 1700


def test_move_landing_on_go_pays_salary(player):
    player.set_position(36)
    assert player.move_by(4)
    assert player.position == 0
    assert player.cash == 1700


def test_move_without_passing_go(player):
    assert not player.move_by(7)
    assert player.position == 7
    assert player.cash == 1500


def test_backward_move_does_not_pay(player):
    player.set_position(7)
    assert not player.move_by(-3)
    assert player.position == 4
    assert player.cash == 1500


def test_jailed_player_does_not_collect(player):
    player.send_to_jail()
    player.set_position(38)
    assert player.move_by(5)
    assert player.cash == 1500


def test_set_position_normalises(player):
    player.set_position(43)
    assert player.position == 3
    player.set_position(-1)
    assert player.position == 39


def test_send_to_jail(player):
    player.consecutive_doubles = 2
    player.send_to_jail()

    assert player.in_jail
    assert player.position == JAIL_POSITION
    assert player.jail_turns == 0
    assert player.consecutive_doubles == 0


def test_jail_turns_release_at_limit(player):
    player.send_to_jail()
    player.increment_jail_turns()
    player.increment_jail_turns()
    assert player.in_jail
    assert player.jail_turns == 2

    player.increment_jail_turns()
    assert not player.in_jail
    assert player.jail_turns == 0


def test_jail_card(player):
    assert not player.use_jail_card()

    player.give_jail_card()
    player.send_to_jail()
    assert player.use_jail_card()
    assert not player.in_jail
    assert not player.has_jail_card


def test_third_double_sends_to_jail(player):
    player.increment_consecutive_doubles()
    player.increment_consecutive_doubles()
    assert not player.in_jail

    player.increment_consecutive_doubles()
    assert player.in_jail
    assert player.consecutive_doubles == 0


def test_group_and_net_worth():
    board = Board(random.Random(0))
    alice = Player("PLAYER01", "Alice")
    board.properties["PROP001"].assign_owner(alice)
    board.properties["PROP002"].assign_owner(alice)
    board.properties["PROP003"].assign_owner(alice)

    brown = board.properties["PROP001"].group
    assert alice.owned_in_group(brown, board.properties) == 2
    assert alice.owns_complete_group(brown, board.properties)
    assert not alice.owns_complete_group(board.properties["PROP003"].group, board.properties)

    board.properties["PROP003"].is_mortgaged = True
    assert alice.net_worth(board.properties) == 1500 + 60 + 60 + 100


def test_bankrupt_status(player):
    player.declare_bankrupt()
    assert player.is_bankrupt
    assert not player.is_active
