"""
Tests for the board layout and lookups.
"""

import random

import pytest
from monopoly.board import BOARD_SIZE, Board
from monopoly.properties import PropertyGroup, PropertyKind
from monopoly.spaces import SpaceType


@pytest.fixture
def board():
    return Board(random.Random(1))


def test_board_has_forty_spaces(board):
    assert len(board.spaces) == BOARD_SIZE
    assert [s.position for s in board.spaces] == list(range(BOARD_SIZE))


def test_board_has_all_properties(board):
    assert len(board.properties) == 28
    assert board.get_property("PROP001").name == "Mediterranean Avenue"
    assert board.get_property("PROP028").name == "Boardwalk"
    assert board.get_property("PROP999") is None


def test_special_spaces(board):
    assert board.space_at(0).space_type == SpaceType.GO
    assert board.space_at(4).space_type == SpaceType.TAX
    assert board.space_at(4).tax_amount == 200
    assert board.space_at(38).tax_amount == 100
    assert board.space_at(10).space_type == SpaceType.JAIL
    assert board.space_at(20).space_type == SpaceType.FREE_PARKING
    assert board.space_at(30).space_type == SpaceType.GO_TO_JAIL
    assert {s.position for s in board.spaces if s.space_type == SpaceType.CHANCE} == {7, 22, 36}
    assert {s.position for s in board.spaces if s.space_type == SpaceType.COMMUNITY_CHEST} == {2, 17, 33}


def test_space_at_wraps(board):
    assert board.space_at(40).position == 0
    assert board.space_at(45).position == 5


def test_railroad_and_utility_spaces_link_properties(board):
    reading = board.space_at(5)
    assert reading.space_type == SpaceType.RAILROAD
    assert board.properties[reading.property_id].kind == PropertyKind.RAILROAD

    water = board.property_at(28)
    assert water.kind == PropertyKind.UTILITY
    assert board.property_at(0) is None


def test_group_sizes_match_board(board):
    for group in PropertyGroup:
        assert len(board.properties_in_group(group)) == group.property_count


def test_position_of(board):
    assert board.position_of("PROP028") == 39
    assert board.position_of("NOPE") == -1


@pytest.mark.parametrize(
    "position,expected",
    [(0, 5), (5, 15), (7, 15), (22, 25), (36, 5), (39, 5)],
)
def test_find_nearest_railroad(board, position, expected):
    assert board.find_nearest_railroad(position) == expected


@pytest.mark.parametrize("position,expected", [(7, 12), (12, 28), (22, 28), (36, 12)])
def test_find_nearest_utility(board, position, expected):
    assert board.find_nearest_utility(position) == expected


def test_decks_are_cyclic(board):
    """Drawing more than a full deck reshuffles instead of running dry."""
    drawn = [board.draw_chance() for _ in range(40)]

    assert len(drawn) == 40
    assert board.chance_deck.reshuffles == 2
    assert len({c.card_id for c in drawn[:16]}) == 16
