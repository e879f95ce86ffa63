"""
Tests for game creation, seating and lifecycle.
"""

import pytest
from monopoly.config import GameConfig
from monopoly.exceptions import InvalidActionError, ValidationError
from monopoly.game import GameState, GameStatus, create_game


@pytest.mark.parametrize("count", range(2, 9))
def test_start_with_two_to_eight_players(count):
    names = [f"P{i}" for i in range(count)]
    game = create_game(names, GameConfig(seed=1))

    assert game.status == GameStatus.IN_PROGRESS
    assert len(game.players) == count
    assert all(p.cash == 1500 and p.position == 0 for p in game.players)
    assert game.get_current_player().player_id == "PLAYER01"


def test_player_ids_follow_seating_order(basic_game):
    assert [p.player_id for p in basic_game.players] == ["PLAYER01", "PLAYER02"]
    assert basic_game.get_player("PLAYER02").name == "Bob"
    assert basic_game.get_player("PLAYER09") is None


def test_start_requires_two_players():
    game = GameState(GameConfig(seed=1))
    game.add_player("Solo")

    assert not game.start_game()
    assert game.status == GameStatus.WAITING_FOR_PLAYERS


def test_create_game_with_one_player_raises():
    with pytest.raises(InvalidActionError):
        create_game(["Solo"], GameConfig(seed=1))


def test_ninth_player_rejected():
    game = GameState(GameConfig(seed=1))
    for i in range(8):
        game.add_player(f"P{i}")

    with pytest.raises(InvalidActionError):
        game.add_player("Extra")


def test_cannot_join_after_start(basic_game):
    with pytest.raises(InvalidActionError):
        basic_game.add_player("Late")


def test_start_game_twice_returns_false(basic_game):
    assert not basic_game.start_game()


def test_custom_starting_cash():
    game = create_game(["A", "B"], GameConfig(seed=1, starting_cash=500))
    assert [p.cash for p in game.players] == [500, 500]


def test_invalid_config_rejected():
    with pytest.raises(ValidationError):
        GameConfig(starting_cash=-1)
    with pytest.raises(ValidationError):
        GameConfig(max_players=9)
    with pytest.raises(ValidationError):
        GameConfig(max_turns=0)


def test_take_turn_before_start_raises():
    game = GameState(GameConfig(seed=1))
    game.add_player("A")
    game.add_player("B")

    with pytest.raises(InvalidActionError):
        game.take_turn("PLAYER01")


def test_take_turn_out_of_order_raises(basic_game):
    with pytest.raises(InvalidActionError):
        basic_game.take_turn("PLAYER02")


def test_seeded_games_are_reproducible():
    """Same seed and same commands give the same game."""
    def play(seed):
        game = create_game(["A", "B", "C"], GameConfig(seed=seed))
        results = []
        for _ in range(60):
            if game.status != GameStatus.IN_PROGRESS:
                break
            current = game.get_current_player()
            result = game.take_turn(current.player_id)
            results.append((result.player_id, result.die1, result.die2, result.message))
        return results, [(p.cash, p.position) for p in game.players]

    assert play(99) == play(99)
