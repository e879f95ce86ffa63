from monopoly.snapshot import serialize_snapshot


def test_basic_snapshot_structure(basic_game):
    snap = serialize_snapshot(basic_game)

    # Core keys exist
    assert snap["status"] == "in_progress"
    assert snap["turn_count"] == 0
    assert snap["max_turns"] == 1000
    assert snap["current_player_id"] == "PLAYER01"
    assert snap["winner_id"] is None
    assert "players" in snap and isinstance(snap["players"], list) and len(snap["players"]) == 2

    # No deck order exposed (only counts)
    chance = snap["decks"]["chance"]
    assert set(chance.keys()) == {"cards_remaining"}
    assert chance["cards_remaining"] == 16

    p0 = snap["players"][0]
    assert {
        "player_id",
        "name",
        "cash",
        "position",
        "in_jail",
        "jail_turns",
        "has_jail_card",
        "is_bankrupt",
        "net_worth",
        "properties",
    } == set(p0.keys())


def test_snapshot_lists_owned_properties(basic_game):
    alice = basic_game.get_player("PLAYER01")
    basic_game.board.properties["PROP002"].assign_owner(alice)
    basic_game.board.properties["PROP001"].assign_owner(alice)
    basic_game.board.properties["PROP001"].houses = 1

    snap = serialize_snapshot(basic_game)

    props = snap["players"][0]["properties"]
    assert [p["property_id"] for p in props] == ["PROP001", "PROP002"]
    assert props[0]["houses"] == 1
    assert props[0]["group"] == "brown"
    assert snap["players"][0]["net_worth"] == 1500 + 60 + 50 + 60
