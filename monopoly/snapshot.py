"""
Public snapshot serialization of GameState.

Produces a sanitized, UI-friendly view of the current game without
exposing hidden information (e.g., deck order).
"""

from __future__ import annotations

from typing import Any, Dict, List

from monopoly.game import GameState


def serialize_snapshot(game: GameState) -> Dict[str, Any]:
    """Serialize a GameState into a public, stable JSON dict.

    The snapshot includes:
    - game_id, status, turn_count, max_turns and current_player_id
    - players with public info (cash, position, jail, properties with status)
    - winner (if finished)
    - deck counts only
    """
    players: List[Dict[str, Any]] = []
    for player in game.players:
        props: List[Dict[str, Any]] = []
        for pid in sorted(player.properties):
            prop = game.board.properties[pid]
            props.append(
                {
                    "property_id": pid,
                    "name": prop.name,
                    "position": prop.position,
                    "group": prop.group.name.lower(),
                    "houses": prop.houses,
                    "hotel": prop.has_hotel,
                    "mortgaged": prop.is_mortgaged,
                }
            )

        players.append(
            {
                "player_id": player.player_id,
                "name": player.name,
                "cash": player.cash,
                "position": player.position,
                "in_jail": player.in_jail,
                "jail_turns": player.jail_turns,
                "has_jail_card": player.has_jail_card,
                "is_bankrupt": player.is_bankrupt,
                "net_worth": player.net_worth(game.board.properties),
                "properties": props,
            }
        )

    current = game.get_current_player()
    snapshot: Dict[str, Any] = {
        "game_id": game.game_id,
        "status": game.status.value,
        "turn_count": game.turn_count,
        "max_turns": game.max_turns,
        "current_player_id": current.player_id if current else None,
        "winner_id": game.winner.player_id if game.winner else None,
        "players": players,
        "decks": {
            "chance": {"cards_remaining": len(game.board.chance_deck)},
            "community_chest": {"cards_remaining": len(game.board.community_chest_deck)},
        },
    }

    return snapshot
