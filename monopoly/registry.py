from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Any, Dict, List, Optional

from monopoly.config import GameConfig
from monopoly.exceptions import GameNotFoundError
from monopoly.game import GameState, TurnResult, create_game
from monopoly.snapshot import serialize_snapshot

logger = logging.getLogger(__name__)


class GameRegistry:
    """In-memory registry of running games.

    The engine itself is synchronous; each game gets its own lock so that
    concurrent callers never interleave operations on the same game.
    """

    def __init__(self):
        self._games: Dict[str, GameState] = {}
        self._game_locks: Dict[str, asyncio.Lock] = {}
        self._lock = asyncio.Lock()

    async def create_game(self, player_names: List[str], config: Optional[GameConfig] = None) -> str:
        game = create_game(player_names, config)
        game_id = uuid.uuid4().hex[:12]
        game.game_id = game_id

        async with self._lock:
            self._games[game_id] = game
            self._game_locks[game_id] = asyncio.Lock()

        logger.info(f"Registered game {game_id} with {len(player_names)} players")
        return game_id

    def _lookup(self, game_id: str) -> GameState:
        game = self._games.get(game_id)
        if game is None:
            raise GameNotFoundError(f"Game {game_id} not found")
        return game

    async def get(self, game_id: str) -> GameState:
        return self._lookup(game_id)

    async def take_turn(self, game_id: str, player_id: str) -> TurnResult:
        game = self._lookup(game_id)
        async with self._game_locks[game_id]:
            return game.take_turn(player_id)

    async def snapshot(self, game_id: str) -> Dict[str, Any]:
        game = self._lookup(game_id)
        async with self._game_locks[game_id]:
            return serialize_snapshot(game)

    async def remove(self, game_id: str) -> None:
        async with self._lock:
            if game_id not in self._games:
                raise GameNotFoundError(f"Game {game_id} not found")
            del self._games[game_id]
            del self._game_locks[game_id]
        logger.info(f"Removed game {game_id}")

    def __len__(self) -> int:
        return len(self._games)
