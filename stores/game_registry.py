from typing import Optional
from datetime import datetime
import logging

from game import WumpusGame, NoActiveGame
from utils.time import now_utc

logger = logging.getLogger(__name__)


# =========================
# GameRegistry
# =========================

class GameRegistry:
    """
    Live games keyed by connection id.

    Invariants:
    - At most one game per connection
    - A game is only ever reached through its own connection id
    - Nothing here survives a process restart
    """

    def __init__(self):
        self._games: dict[str, WumpusGame] = {}
        self._last_active: dict[str, datetime] = {}

    def register(self, connection_id: str, game: WumpusGame) -> None:
        """Attach `game` to `connection_id`, replacing any game already there."""
        if connection_id in self._games:
            logger.info(f"[REGISTRY] Replacing game for connection {connection_id}")
        else:
            logger.info(f"[REGISTRY] Registered game for connection {connection_id}")
        self._games[connection_id] = game
        self._last_active[connection_id] = now_utc()

    def get(self, connection_id: str) -> WumpusGame:
        """Return the live game for `connection_id` and mark it active.

        Raises:
            NoActiveGame: If no game is registered for the connection.
        """
        game = self._games.get(connection_id)
        if game is None:
            raise NoActiveGame("No active game found")
        self._last_active[connection_id] = now_utc()
        return game

    def remove(self, connection_id: str) -> Optional[WumpusGame]:
        """Drop the connection's game. Returns it, or None if there was none."""
        self._last_active.pop(connection_id, None)
        game = self._games.pop(connection_id, None)
        if game is not None:
            logger.info(f"[REGISTRY] Removed game for connection {connection_id}")
        return game

    def prune_idle(self, max_idle_seconds: float, now: Optional[datetime] = None) -> list[str]:
        """Remove games idle for longer than `max_idle_seconds`. Returns the pruned ids."""
        now = now or now_utc()
        stale = [
            connection_id
            for connection_id, last_active in self._last_active.items()
            if (now - last_active).total_seconds() > max_idle_seconds
        ]
        for connection_id in stale:
            self.remove(connection_id)
        if stale:
            logger.info(f"[REGISTRY] Pruned {len(stale)} idle game(s)")
        return stale

    def __contains__(self, connection_id: str) -> bool:
        return connection_id in self._games

    def __len__(self) -> int:
        return len(self._games)
