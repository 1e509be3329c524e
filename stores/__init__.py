# In-memory game registry
from .game_registry import GameRegistry

__all__ = [
    "GameRegistry",
    "get_game_registry",
    "sweep_idle_games",
]


# Runtime singleton owned by the server process
from typing import Optional
import config

game_registry: Optional[GameRegistry] = None


def get_game_registry() -> GameRegistry:
    """Get the process-wide registry, creating it on first use."""
    global game_registry
    if game_registry is None:
        game_registry = GameRegistry()
    return game_registry


async def sweep_idle_games() -> None:
    """Scheduled job: abandon games idle for longer than config.IDLE_TIMEOUT.

    A coroutine so the scheduler runs it on the event loop, never alongside
    a message handler.
    """
    get_game_registry().prune_idle(config.IDLE_TIMEOUT)
