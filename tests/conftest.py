"""Shared fixtures for the game tests."""

import random

import pytest

from game import WumpusGame
from grid import HexGrid, Position, SquareGrid
from stores import GameRegistry


CONNECTION_ID = "test-connection-id"


def make_game(grid_type="square", size=5, wumpus=(4, 4), fade_steps=3, seed=1234):
    """Build a game with a pinned Wumpus and a seeded random source."""
    rng = random.Random(seed)
    grid = SquareGrid(size, size, rng=rng) if grid_type == "square" else HexGrid(size, size, rng=rng)
    game = WumpusGame.from_grid(grid, fade_steps)
    game.wumpus = Position(*wumpus)
    return game


@pytest.fixture
def rng():
    return random.Random(42)


@pytest.fixture
def registry():
    return GameRegistry()


@pytest.fixture
def square_game():
    return make_game("square")


@pytest.fixture
def hex_game():
    return make_game("hex")
