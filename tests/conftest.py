"""Shared pytest fixtures.

Random boards are seeded so tests are repeatable. Hand-built boards ignore
the edge rule on purpose, so connectivity can be checked on simple layouts.
"""

from collections.abc import Callable
from random import Random

import pytest

from labyrinth_board.board.grid import Grid
from labyrinth_board.board.locations import LOCATIONS, Location
from labyrinth_board.board.tiles import Orientation, PlacedTile
from labyrinth_board.data.models import Player, Tile
from tests.boards import VERTICAL

GridFactory = Callable[..., Grid]


@pytest.fixture
def rng() -> Random:
    return Random(1234)


@pytest.fixture
def grid() -> Grid:
    """Random board with two players."""
    return Grid.new(Random(7), [Player.PLAYER1, Player.PLAYER2])


@pytest.fixture
def make_grid() -> GridFactory:
    """Factory for hand-built boards: one tile everywhere, with overrides."""

    def _make(
        tile: Tile = VERTICAL,
        spare: Tile = VERTICAL,
        overrides: dict[Location, Tile] | None = None,
        players: dict[Player, Location] | None = None,
    ) -> Grid:
        overrides = overrides or {}
        placed = {
            at: PlacedTile(tile=overrides.get(at, tile), orientation=Orientation.ZERO)
            for at in LOCATIONS
        }
        for player, at in (players or {}).items():
            placed[at].players.add(player)
        return Grid(placed=placed, spare=spare)

    return _make
