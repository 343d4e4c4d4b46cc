"""Tile rotation and tiles placed on the board."""

from enum import Enum
from random import Random
from typing import NamedTuple

from pydantic import BaseModel

from labyrinth_board.data.models import Player, Tile
from .locations import Direction, Location


class Orientation(int, Enum):
    """Clockwise rotation of a tile, in degrees."""

    ZERO = 0
    CLOCKWISE_90 = 90
    CLOCKWISE_180 = 180
    CLOCKWISE_270 = 270

    @property
    def quarter_turns(self) -> int:
        """Number of clockwise quarter turns."""
        return self.value // 90

    def rotated(self, quarter_turns: int = 1) -> "Orientation":
        """Orientation after some more clockwise quarter turns."""
        return Orientation(((self.quarter_turns + quarter_turns) % 4) * 90)

    @classmethod
    def random(cls, rng: Random) -> "Orientation":
        """Uniformly random orientation."""
        return rng.choice(list(cls))


class Openings(NamedTuple):
    """Effective path openings of a tile."""

    up: bool
    right: bool
    down: bool
    left: bool

    def has(self, direction: Direction) -> bool:
        """Whether there is an opening toward a direction."""
        match direction:
            case Direction.UP:
                return self.up
            case Direction.RIGHT:
                return self.right
            case Direction.DOWN:
                return self.down
            case Direction.LEFT:
                return self.left
        raise ValueError(f"Unknown direction: {direction!r}")


def effective_openings(tile: Tile, orientation: Orientation) -> Openings:
    """Openings of a tile when rotated by the orientation.

    A quarter turn clockwise moves each opening one place around
    (up -> right -> down -> left -> up), so the new 'up' is the old 'left'.
    """
    raw = (tile.up, tile.right, tile.down, tile.left)
    k = orientation.quarter_turns
    return Openings(*(raw[(i - k) % 4] for i in range(4)))


def placement_ok(location: Location, openings: Openings) -> bool:
    """Check that no opening leads off the board at this location."""
    return not any(openings.has(edge) for edge in location.edges)


def valid_orientations(tile: Tile, location: Location) -> list[Orientation]:
    """Orientations in which the tile can lie at the location."""
    return [
        o for o in Orientation if placement_ok(location, effective_openings(tile, o))
    ]


class PlacedTile(BaseModel):
    """Tile lying on the board, with the player tokens standing on it."""

    tile: Tile
    orientation: Orientation = Orientation.ZERO
    players: set[Player] = set()

    @property
    def openings(self) -> Openings:
        """Effective openings, given the orientation."""
        return effective_openings(self.tile, self.orientation)
