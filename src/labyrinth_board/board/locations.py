"""Locations on the square board, and the lines tiles slide along."""

from enum import Enum
from typing import Any

from pydantic import RootModel, TypeAdapter, ValidationError, model_validator

from labyrinth_board.errors import InvalidLocation

BOARD_SIZE = 7
"""Number of rows (and columns) of the board."""

LAST = BOARD_SIZE - 1


class Direction(str, Enum):
    """Direction of a path opening, or of a step between cells."""

    UP = "UP"
    RIGHT = "RIGHT"
    DOWN = "DOWN"
    LEFT = "LEFT"

    @property
    def delta(self) -> tuple[int, int]:
        """Change in (column, row) when stepping this way."""
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        """Direction pointing back."""
        return _OPPOSITES[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
}
_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
}


def on_board(x: int, y: int) -> bool:
    """Check whether coordinates are within the board."""
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE


class Location(RootModel[tuple[int, int]]):
    """Board location as (column, row), with (0, 0) in the top left corner."""

    model_config = {"frozen": True}

    root: tuple[int, int]

    @property
    def x(self) -> int:
        """Column."""
        return self.root[0]

    @property
    def y(self) -> int:
        """Row."""
        return self.root[1]

    @model_validator(mode="after")
    def _check_values(self) -> "Location":
        """Check that the location is on the board."""
        if not on_board(self.x, self.y):
            raise ValueError(f"Location {self.root} is off the {BOARD_SIZE}x{BOARD_SIZE} board")
        return self

    def __eq__(self, rhs: object) -> bool:
        if isinstance(rhs, Location):
            return self.root == rhs.root
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.root)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def step(self, direction: Direction) -> "Location | None":
        """Neighbouring location in a direction, or None if that is off the board."""
        dx, dy = direction.delta
        x, y = self.x + dx, self.y + dy
        if not on_board(x, y):
            return None
        return Location(root=(x, y))

    @property
    def edges(self) -> set[Direction]:
        """Board edges this location touches (two for corners)."""
        res: set[Direction] = set()
        if self.y == 0:
            res.add(Direction.UP)
        if self.y == LAST:
            res.add(Direction.DOWN)
        if self.x == 0:
            res.add(Direction.LEFT)
        if self.x == LAST:
            res.add(Direction.RIGHT)
        return res


LocationLike = Location | tuple[int, int]
_validate_location = TypeAdapter(Location).validate_python


def to_location(value: Any) -> Location:
    """Convert to a location, raising InvalidLocation if it is not on the board."""
    if isinstance(value, Location):
        return value
    try:
        return _validate_location(value)
    except ValidationError as ve:
        raise InvalidLocation(f"Invalid location {value!r}") from ve


def _make_locations() -> list[Location]:
    """Row by row, left to right."""
    return [Location(root=(x, y)) for y in range(BOARD_SIZE) for x in range(BOARD_SIZE)]


LOCATIONS: list[Location] = _make_locations()


def all_locations() -> list[Location]:
    """All locations of the board, in a stable order (row by row)."""
    return list(LOCATIONS)


# Sliding


class Slide(str, Enum):
    """Way in which a row or column is pushed by an inserted tile."""

    PUSH_DOWN = "PUSH_DOWN"  # column, inserted at the top edge
    PUSH_UP = "PUSH_UP"  # column, inserted at the bottom edge
    PUSH_RIGHT = "PUSH_RIGHT"  # row, inserted at the left edge
    PUSH_LEFT = "PUSH_LEFT"  # row, inserted at the right edge

    @property
    def direction(self) -> Direction:
        """Direction the tiles move in."""
        return _SLIDE_DIRECTIONS[self]


_SLIDE_DIRECTIONS = {
    Slide.PUSH_DOWN: Direction.DOWN,
    Slide.PUSH_UP: Direction.UP,
    Slide.PUSH_RIGHT: Direction.RIGHT,
    Slide.PUSH_LEFT: Direction.LEFT,
}

MOVABLE_LINES = tuple(range(1, BOARD_SIZE, 2))
"""Indices of rows and columns that can slide (the odd ones)."""


def _make_entry_points() -> dict[Location, Slide]:
    res: dict[Location, Slide] = {}
    for i in MOVABLE_LINES:
        res[Location(root=(i, 0))] = Slide.PUSH_DOWN
        res[Location(root=(LAST, i))] = Slide.PUSH_LEFT
        res[Location(root=(i, LAST))] = Slide.PUSH_UP
        res[Location(root=(0, i))] = Slide.PUSH_RIGHT
    return res


ENTRY_POINTS: dict[Location, Slide] = _make_entry_points()
"""Where the spare tile may be inserted, and how it pushes the line."""


def slide_line(entry: Location) -> list[Location]:
    """Line pushed by inserting at `entry`, from the push-in end to the push-out end."""
    if entry not in ENTRY_POINTS:
        raise InvalidLocation(f"Cannot insert a tile at location {entry}")
    direction = ENTRY_POINTS[entry].direction
    res = [entry]
    nxt = entry.step(direction)
    while nxt is not None:
        res.append(nxt)
        nxt = nxt.step(direction)
    return res
