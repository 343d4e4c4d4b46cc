"""The board: tiles placed on the grid, plus the spare tile."""

import logging
from collections.abc import Iterable
from random import Random

from pydantic import BaseModel, model_validator

from labyrinth_board.data import base_catalog
from labyrinth_board.data.catalog import TileCatalog
from labyrinth_board.data.models import Item, Player, Tile
from labyrinth_board.errors import InvalidLocation, InvalidPlacement, NoPath, TokenNotFound
from .connectivity import ConnectivityEngine
from .locations import LOCATIONS, Direction, Location, LocationLike, slide_line, to_location
from .tiles import Orientation, PlacedTile, placement_ok, valid_orientations

logger = logging.getLogger(__name__)

MAX_PLAYERS = len(Player)

# Order in which neighbours are reported
_NEIGHBOR_ORDER = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)


class Grid(BaseModel):
    """All tiles placed on the board, and the spare tile held off the board."""

    placed: dict[Location, PlacedTile]
    spare: Tile

    @model_validator(mode="after")
    def _check_full(self) -> "Grid":
        """Ensure every location has a tile, and every player is on one tile at most."""
        missing = [str(loc) for loc in LOCATIONS if loc not in self.placed]
        if missing:
            raise ValueError(f"Locations without a tile: {missing}")
        seen: set[Player] = set()
        for pt in self.placed.values():
            if seen & pt.players:
                raise ValueError(f"Players on more than one tile: {seen & pt.players}")
            seen |= pt.players
        return self

    @classmethod
    def new(
        cls,
        rng: Random | int | None,
        players: Iterable[Player],
        catalog: TileCatalog = base_catalog,
    ) -> "Grid":
        """Create a random board.

        Fixed tiles go to their locations, with the tokens of the playing
        players on their start tiles. Free tiles are shuffled into the rest
        of the board with random orientations, except one which becomes the
        spare tile. Free tiles are turned until no path leads off the board.
        """
        if not isinstance(rng, Random):
            rng = Random(rng)
        players = set(players)
        if not 1 <= len(players) <= MAX_PLAYERS:
            raise ValueError(f"Need 1 to {MAX_PLAYERS} players, got: {len(players)}")

        placed: dict[Location, PlacedTile] = {}
        for loc, tile in catalog.fixed_tiles.items():
            tokens = {tile.start_of} if tile.start_of in players else set()
            placed[loc] = PlacedTile(tile=tile, players=tokens)

        free_tiles = [
            PlacedTile(tile=tile, orientation=Orientation.random(rng))
            for tile in catalog.free_tiles
        ]
        free_locations = [loc for loc in LOCATIONS if loc not in catalog.fixed_tiles]
        if len(free_locations) != len(free_tiles) - 1:
            raise ValueError(
                f"Expected {len(free_locations) + 1} free tiles, got: {len(free_tiles)}"
            )

        rng.shuffle(free_tiles)
        rng.shuffle(free_locations)

        spare = free_tiles.pop().tile
        for loc, pt in zip(free_locations, free_tiles):
            if not valid_orientations(pt.tile, loc):
                raise InvalidPlacement(f"Tile {pt.tile!r} can't lie at {loc} at all")
            # Redraw until valid; at least one orientation is
            while not placement_ok(loc, pt.openings):
                pt.orientation = Orientation.random(rng)
            placed[loc] = pt

        res = cls(placed=placed, spare=spare)
        logger.debug(f"New grid for players {sorted(p.name for p in players)}")
        return res

    # Reading

    def tile_at(self, location: LocationLike) -> PlacedTile:
        """Tile placed at a location."""
        loc = to_location(location)
        try:
            return self.placed[loc]
        except KeyError:
            raise InvalidLocation(f"Invalid location {loc}") from None

    def item_at(self, location: LocationLike) -> Item | None:
        """Item on the tile at a location, if there is one."""
        return self.tile_at(location).tile.item

    def neighbors(self, location: LocationLike) -> list[Location]:
        """Adjacent locations joined to this one by a path."""
        loc = to_location(location)
        here = self.tile_at(loc).openings
        res: list[Location] = []
        for direction in _NEIGHBOR_ORDER:
            if not here.has(direction):
                continue
            nxt = loc.step(direction)
            if nxt is None:  # off the board
                continue
            there = self.placed.get(nxt)
            if there is not None and there.openings.has(direction.opposite):
                res.append(nxt)
        return res

    def players(self) -> dict[Player, Location]:
        """Where each player on the board stands."""
        res: dict[Player, Location] = {}
        for loc in LOCATIONS:
            for player in self.placed[loc].players:
                res[player] = loc
        return res

    def find_player(self, player: Player) -> Location:
        """Location of a player's token."""
        try:
            return self.players()[player]
        except KeyError:
            raise TokenNotFound(f"Player {player.name} not found on board") from None

    def all_tiles(self) -> list[Tile]:
        """Every tile of the game, placed ones first, then the spare."""
        return [self.placed[loc].tile for loc in LOCATIONS] + [self.spare]

    def token_count(self) -> int:
        """Number of player tokens on the board."""
        return sum(len(pt.players) for pt in self.placed.values())

    # Changing

    def insert_spare(self, location: LocationLike, orientation: Orientation) -> None:
        """Insert the spare tile at an entry point, sliding its row or column by one.

        The tile pushed off the opposite edge becomes the new spare. Players
        standing on it are moved onto the inserted tile. On error, nothing
        changes.
        """
        loc = to_location(location)
        line = slide_line(loc)
        orientation = Orientation(orientation)

        to_push_in = PlacedTile(tile=self.spare, orientation=orientation)
        if not placement_ok(loc, to_push_in.openings):
            raise InvalidPlacement(
                f"Tile cannot be inserted at {loc} with orientation {orientation.value}"
            )

        pushed_out = self.placed[line[-1]]
        for src, dst in zip(reversed(line[:-1]), reversed(line[1:])):
            self.placed[dst] = self.placed[src]
        to_push_in.players = set(pushed_out.players)
        self.placed[loc] = to_push_in
        self.spare = pushed_out.tile
        logger.debug(f"Inserted spare at {loc}, pushed out at {line[-1]}")

    def move_token(self, player: Player, destination: LocationLike) -> None:
        """Move a player's token along a path to the destination."""
        current = self.find_player(player)
        dest = to_location(destination)
        if dest not in self.placed:
            raise InvalidLocation(f"Invalid location {dest}")

        engine = ConnectivityEngine.from_grid(self)
        if not engine.is_connected(current, dest):
            raise NoPath(f"No path from {current} to {dest}")

        self.placed[current].players.discard(player)
        self.placed[dest].players.add(player)
        logger.debug(f"Moved {player.name} from {current} to {dest}")
