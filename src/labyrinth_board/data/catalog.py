"""Tile catalog: which tiles exist, and where the fixed ones are bound."""

from collections import Counter
from typing import Annotated

from pydantic import BaseModel, Field, model_validator

from labyrinth_board.board.locations import BOARD_SIZE, Location, LocationLike, to_location
from .models import Item, ItemMarking, Player, StartMarking, Tile, TileMarking, TileShape


class TileCatalog(BaseModel):
    """Full pool of tiles, with proper types."""

    name: str
    fixed_tiles: dict[Location, Tile]
    free_tiles: list[Tile]

    @property
    def all_tiles(self) -> list[Tile]:
        """All tiles, fixed first."""
        return list(self.fixed_tiles.values()) + list(self.free_tiles)

    @model_validator(mode="after")
    def _check_pool(self) -> "TileCatalog":
        """Ensure the pool fills the board with exactly one spare tile left over."""
        n_free_locations = BOARD_SIZE * BOARD_SIZE - len(self.fixed_tiles)
        if len(self.free_tiles) != n_free_locations + 1:
            raise ValueError(
                f"Expected {n_free_locations + 1} free tiles, got: {len(self.free_tiles)}"
            )
        return self

    @model_validator(mode="after")
    def _check_markings(self) -> "TileCatalog":
        """Ensure every item and every player start appears exactly once."""
        items: Counter[Item] = Counter()
        for tile in self.all_tiles:
            if tile.item is not None:
                items[tile.item] += 1
        bad_items = [it.name for it in Item if items[it] != 1]
        if bad_items:
            raise ValueError(f"Items must appear exactly once: {bad_items}")

        starts: Counter[Player] = Counter()
        for tile in self.fixed_tiles.values():
            if tile.start_of is not None:
                starts[tile.start_of] += 1
        if any(tile.start_of is not None for tile in self.free_tiles):
            raise ValueError("Start tiles must be fixed tiles.")
        bad_starts = [pl.name for pl in Player if starts[pl] != 1]
        if bad_starts:
            raise ValueError(f"Players must have exactly one start tile: {bad_starts}")
        return self

    def start_location(self, player: Player) -> Location:
        """Location of the start tile of a player."""
        for loc, tile in self.fixed_tiles.items():
            if tile.start_of == player:
                return loc
        raise ValueError(f"No start tile for player: {player}")


class _YamlTile(BaseModel):
    """A tile, as written in YAML."""

    shape: TileShape
    item: Item | None = None
    start: Player | None = None

    @model_validator(mode="after")
    def _check_marking(self) -> "_YamlTile":
        """Ensure a tile has at most one marking."""
        if self.item is not None and self.start is not None:
            raise ValueError("A tile can't have both an item and a start marking.")
        return self

    def to_tile(self) -> Tile:
        """Convert to a proper tile."""
        marking: TileMarking | None = None
        if self.item is not None:
            marking = ItemMarking(item=self.item)
        elif self.start is not None:
            marking = StartMarking(player=self.start)
        return Tile.from_shape(self.shape, marking=marking)


class _YamlFixedTile(_YamlTile):
    """A tile bound to a location."""

    at: LocationLike


class _YamlFreeTile(_YamlTile):
    """A free tile, possibly repeated."""

    count: Annotated[int, Field(ge=1)] = 1


class YamlTileCatalog(BaseModel):
    """Catalog definition in YAML.

    This is only needed for YAML schema checking; use `fix_catalog()` to get
    the proper catalog.
    """

    name: str
    fixed_tiles: list[_YamlFixedTile]
    free_tiles: list[_YamlFreeTile]

    def fix_catalog(self) -> TileCatalog:
        """Convert to proper catalog."""
        fixed_tiles: dict[Location, Tile] = {}
        for ft in self.fixed_tiles:
            loc = to_location(ft.at)
            if loc in fixed_tiles:
                raise ValueError(f"Two fixed tiles at location {loc}")
            fixed_tiles[loc] = ft.to_tile()
        free_tiles: list[Tile] = []
        for ft in self.free_tiles:
            free_tiles.extend(ft.to_tile() for _ in range(ft.count))
        return TileCatalog(name=self.name, fixed_tiles=fixed_tiles, free_tiles=free_tiles)
