"""Data models."""

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field


class Item(str, Enum):
    """Collectible item printed on a tile."""

    CHEST = "CHEST"
    GNOME = "GNOME"
    DRAGON = "DRAGON"
    UNICORN = "UNICORN"
    GHOST = "GHOST"
    CANDLE = "CANDLE"
    CAT = "CAT"
    KEYS = "KEYS"
    BOOK = "BOOK"
    SPIDER = "SPIDER"
    CROWN = "CROWN"
    SWORD = "SWORD"
    GOBLET = "GOBLET"
    MOUSE = "MOUSE"
    RING = "RING"
    POTION = "POTION"
    BEETLE = "BEETLE"
    OWL = "OWL"
    GEM = "GEM"
    GENIE = "GENIE"
    BAT = "BAT"
    SACK = "SACK"
    HELMET = "HELMET"
    LIZARD = "LIZARD"


class Player(str, Enum):
    """Player slot (and their token)."""

    PLAYER1 = "PLAYER1"
    PLAYER2 = "PLAYER2"
    PLAYER3 = "PLAYER3"
    PLAYER4 = "PLAYER4"


class ItemMarking(BaseModel):
    """Marking with an item to collect."""

    model_config = {"frozen": True}

    kind: Literal["item"] = "item"
    item: Item


class StartMarking(BaseModel):
    """Marking of a player's home (start) tile."""

    model_config = {"frozen": True}

    kind: Literal["start"] = "start"
    player: Player


TileMarking = Annotated[ItemMarking | StartMarking, Field(discriminator="kind")]


class TileShape(str, Enum):
    """Shape of the paths on a tile, at orientation zero."""

    CORNER_RIGHT_DOWN = "CORNER_RIGHT_DOWN"
    CORNER_LEFT_DOWN = "CORNER_LEFT_DOWN"
    CORNER_LEFT_UP = "CORNER_LEFT_UP"
    CORNER_RIGHT_UP = "CORNER_RIGHT_UP"
    TEE_LEFT = "TEE_LEFT"
    TEE_RIGHT = "TEE_RIGHT"
    TEE_UP = "TEE_UP"
    TEE_DOWN = "TEE_DOWN"
    LINE_VERTICAL = "LINE_VERTICAL"
    LINE_HORIZONTAL = "LINE_HORIZONTAL"


SHAPE_OPENINGS: dict[TileShape, tuple[bool, bool, bool, bool]] = {
    # (up, right, down, left)
    TileShape.CORNER_RIGHT_DOWN: (False, True, True, False),
    TileShape.CORNER_LEFT_DOWN: (False, False, True, True),
    TileShape.CORNER_LEFT_UP: (True, False, False, True),
    TileShape.CORNER_RIGHT_UP: (True, True, False, False),
    TileShape.TEE_LEFT: (True, False, True, True),
    TileShape.TEE_RIGHT: (True, True, True, False),
    TileShape.TEE_UP: (True, True, False, True),
    TileShape.TEE_DOWN: (False, True, True, True),
    TileShape.LINE_VERTICAL: (True, False, True, False),
    TileShape.LINE_HORIZONTAL: (False, True, False, True),
}


class Tile(BaseModel):
    """Tile information: raw path openings (at orientation zero) and a marking."""

    model_config = {"frozen": True}

    up: bool = False
    right: bool = False
    down: bool = False
    left: bool = False
    marking: TileMarking | None = None

    @classmethod
    def from_shape(cls, shape: TileShape, marking: TileMarking | None = None) -> "Tile":
        """Create a tile of a known shape."""
        up, right, down, left = SHAPE_OPENINGS[shape]
        return cls(up=up, right=right, down=down, left=left, marking=marking)

    @property
    def item(self) -> Item | None:
        """Item printed on this tile, if any."""
        if isinstance(self.marking, ItemMarking):
            return self.marking.item
        return None

    @property
    def start_of(self) -> Player | None:
        """Player whose start tile this is, if any."""
        if isinstance(self.marking, StartMarking):
            return self.marking.player
        return None
