"""Plain text drawing of the board, mostly for logs and debugging."""

from labyrinth_board.data.models import ItemMarking, Player, StartMarking, Tile
from .grid import Grid
from .locations import BOARD_SIZE, LOCATIONS
from .tiles import PlacedTile

WALL = "#"
PATH = "."

PLAYER_SYMBOLS: dict[Player, str] = {
    Player.PLAYER1: "1",
    Player.PLAYER2: "2",
    Player.PLAYER3: "3",
    Player.PLAYER4: "4",
}


def marking_text(tile: Tile) -> str:
    """Four-character label of a tile's marking."""
    match tile.marking:
        case ItemMarking(item=item):
            return item.name[:4].ljust(4, PATH)
        case StartMarking(player=player):
            return f"S{PLAYER_SYMBOLS[player]}".ljust(4, PATH)
    return PATH * 4


def render_tile(placed_tile: PlacedTile) -> list[str]:
    """Draw a tile as 4 lines of 6 characters."""
    op = placed_tile.openings
    left = PATH if op.left else WALL
    right = PATH if op.right else WALL
    players = "".join(
        PLAYER_SYMBOLS[pl] if pl in placed_tile.players else PATH for pl in Player
    )
    return [
        WALL + (PATH * 4 if op.up else WALL * 4) + WALL,
        left + marking_text(placed_tile.tile) + right,
        left + players + right,
        WALL + (PATH * 4 if op.down else WALL * 4) + WALL,
    ]


def render_grid(grid: Grid, col_sep: str = " ") -> str:
    """Draw the whole board, one row of tiles after another."""
    blocks = [render_tile(grid.placed[loc]) for loc in LOCATIONS]
    rows: list[str] = []
    for r in range(BOARD_SIZE):
        row_blocks = blocks[r * BOARD_SIZE : (r + 1) * BOARD_SIZE]
        lines = [col_sep.join(parts) for parts in zip(*row_blocks)]
        rows.append("\n".join(lines))
    return "\n\n".join(rows)


def render_spare(grid: Grid) -> str:
    """Draw the spare tile, unrotated."""
    return "\n".join(render_tile(PlacedTile(tile=grid.spare)))
