"""Image drawing of the board."""

from PIL.Image import Image
from PIL.Image import new as img_new
from PIL.ImageDraw import Draw
from PIL.ImageFont import load_default
from pydantic import BaseModel

from labyrinth_board.data.models import Player
from .grid import Grid
from .locations import BOARD_SIZE, LOCATIONS
from .text import marking_text
from .tiles import PlacedTile

Color = tuple[int, int, int, int]

DEFAULT_PLAYER_COLORS: dict[Player, Color] = {
    Player.PLAYER1: (200, 40, 40, 255),  # red
    Player.PLAYER2: (40, 80, 200, 255),  # blue
    Player.PLAYER3: (220, 190, 30, 255),  # yellow
    Player.PLAYER4: (40, 160, 60, 255),  # green
}


class GridImageRenderer(BaseModel):
    """Draws tiles as squares of walls with paths cut through them."""

    tile_size: int = 60
    wall_color: Color = (60, 50, 40, 255)
    path_color: Color = (235, 225, 200, 255)
    text_color: Color = (0, 0, 0, 255)
    player_colors: dict[Player, Color] = DEFAULT_PLAYER_COLORS
    show_markings: bool = True

    def tile_to_image(self, placed_tile: PlacedTile) -> Image:
        """Draw a single tile."""
        s = self.tile_size
        lo, hi = s // 3, s - s // 3  # path band
        img = img_new("RGBA", size=(s, s), color=self.wall_color)
        d = Draw(img)

        op = placed_tile.openings
        d.rectangle((lo, lo, hi - 1, hi - 1), fill=self.path_color)
        if op.up:
            d.rectangle((lo, 0, hi - 1, lo), fill=self.path_color)
        if op.down:
            d.rectangle((lo, hi - 1, hi - 1, s - 1), fill=self.path_color)
        if op.left:
            d.rectangle((0, lo, lo, hi - 1), fill=self.path_color)
        if op.right:
            d.rectangle((hi - 1, lo, s - 1, hi - 1), fill=self.path_color)

        if self.show_markings and placed_tile.tile.marking is not None:
            label = marking_text(placed_tile.tile).rstrip(".")[:2]
            d.text((lo + 1, lo + 1), label, font=load_default(), fill=self.text_color)

        # One dot per player, in the quarters of the path's center
        r = max(s // 20, 1)
        off = s // 12
        c = s // 2
        offsets = [(-off, -off), (off, -off), (-off, off), (off, off)]
        for player, (dx, dy) in zip(Player, offsets):
            if player in placed_tile.players:
                x, y = c + dx, c + dy
                d.ellipse((x - r, y - r, x + r, y + r), fill=self.player_colors[player])
        return img

    def to_image(self, grid: Grid) -> Image:
        """Merge all tiles into a single image of the board."""
        s = self.tile_size
        res = img_new("RGBA", size=(s * BOARD_SIZE, s * BOARD_SIZE))
        for loc in LOCATIONS:
            res.paste(self.tile_to_image(grid.placed[loc]), (loc.x * s, loc.y * s))
        return res

    def spare_to_image(self, grid: Grid) -> Image:
        """Draw the spare tile, unrotated."""
        return self.tile_to_image(PlacedTile(tile=grid.spare))
