"""Which locations of the board are reachable from which."""

from typing import TYPE_CHECKING

from pydantic import BaseModel

from labyrinth_board.errors import InvalidLocation
from .locations import LOCATIONS, Location, LocationLike, to_location

if TYPE_CHECKING:
    from .grid import Grid


class ConnectivityEngine(BaseModel):
    """Connected components of a grid, as a snapshot.

    Two locations share a component label exactly when a path of adjacent
    tiles, with openings facing each other, joins them. The snapshot does not
    follow later changes to the grid, so build a new one after every
    insertion or move.
    """

    components: dict[Location, int] = {}

    @classmethod
    def from_grid(cls, grid: "Grid") -> "ConnectivityEngine":
        """Label the components of the grid (depth first, with a stack)."""
        components: dict[Location, int] = {}
        label = -1
        for start in LOCATIONS:
            if start not in grid.placed or start in components:
                continue
            label += 1
            components[start] = label
            stack = [start]
            while stack:
                at = stack.pop()
                for nb in grid.neighbors(at):
                    if nb not in components:
                        components[nb] = label
                        stack.append(nb)
        return cls(components=components)

    @property
    def n_components(self) -> int:
        """Number of separate components."""
        return len(set(self.components.values()))

    def label_of(self, location: LocationLike) -> int:
        """Component label of a location."""
        loc = to_location(location)
        try:
            return self.components[loc]
        except KeyError:
            raise InvalidLocation(f"Invalid location {loc}") from None

    def is_connected(self, a: LocationLike, b: LocationLike) -> bool:
        """Check whether there is a path between two locations."""
        return self.label_of(a) == self.label_of(b)

    def component_of(self, location: LocationLike) -> set[Location]:
        """All locations reachable from a location (including itself)."""
        label = self.label_of(location)
        return {loc for loc, lbl in self.components.items() if lbl == label}
