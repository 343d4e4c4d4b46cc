"""Errors raised by the board and game logic."""


class LabyrinthError(Exception):
    """Base error for the labyrinth board."""


class InvalidLocation(LabyrinthError, KeyError):
    """Location is off the board, or missing from an expected mapping."""

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return str(self.args[0]) if self.args else ""


class InvalidPlacement(LabyrinthError):
    """Tile would have an opening leading off the board."""


class NoPath(LabyrinthError):
    """No connected path between two locations."""


class TokenNotFound(LabyrinthError):
    """Player token is not on the board."""


class WrongPlayer(LabyrinthError):
    """Request made by, or for, the wrong player."""


class TurnError(LabyrinthError):
    """Request made in the wrong phase of the turn."""
