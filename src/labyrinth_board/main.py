"""Demo run: set up a game and play a couple of commands."""

import logging
import sys

from labyrinth_board.board.locations import Location
from labyrinth_board.board.text import render_grid, render_spare
from labyrinth_board.board.tiles import valid_orientations
from labyrinth_board.data.models import Player
from labyrinth_board.errors import LabyrinthError
from labyrinth_board.state.controller import (
    CommandRequest,
    GameController,
    InsertTile,
    MovePlayer,
)
from labyrinth_board.state.game import GameModel

logger = logging.getLogger(__name__)


def run_demo(seed: int | None = None) -> GameModel:
    """Play a single turn of a three-player game."""
    players = [Player.PLAYER1, Player.PLAYER2, Player.PLAYER4]
    current = Player.PLAYER1
    model = GameModel.new(seed, players, starting_player=current)
    controller = GameController(model)

    logger.info(f"Board:\n{render_grid(model.board)}")
    logger.info(f"Spare tile:\n{render_spare(model.board)}")

    entry = Location(root=(1, 0))
    orientation = valid_orientations(model.board.spare, entry)[0]
    controller.handle(
        CommandRequest(
            sent_by=current,
            command=InsertTile(at=entry, orientation=orientation),
        )
    )
    logger.info(f"Board after inserting at {entry}:\n{render_grid(model.board)}")

    target = Location(root=(2, 1))
    try:
        controller.handle(
            CommandRequest(sent_by=current, command=MovePlayer(player=current, to=target))
        )
        logger.info(f"{current.name} moved to {target}")
    except LabyrinthError as exc:
        logger.info(f"{current.name} could not move to {target}: {exc}")
    return model


def main():
    logging.basicConfig(level=logging.INFO)
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else None
    run_demo(seed)


if __name__ == "__main__":
    main()
