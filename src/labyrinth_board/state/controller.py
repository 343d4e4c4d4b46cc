"""Commands sent by players, checked against the turn and applied to the game."""

import logging
from typing import Annotated, Literal

from pydantic import BaseModel, Field

from labyrinth_board.board.locations import Location
from labyrinth_board.board.tiles import Orientation, PlacedTile
from labyrinth_board.data.models import Item, Player, Tile
from labyrinth_board.errors import TurnError, WrongPlayer
from .game import Cards, GameModel, TurnPhase

logger = logging.getLogger(__name__)


class NoOp(BaseModel):
    """Do nothing, just get a snapshot."""

    kind: Literal["no_op"] = "no_op"


class MovePlayer(BaseModel):
    """Move a player's token."""

    kind: Literal["move_player"] = "move_player"
    player: Player
    to: Location


class InsertTile(BaseModel):
    """Insert the spare tile."""

    kind: Literal["insert_tile"] = "insert_tile"
    at: Location
    orientation: Orientation = Orientation.ZERO


Command = Annotated[NoOp | MovePlayer | InsertTile, Field(discriminator="kind")]


class CommandRequest(BaseModel):
    """A command, and who sent it."""

    sent_by: Player
    command: Command


class CardsSnapshot(BaseModel):
    """What everyone can see of a player's cards."""

    found: set[Item]
    num_hidden_cards: int

    @classmethod
    def from_cards(cls, cards: Cards) -> "CardsSnapshot":
        """Create from a player's cards."""
        return cls(found=set(cards.found_cards), num_hidden_cards=len(cards.hidden_cards))


class Snapshot(BaseModel):
    """Game state as seen by a single player."""

    board: dict[Location, PlacedTile]
    spare_tile: Tile
    next_player: Player
    turn_phase: TurnPhase
    looking_for: Item | None
    players: dict[Player, CardsSnapshot]

    @classmethod
    def for_player(cls, model: GameModel, player: Player) -> "Snapshot":
        """Snapshot of the game, showing only what `player` may see."""
        own = model.players.get(player)
        return cls(
            board={
                loc: pt.model_copy(deep=True) for loc, pt in model.board.placed.items()
            },
            spare_tile=model.board.spare,
            next_player=model.current_player,
            turn_phase=model.turn_phase,
            looking_for=own.current_card if own is not None else None,
            players={
                pl: CardsSnapshot.from_cards(cards) for pl, cards in model.players.items()
            },
        )


class GameController:
    """Applies players' commands to a game, one at a time."""

    def __init__(self, model: GameModel):
        self.model = model

    def handle(self, request: CommandRequest) -> Snapshot:
        """Apply a command, returning the sender's view of the game afterwards.

        Errors are raised to the caller and leave the game unchanged.
        """
        model = self.model
        command = request.command
        logger.info(f"{request.sent_by.name} sent command {command!r}")

        if request.sent_by != model.current_player:
            raise WrongPlayer("It is not your turn")

        match command:
            case NoOp():
                pass
            case MovePlayer(player=player, to=to):
                if model.turn_phase != TurnPhase.MOVE:
                    raise TurnError(
                        "It is not time to move, you must first insert the tile"
                    )
                if player != model.current_player:
                    raise WrongPlayer("You cannot move another player")
                self._move_player(player, to)
            case InsertTile(at=at, orientation=orientation):
                if model.turn_phase != TurnPhase.INSERT_TILE:
                    raise TurnError("It is not time to insert the tile, you must move")
                model.board.insert_spare(at, orientation)
                model.turn_phase = TurnPhase.MOVE
            case _:
                raise TypeError(f"Unknown command: {command!r}")

        return Snapshot.for_player(model, request.sent_by)

    def _move_player(self, player: Player, location: Location) -> None:
        """Move the player, check whether they found their item, and end the turn."""
        model = self.model
        model.board.move_token(player, location)

        cards = model.current_player_cards
        if cards.current_card is not None and cards.current_card == model.board.item_at(
            location
        ):
            logger.info(f"{player.name} found {cards.current_card.name}")
            cards.draw_next()

        model.end_turn()
