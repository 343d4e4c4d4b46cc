"""Game model: the board, whose turn it is, and the item cards of each player."""

import logging
from collections.abc import Collection
from enum import Enum
from random import Random

from pydantic import BaseModel

from labyrinth_board.board.grid import Grid
from labyrinth_board.data import base_catalog
from labyrinth_board.data.catalog import TileCatalog
from labyrinth_board.data.models import Item, Player
from labyrinth_board.errors import WrongPlayer

logger = logging.getLogger(__name__)


class TurnPhase(str, Enum):
    """Part of the turn: first insert the spare tile, then move."""

    INSERT_TILE = "INSERT_TILE"
    MOVE = "MOVE"


PLAYER_ORDER: list[Player] = list(Player)


def next_player(players: Collection[Player], current: Player) -> Player:
    """Player after `current`, in seat order, skipping players not in the game."""
    idx = PLAYER_ORDER.index(current)
    for i in range(1, len(PLAYER_ORDER) + 1):
        candidate = PLAYER_ORDER[(idx + i) % len(PLAYER_ORDER)]
        if candidate in players:
            return candidate
    raise WrongPlayer("Unable to find next player")


class Cards(BaseModel):
    """Item cards of a single player."""

    current_card: Item | None = None
    hidden_cards: list[Item] = []
    found_cards: set[Item] = set()

    def draw_next(self) -> None:
        """Mark the current card as found, and take the next hidden one."""
        if self.current_card is not None:
            self.found_cards.add(self.current_card)
        self.current_card = self.hidden_cards.pop() if self.hidden_cards else None

    @property
    def all_found(self) -> bool:
        """Whether there is nothing left to look for."""
        return self.current_card is None and not self.hidden_cards


class GameModel(BaseModel):
    """Full state of a game."""

    board: Grid
    players: dict[Player, Cards]
    current_player: Player
    turn_phase: TurnPhase = TurnPhase.INSERT_TILE
    catalog: TileCatalog = base_catalog

    @classmethod
    def new(
        cls,
        rng: Random | int | None,
        players: Collection[Player],
        starting_player: Player,
        catalog: TileCatalog = base_catalog,
    ) -> "GameModel":
        """Create a game with a random board, dealing the item cards to the players.

        Cards are dealt one at a time, starting with the starting player, so
        players may end up with a different number of cards.
        """
        if not isinstance(rng, Random):
            rng = Random(rng)
        if starting_player not in players:
            raise WrongPlayer("Starting player is not playing")

        board = Grid.new(rng, players, catalog=catalog)
        cards = {player: Cards() for player in players}

        deck = list(Item)
        rng.shuffle(deck)
        player = starting_player
        for card in deck:
            cards[player].hidden_cards.append(card)
            player = next_player(cards.keys(), player)
        for player_cards in cards.values():
            player_cards.draw_next()

        logger.info(
            f"New game with {len(cards)} players, {starting_player.name} starts"
        )
        return cls(
            board=board,
            players=cards,
            current_player=starting_player,
            catalog=catalog,
        )

    @property
    def current_player_cards(self) -> Cards:
        """Cards of the player whose turn it is."""
        return self.players[self.current_player]

    def end_turn(self) -> None:
        """Pass the turn to the next player."""
        self.current_player = next_player(self.players.keys(), self.current_player)
        self.turn_phase = TurnPhase.INSERT_TILE
        logger.debug(f"Turn passes to {self.current_player.name}")

    @property
    def winner(self) -> Player | None:
        """Player who found all their items and is back on their start tile."""
        positions = self.board.players()
        for player, cards in self.players.items():
            if not cards.all_found:
                continue
            if positions.get(player) == self.catalog.start_location(player):
                return player
        return None
