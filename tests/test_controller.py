import pytest

from labyrinth_board.board.tiles import Orientation, valid_orientations
from labyrinth_board.data.models import Item, ItemMarking, Player, Tile, TileShape
from labyrinth_board.errors import InvalidPlacement, NoPath, TurnError, WrongPlayer
from labyrinth_board.state.controller import (
    CommandRequest,
    GameController,
    InsertTile,
    MovePlayer,
    NoOp,
    Snapshot,
)
from labyrinth_board.state.game import Cards, GameModel, TurnPhase

from tests.boards import HORIZONTAL, VERTICAL, loc

P1, P2, P3, P4 = list(Player)


@pytest.fixture
def controller() -> GameController:
    return GameController(GameModel.new(5, [P1, P3], starting_player=P1))


def _insert(controller: GameController, player: Player = P1) -> Snapshot:
    entry = loc(3, 6)
    orientation = valid_orientations(controller.model.board.spare, entry)[0]
    return controller.handle(
        CommandRequest(sent_by=player, command=InsertTile(at=entry, orientation=orientation))
    )


def test_no_op(controller: GameController):
    before = controller.model.model_copy(deep=True)
    snap = controller.handle(CommandRequest(sent_by=P1, command=NoOp()))
    assert controller.model == before
    assert snap.next_player == P1
    assert snap.turn_phase == TurnPhase.INSERT_TILE


def test_not_your_turn(controller: GameController):
    with pytest.raises(WrongPlayer):
        controller.handle(CommandRequest(sent_by=P3, command=NoOp()))
    with pytest.raises(WrongPlayer):
        _insert(controller, player=P3)


def test_move_before_insert(controller: GameController):
    with pytest.raises(TurnError):
        controller.handle(
            CommandRequest(sent_by=P1, command=MovePlayer(player=P1, to=loc(0, 0)))
        )


def test_insert_then_move(controller: GameController):
    snap = _insert(controller)
    assert snap.turn_phase == TurnPhase.MOVE
    with pytest.raises(TurnError):
        _insert(controller)

    here = controller.model.board.find_player(P1)
    snap = controller.handle(
        CommandRequest(sent_by=P1, command=MovePlayer(player=P1, to=here))
    )
    assert snap.next_player == P3
    assert snap.turn_phase == TurnPhase.INSERT_TILE
    assert controller.model.current_player == P3


def test_cannot_move_another_player(controller: GameController):
    _insert(controller)
    here = controller.model.board.find_player(P3)
    with pytest.raises(WrongPlayer):
        controller.handle(
            CommandRequest(sent_by=P1, command=MovePlayer(player=P3, to=here))
        )


def test_failed_insert_keeps_phase(make_grid):
    model = GameModel(
        board=make_grid(spare=VERTICAL, players={P1: loc(0, 0)}),
        players={P1: Cards(current_card=Item.GEM)},
        current_player=P1,
    )
    controller = GameController(model)
    with pytest.raises(InvalidPlacement):
        controller.handle(
            CommandRequest(
                sent_by=P1, command=InsertTile(at=loc(1, 0), orientation=Orientation.ZERO)
            )
        )
    assert model.turn_phase == TurnPhase.INSERT_TILE


def test_failed_move_keeps_turn(make_grid):
    model = GameModel(
        board=make_grid(VERTICAL, players={P1: loc(2, 3), P2: loc(4, 4)}),
        players={P1: Cards(current_card=Item.GEM), P2: Cards(current_card=Item.OWL)},
        current_player=P1,
        turn_phase=TurnPhase.MOVE,
    )
    controller = GameController(model)
    with pytest.raises(NoPath):
        controller.handle(
            CommandRequest(sent_by=P1, command=MovePlayer(player=P1, to=loc(3, 3)))
        )
    assert model.current_player == P1
    assert model.turn_phase == TurnPhase.MOVE


def test_finding_item_draws_next_card(make_grid):
    goblet = Tile.from_shape(TileShape.LINE_VERTICAL, marking=ItemMarking(item=Item.GOBLET))
    model = GameModel(
        board=make_grid(
            VERTICAL, spare=HORIZONTAL, overrides={loc(2, 0): goblet}, players={P1: loc(2, 3)}
        ),
        players={P1: Cards(current_card=Item.GOBLET, hidden_cards=[Item.SWORD])},
        current_player=P1,
        turn_phase=TurnPhase.MOVE,
    )
    controller = GameController(model)
    snap = controller.handle(
        CommandRequest(sent_by=P1, command=MovePlayer(player=P1, to=loc(2, 0)))
    )
    assert snap.looking_for == Item.SWORD
    assert snap.players[P1].found == {Item.GOBLET}
    assert snap.players[P1].num_hidden_cards == 0
    assert snap.next_player == P1  # only player


def test_snapshot_shows_own_card(controller: GameController):
    snap = Snapshot.for_player(controller.model, P3)
    assert snap.looking_for == controller.model.players[P3].current_card
    assert snap.spare_tile == controller.model.board.spare
    assert set(snap.players) == {P1, P3}
    # Snapshot is a copy
    snap.board[loc(0, 0)].players.clear()
    assert controller.model.board.placed[loc(0, 0)].players == {P1}


def test_command_from_plain_data():
    req = CommandRequest.model_validate(
        {"sent_by": "PLAYER1", "command": {"kind": "insert_tile", "at": [1, 0], "orientation": 90}}
    )
    assert isinstance(req.command, InsertTile)
    assert req.command.at == loc(1, 0)
    assert req.command.orientation == Orientation.CLOCKWISE_90
