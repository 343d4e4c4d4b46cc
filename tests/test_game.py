from collections import Counter

import pytest

from labyrinth_board.data.models import Item, Player
from labyrinth_board.errors import WrongPlayer
from labyrinth_board.state.game import Cards, GameModel, TurnPhase, next_player

from tests.boards import loc

P1, P2, P3, P4 = list(Player)


def test_next_player_in_seat_order():
    everyone = set(Player)
    assert next_player(everyone, P1) == P2
    assert next_player(everyone, P4) == P1


def test_next_player_skips_absent():
    assert next_player({P1, P2, P4}, P2) == P4
    assert next_player({P1, P3}, P3) == P1
    assert next_player({P2}, P2) == P2


def test_next_player_nobody_playing():
    with pytest.raises(WrongPlayer):
        next_player(set(), P1)


def test_draw_next():
    cards = Cards(hidden_cards=[Item.OWL, Item.BAT])
    cards.draw_next()
    assert cards.current_card == Item.BAT
    cards.draw_next()
    assert cards.current_card == Item.OWL
    assert cards.found_cards == {Item.BAT}
    assert not cards.all_found
    cards.draw_next()
    assert cards.current_card is None
    assert cards.found_cards == {Item.BAT, Item.OWL}
    assert cards.all_found


def test_new_game_deals_every_item():
    model = GameModel.new(3, [P1, P2, P4], starting_player=P2)
    dealt: Counter[Item] = Counter()
    for cards in model.players.values():
        assert cards.current_card is not None
        assert cards.found_cards == set()
        dealt.update([cards.current_card] + cards.hidden_cards)
    assert dealt == Counter(Item)
    assert all(len(c.hidden_cards) == 7 for c in model.players.values())
    assert model.current_player == P2
    assert model.turn_phase == TurnPhase.INSERT_TILE
    assert set(model.board.players()) == {P1, P2, P4}


def test_deal_split():
    model = GameModel.new(0, [P1, P2, P4], starting_player=P1)
    assert [len(c.hidden_cards) + 1 for c in model.players.values()] == [8, 8, 8]
    model = GameModel.new(0, [P1], starting_player=P1)
    assert len(model.players[P1].hidden_cards) == 23


def test_starting_player_must_play():
    with pytest.raises(WrongPlayer):
        GameModel.new(0, [P1, P2], starting_player=P3)


def test_end_turn():
    model = GameModel.new(1, [P1, P3], starting_player=P3)
    model.turn_phase = TurnPhase.MOVE
    model.end_turn()
    assert model.current_player == P1
    assert model.turn_phase == TurnPhase.INSERT_TILE


def test_winner(make_grid):
    grid = make_grid(players={P1: loc(0, 0), P2: loc(6, 0)})
    model = GameModel(
        board=grid,
        players={P1: Cards(), P2: Cards(current_card=Item.GEM)},
        current_player=P1,
    )
    assert model.winner == P1
    grid.placed[loc(0, 0)].players.clear()
    grid.placed[loc(1, 0)].players.add(P1)
    assert model.winner is None
