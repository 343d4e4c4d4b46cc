import logging
from collections import Counter

from labyrinth_board.data import base_catalog
from labyrinth_board.main import run_demo


def test_demo_runs(caplog):
    with caplog.at_level(logging.INFO):
        model = run_demo(seed=42)
    assert model.board.token_count() == 3
    assert Counter(model.board.all_tiles()) == Counter(base_catalog.all_tiles)
    assert "Board after inserting" in caplog.text
