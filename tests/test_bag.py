from __future__ import annotations

import numpy as np
import pytest

from tetris_engine.game.bag import Bag
from tetris_engine.game.pieces import PieceKind


@pytest.mark.parametrize("seed", [0, 1, 7, 1234])
def test_every_run_of_seven_pops_holds_each_piece_once(seed):
    bag = Bag(np.random.default_rng(seed))
    kinds = [bag.pop().kind for _ in range(70)]
    for start in range(0, len(kinds), 7):
        assert sorted(kinds[start:start + 7]) == list(PieceKind)


def test_construction_fills_the_first_batch():
    bag = Bag(np.random.default_rng(0))
    assert len(bag) == 7
    assert sorted(p.kind for p in bag.peek_next(7)) == list(PieceKind)


def test_peek_does_not_consume():
    bag = Bag(np.random.default_rng(3))
    upcoming = bag.peek_next(3)
    assert len(bag) == 7
    assert [bag.pop().kind for _ in range(3)] == [p.kind for p in upcoming]
    assert bag.peek_next(0) == []


def test_refill_appends_behind_unconsumed_pieces():
    bag = Bag(np.random.default_rng(5))
    for _ in range(4):
        bag.pop()
    assert len(bag) == 3
    waiting = [p.kind for p in bag.peek_next(3)]
    first = bag.pop()
    assert len(bag) == 9
    assert first.kind == waiting[0]
    assert [p.kind for p in bag.peek_next(2)] == waiting[1:]


def test_preview_always_has_lookahead_minus_one_pieces():
    bag = Bag(np.random.default_rng(11), lookahead=4)
    for _ in range(50):
        bag.pop()
        assert len(bag.peek_next(3)) == 3


def test_same_seed_gives_same_sequence():
    a = Bag(np.random.default_rng(42))
    b = Bag(np.random.default_rng(42))
    assert [a.pop().kind for _ in range(21)] == [b.pop().kind for _ in range(21)]
