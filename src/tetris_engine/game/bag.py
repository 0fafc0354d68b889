from __future__ import annotations

from typing import List, Optional

import numpy as np

from .pieces import Piece, build_catalog


class Bag:
    """7-bag randomizer.

    Upcoming pieces sit in ``queue``. Whenever fewer than ``lookahead``
    remain before a pop, a freshly shuffled copy of the whole catalog is
    appended behind them, so every run of seven pops (counted from the
    start) holds each template exactly once.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None, lookahead: int = 4) -> None:
        assert lookahead >= 1
        self.rng = rng if rng is not None else np.random.default_rng()
        self.lookahead = int(lookahead)
        self.queue: List[Piece] = []
        self.populate()

    def populate(self) -> None:
        catalog = build_catalog()
        order = self.rng.permutation(len(catalog))
        self.queue.extend(catalog[int(i)] for i in order)

    def pop(self) -> Piece:
        if len(self.queue) < self.lookahead:
            self.populate()
        return self.queue.pop(0)

    def peek_next(self, n: int) -> List[Piece]:
        return list(self.queue[: max(0, n)])

    def __len__(self) -> int:
        return len(self.queue)
