from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringRules:
    line_clear_points: int = 100
    hard_drop_points_per_cell: int = 2

    def score_for_lines(self, lines: int) -> int:
        if lines <= 0:
            return 0
        return lines * self.line_clear_points

    def score_for_drop(self, cells: int) -> int:
        return max(0, cells) * self.hard_drop_points_per_cell
