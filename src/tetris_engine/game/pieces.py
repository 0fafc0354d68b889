from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple

from .vector2 import GridPos, Rgb, Vec2


BLOCKS_PER_PIECE = 4


class PieceKind(IntEnum):
    SQUARE = 0
    T = 1
    L = 2
    J = 3
    I = 4
    S = 5
    Z = 6


@dataclass(frozen=True)
class PieceTemplate:
    """Catalog entry.

    ``mask`` holds two rows of four bits: bit ``i`` is the cell
    ``(i % 4, i // 4)``, so the low nibble is the bottom row and the high
    nibble the top row.
    """

    kind: PieceKind
    mask: int
    color: Rgb

    def build(self) -> "Piece":
        offsets = [
            Vec2(float(i % 4), float(i // 4))
            for i in range(8)
            if self.mask & (1 << i)
        ]
        assert len(offsets) == BLOCKS_PER_PIECE, f"template {self.kind.name} must have 4 blocks"
        return Piece(kind=self.kind, color=self.color, offsets=tuple(offsets))


TEMPLATES: Tuple[PieceTemplate, ...] = (
    PieceTemplate(PieceKind.SQUARE, 0b11001100, Rgb(241, 196, 15)),
    PieceTemplate(PieceKind.T, 0b11100100, Rgb(142, 68, 173)),
    PieceTemplate(PieceKind.L, 0b00101110, Rgb(230, 126, 34)),
    PieceTemplate(PieceKind.J, 0b10001110, Rgb(41, 128, 185)),
    PieceTemplate(PieceKind.I, 0b11110000, Rgb(93, 173, 226)),
    PieceTemplate(PieceKind.S, 0b11000110, Rgb(231, 76, 60)),
    PieceTemplate(PieceKind.Z, 0b01101100, Rgb(46, 204, 113)),
)
assert len(TEMPLATES) == len(PieceKind)
assert all(t.kind == kind for t, kind in zip(TEMPLATES, PieceKind))


@dataclass(frozen=True)
class Piece:
    """Four block offsets around an implicit origin plus the template colour.

    Offsets can be fractional after a rotation (e.g. ``1.5``); they are
    floored, never truncated, when mapped onto the grid.
    """

    kind: PieceKind
    color: Rgb
    offsets: Tuple[Vec2, Vec2, Vec2, Vec2]

    @classmethod
    def from_kind(cls, kind: PieceKind) -> "Piece":
        return TEMPLATES[int(kind)].build()

    def center(self) -> Vec2:
        total = Vec2(0.0, 0.0)
        for offset in self.offsets:
            total = total + offset
        return total / len(self.offsets)

    def rotated(self) -> "Piece":
        """Quarter turn clockwise around the centroid of the blocks."""
        c = self.center()
        offsets = tuple(c + (c - b).rotate90() for b in self.offsets)
        return Piece(kind=self.kind, color=self.color, offsets=offsets)

    def cells(self, position: GridPos) -> List[GridPos]:
        origin = position.to_vec2()
        return [(origin + offset).floor() for offset in self.offsets]


def build_catalog() -> List[Piece]:
    return [template.build() for template in TEMPLATES]
