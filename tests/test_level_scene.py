from __future__ import annotations

import pytest

from conftest import put_player
from tetris_engine.game.core import Key
from tetris_engine.game.pieces import Piece, PieceKind
from tetris_engine.game.vector2 import GridPos, Vec2
from tetris_engine.scenes.base import Scene
from tetris_engine.scenes.draw import BRICK, FilledRect, RecordingCanvas, TexturedRect
from tetris_engine.scenes.level import DOWN, LEFT

INTERVAL = 1_000_000


def test_new_level_spawns_at_top_center(level):
    assert level.player.position == GridPos(3, 19)
    assert level.score == 0
    assert level.board.rows == []
    assert not level.lost


def test_translate_reports_whether_the_piece_moved(level):
    put_player(level, PieceKind.I, 3, 10)
    moves = 0
    while level.translate_player(LEFT):
        moves += 1
    assert moves == 3
    assert level.player.position == GridPos(0, 10)


def test_translate_down_fails_only_when_resting(level):
    # straight piece sits on row 1 of its box
    put_player(level, PieceKind.I, 0, 0)
    assert level.translate_player(DOWN)
    assert not level.translate_player(DOWN)
    assert level.player.position == GridPos(0, -1)

    level.board.place([GridPos(6, 4)], Piece.from_kind(PieceKind.T).color)
    put_player(level, PieceKind.I, 3, 5)
    assert level.translate_player(DOWN)
    assert not level.translate_player(DOWN)


def test_rotation_is_rejected_against_the_wall(level):
    player = put_player(level, PieceKind.I, -1, 5, turns=1)
    before = player.piece.offsets
    assert not level.rotate_player()
    assert level.player.piece.offsets == before


def test_rotation_is_rejected_against_blocks(level):
    level.board.place([GridPos(4, 4)], Piece.from_kind(PieceKind.T).color)
    put_player(level, PieceKind.I, 3, 5)
    assert not level.rotate_player()
    put_player(level, PieceKind.I, 3, 8)
    assert level.rotate_player()


def test_hard_drop_scores_cells_fallen_and_locks(level):
    put_player(level, PieceKind.I, 3, 19)
    fallen = level.move_to_end()
    assert fallen == 20
    assert level.score == 40
    assert [pos for pos, _ in level.board.filled_cells()] == [GridPos(x, 0) for x in range(3, 7)]
    assert level.player.position == GridPos(3, 19)


def test_filling_one_row_clears_it_once(level):
    put_player(level, PieceKind.I, 0, 19)
    level.key_down(Key.SPACE)
    put_player(level, PieceKind.I, 4, 19)
    level.key_down(Key.SPACE)
    assert len(level.board.rows) == 1
    put_player(level, PieceKind.SQUARE, 6, 19)
    level.key_down(Key.SPACE)
    # two straights fell 20 cells each, the square 19, plus one clear
    assert level.score == 2 * 20 * 2 + 19 * 2 + 100
    assert len(level.board.rows) == 1
    assert [pos for pos, _ in level.board.filled_cells()] == [GridPos(8, 0), GridPos(9, 0)]


def test_ten_vertical_straights_clear_four_rows(level):
    for column in range(10):
        put_player(level, PieceKind.I, column - 1, 19, turns=1)
        assert level.move_to_end() == 18
    assert level.board.rows == []
    assert level.score == 10 * 18 * 2 + 4 * 100


def test_lock_below_height_never_flags_loss(level):
    put_player(level, PieceKind.I, 0, -1)
    assert level.lock() == 0
    assert not level.lost


def test_lock_at_height_is_a_loss_and_next_update_goes_home(level):
    level.board.place([GridPos(0, 0)], Piece.from_kind(PieceKind.T).color)
    level.score = 500
    put_player(level, PieceKind.I, 0, 19)
    level.lock()
    assert level.lost
    assert level.score == 0
    assert level.board.rows == []

    canvas = RecordingCanvas()
    assert level.update(canvas, 0) is Scene.HOME
    assert canvas.requests == []
    assert not level.lost
    assert level.update(canvas, 0) is Scene.LEVEL


def test_gravity_waits_for_the_full_interval(level):
    put_player(level, PieceKind.T, 3, 15)
    canvas = RecordingCanvas()
    level.update(canvas, INTERVAL - 1)
    assert level.player.position == GridPos(3, 15)
    level.update(canvas, 1)
    assert level.player.position == GridPos(3, 14)
    assert level.time == 0


def test_gravity_keeps_the_surplus(level):
    put_player(level, PieceKind.T, 3, 15)
    level.update(RecordingCanvas(), 2 * INTERVAL + INTERVAL // 2)
    assert level.player.position == GridPos(3, 13)
    assert level.time == INTERVAL // 2


def test_long_stall_does_not_skip_through_the_stack(level):
    color = Piece.from_kind(PieceKind.T).color
    level.board.place([GridPos(3, 10)], color)
    put_player(level, PieceKind.I, 3, 19)
    i_color = level.player.piece.color
    level.update(RecordingCanvas(), 15 * INTERVAL)
    for x in range(3, 7):
        assert level.board.block_at(GridPos(x, 11)).color == i_color
    assert len(level.board.rows) == 12
    assert level.player.position == GridPos(3, 14)
    assert level.time == 0


def test_gravity_locks_when_the_piece_cannot_fall(level):
    put_player(level, PieceKind.I, 0, -1)
    level.update(RecordingCanvas(), INTERVAL)
    assert [pos for pos, _ in level.board.filled_cells()] == [GridPos(x, 0) for x in range(4)]


def test_keys_map_to_actions(level):
    put_player(level, PieceKind.T, 3, 10)
    assert level.key_down(Key.LEFT) is Scene.LEVEL
    assert level.player.position == GridPos(2, 10)
    level.key_down(Key.RIGHT)
    level.key_down(Key.DOWN)
    assert level.player.position == GridPos(3, 9)
    level.key_down(Key.W)
    assert level.player.position == GridPos(3, 10)
    before = level.player.piece.offsets
    level.key_down(Key.UP)
    assert level.player.piece.offsets != before
    assert level.key_down(Key.NUM2) is Scene.LEVEL
    assert level.player.position == GridPos(3, 10)


def test_escape_requests_home(level):
    assert level.key_down(Key.ESCAPE) is Scene.HOME
    assert level.key_down(Key.NUM1) is Scene.HOME


def test_restart_clears_board_and_score_without_loss(level):
    put_player(level, PieceKind.I, 3, 19)
    level.move_to_end()
    level.key_down(Key.R)
    assert level.board.rows == []
    assert level.score == 0
    assert not level.lost


def test_clicks_are_ignored(level):
    assert level.on_click(Vec2(10.0, 10.0)) is Scene.LEVEL


def test_negative_delta_is_rejected(level):
    with pytest.raises(ValueError):
        level.update(RecordingCanvas(), -1)


def test_update_emits_board_preview_and_player(level):
    canvas = RecordingCanvas()
    level.update(canvas, 0)
    assert "score: 0" in canvas.texts()
    assert "next tetraminos" in canvas.texts()
    # background cells, three previews and the player
    assert len(canvas.of_type(FilledRect)) == 200 + 3 * 4 + 4
    assert canvas.of_type(TexturedRect) == []

    put_player(level, PieceKind.I, 3, 19)
    level.move_to_end()
    canvas.clear()
    level.update(canvas, 0)
    textured = canvas.of_type(TexturedRect)
    assert len(textured) == 4
    assert all(r.texture is BRICK for r in textured)


def test_world_region_frames_board_and_preview(level):
    region = level.world_region()
    assert region.center == Vec2(25.0, 50.0)
    assert region.size == Vec2(100.0, 100.0)
