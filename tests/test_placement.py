from __future__ import annotations

import random

import numpy as np
import pytest

from block_drop.game import IllegalCommitError, Piece, TetrominoType


def _drawn(engine, piece):
    engine.stamp(piece)
    return piece


def test_can_place_ignores_own_footprint(engine):
    piece = _drawn(engine, Piece(TetrominoType.T, rotation=0, row=5, col=4, color=3))
    # moving down overlaps the piece's own current cells
    assert engine.can_place(piece, 1, 0)


def test_queries_leave_board_untouched(engine, grid):
    piece = _drawn(engine, Piece(TetrominoType.T, rotation=0, row=5, col=4, color=3))
    grid.set_cell((6, 3), 2)
    before = grid.clone_state()
    first = engine.can_place(piece, 1, 0)
    second = engine.can_place(piece, 1, 0)
    assert first is second is False
    assert np.array_equal(grid.grid, before)
    assert engine.can_rotate(piece, 1) == engine.can_rotate(piece, 1)
    assert np.array_equal(grid.grid, before)


def test_walls_and_floor_block_moves(engine):
    piece = _drawn(engine, Piece(TetrominoType.I, rotation=0, row=21, col=2, color=1))
    assert not engine.can_place(piece, 0, -1)
    assert not engine.can_place(piece, 1, 0)
    assert engine.can_place(piece, 0, 1)


def test_commit_move_updates_anchor_and_cells(engine, grid):
    piece = _drawn(engine, Piece(TetrominoType.O, row=5, col=4, color=6))
    engine.commit_move(piece, 1, -1)
    assert piece.anchor == (6, 3)
    assert grid.count_occupied() == 4
    for cell in piece.cells():
        assert grid.cell_at(cell) == 6
    assert grid.cell_at((5, 5)) == 0


def test_commit_without_room_raises(engine, grid):
    piece = _drawn(engine, Piece(TetrominoType.O, row=20, col=0, color=2))
    before = grid.clone_state()
    with pytest.raises(IllegalCommitError):
        engine.commit_move(piece, 1, 0)
    assert np.array_equal(grid.grid, before)
    assert piece.anchor == (20, 0)


def test_rotation_past_wall_is_rejected(engine, grid):
    piece = _drawn(engine, Piece(TetrominoType.I, rotation=1, row=5, col=0, color=4))
    before = grid.clone_state()
    assert not engine.can_rotate(piece, 1)
    assert not engine.try_rotate(piece, 1)
    assert piece.rotation == 1
    assert np.array_equal(grid.grid, before)


def test_rotation_in_open_space(engine, grid):
    piece = _drawn(engine, Piece(TetrominoType.T, rotation=0, row=10, col=4, color=5))
    engine.commit_rotate(piece, -1)
    assert piece.rotation == 3
    occupied = [(int(r), int(c)) for r, c in zip(*np.nonzero(grid.grid))]
    assert sorted(occupied) == sorted(piece.cells())


def test_fits_checks_undrawn_piece(engine, grid):
    piece = Piece(TetrominoType.S, rotation=0, row=3, col=3, color=1)
    assert engine.fits(piece)
    grid.set_cell(piece.cells()[0], 7)
    assert not engine.fits(piece)


def test_random_moves_keep_the_board_consistent(engine, grid):
    rng = random.Random(7)
    for row in range(15, 22):
        grid.set_cell((row, rng.randrange(10)), 1 + rng.randrange(7))
    settled = grid.count_occupied()
    piece = _drawn(engine, Piece(TetrominoType.L, rotation=0, row=4, col=4, color=2))
    for _ in range(300):
        choice = rng.randrange(4)
        if choice == 0:
            engine.try_move(piece, 0, rng.choice((-1, 1)))
        elif choice == 1:
            engine.try_move(piece, 1, 0)
        elif choice == 2:
            engine.try_move(piece, -1, 0)
        else:
            engine.try_rotate(piece, rng.choice((-1, 1)))
        assert grid.count_occupied() == settled + 4
        assert all(grid.in_bounds(cell) for cell in piece.cells())
        assert all(grid.cell_at(cell) == 2 for cell in piece.cells())
        assert grid.grid.min() >= 0 and grid.grid.max() <= 7
