from __future__ import annotations

import pytest

from block_drop.game.shapes import (
    Extent,
    NUM_SHAPES,
    ROTATIONS,
    TetrominoType,
    get_extent,
    get_offsets,
    normalize_rotation,
    rotate_offsets_ccw,
    rotate_offsets_cw,
    rotation_count,
)


def test_catalog_has_seven_types():
    assert NUM_SHAPES == 7
    assert set(ROTATIONS) == set(TetrominoType)


@pytest.mark.parametrize(
    "kind, count",
    [
        (TetrominoType.I, 2),
        (TetrominoType.O, 1),
        (TetrominoType.J, 4),
        (TetrominoType.L, 4),
        (TetrominoType.S, 2),
        (TetrominoType.Z, 2),
        (TetrominoType.T, 4),
    ],
)
def test_rotation_counts(kind, count):
    assert rotation_count(kind) == count


def test_every_state_has_four_distinct_cells():
    for kind, states in ROTATIONS.items():
        for state in states:
            assert len(state) == 4
            assert len(set(state)) == 4, kind


@pytest.mark.parametrize("kind", [TetrominoType.J, TetrominoType.L, TetrominoType.T])
def test_four_state_pieces_follow_clockwise_rotation(kind):
    for rotation in range(4):
        expected = set(get_offsets(kind, rotation + 1))
        assert set(rotate_offsets_cw(get_offsets(kind, rotation))) == expected
        back = set(rotate_offsets_ccw(get_offsets(kind, rotation + 1)))
        assert back == set(get_offsets(kind, rotation))


@pytest.mark.parametrize("kind", [TetrominoType.I, TetrominoType.S, TetrominoType.Z])
def test_two_state_pieces_rotate_once_clockwise(kind):
    assert set(rotate_offsets_cw(get_offsets(kind, 0))) == set(get_offsets(kind, 1))


def test_rotation_index_wraps():
    assert get_offsets(TetrominoType.J, -1) == get_offsets(TetrominoType.J, 3)
    assert get_offsets(TetrominoType.I, 5) == get_offsets(TetrominoType.I, 1)
    assert get_offsets(TetrominoType.O, 3) == get_offsets(TetrominoType.O, 0)
    assert normalize_rotation(TetrominoType.I, -1) == 1
    assert normalize_rotation(TetrominoType.T, -5) == 3


def test_extent():
    ext = get_extent(TetrominoType.I, 0)
    assert ext == Extent(row_min=0, row_max=0, col_min=-2, col_max=1)
    assert ext.width == 4 and ext.height == 1
    vertical = get_extent(TetrominoType.I, 1)
    assert (vertical.row_min, vertical.row_max) == (-2, 1)
    assert vertical.width == 1
