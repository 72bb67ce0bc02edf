import random

import pytest

from termtris.shapes import SHAPE_OFFSETS, ShapeType, random_shape, rotate_offsets, shape_offsets


def test_catalog_has_seven_four_cell_shapes():
    assert len(SHAPE_OFFSETS) == 7
    for offsets in SHAPE_OFFSETS.values():
        assert len(offsets) == 4
        assert len(set(offsets)) == 4


def test_shape_offsets_returns_a_copy():
    offsets = shape_offsets(ShapeType.T)
    offsets.append((9, 9))
    assert len(SHAPE_OFFSETS[ShapeType.T]) == 4


def test_rotation_maps_x_y_to_minus_y_x():
    assert rotate_offsets([(1, 0), (0, 2), (-1, 1)]) == [(0, 1), (-2, 0), (-1, -1)]


@pytest.mark.parametrize("shape", list(ShapeType))
def test_four_rotations_restore_offsets(shape: ShapeType):
    offsets = shape_offsets(shape)
    half = rotate_offsets(rotate_offsets(offsets))
    full = rotate_offsets(rotate_offsets(half))
    assert full == offsets


def test_random_shape_uses_given_rng():
    first = [random_shape(random.Random(7)) for _ in range(3)]
    assert len(set(first)) == 1
    seen = {random_shape(random.Random(seed)) for seed in range(200)}
    assert seen == set(ShapeType)
