"""Tests for the Playfield module."""

import numpy as np
import pytest

from term_snake.grid import GlyphKind, Playfield


class TestPlayfieldInit:
    def test_dimensions(self):
        field = Playfield(10, 8)
        assert field.width == 10
        assert field.height == 8
        assert field.area == 80

    def test_minimum_size_enforced(self):
        with pytest.raises(ValueError, match="at least 1"):
            Playfield(0, 4)
        with pytest.raises(ValueError, match="at least 1"):
            Playfield(4, 0)

    def test_equality(self):
        assert Playfield(5, 6) == Playfield(5, 6)
        assert Playfield(5, 6) != Playfield(6, 5)
        assert len({Playfield(5, 6), Playfield(5, 6)}) == 1


class TestPlayfieldBounds:
    def test_in_bounds(self):
        field = Playfield(8, 8)
        assert field.in_bounds((0, 0))
        assert field.in_bounds((7, 7))
        assert not field.in_bounds((-1, 0))
        assert not field.in_bounds((8, 3))
        assert not field.in_bounds((3, 8))

    def test_random_cell_in_bounds(self):
        field = Playfield(5, 3)
        rng = np.random.default_rng(0)
        for _ in range(200):
            assert field.in_bounds(field.random_cell(rng))


class TestPlayfieldSnapshot:
    def test_snapshot_shape_and_codes(self):
        field = Playfield(4, 3)
        cells = field.snapshot(body=[(0, 0), (1, 0)], food=[(3, 2)])
        assert cells.shape == (3, 4)
        assert cells[0, 0] == GlyphKind.BODY
        assert cells[0, 1] == GlyphKind.BODY
        assert cells[2, 3] == GlyphKind.FOOD
        assert cells[1, 1] == GlyphKind.BACKGROUND

    def test_free_cells(self):
        field = Playfield(4, 4)
        assert len(field.free_cells()) == 16
        free = field.free_cells(body=[(0, 0)], food=[(1, 1)])
        assert len(free) == 14
        assert (0, 0) not in free
        assert (1, 1) not in free
        assert (3, 0) in free

    def test_to_dict(self):
        assert Playfield(7, 3).to_dict() == {"width": 7, "height": 3}
