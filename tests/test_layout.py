import numpy as np
import pytest

from numberstacks.model.layout import GridDescriptor, LayoutMode, render
from numberstacks.model.palette import COMPOSITE_COLOUR, DEFAULT_PRIME_COLOUR, cell_size, colour_for_prime


def test_render_sixteen():
    layout = render(16)
    assert layout.mode == LayoutMode.COMPOSITE
    assert layout.pairs == [(2, 8), (4, 4), (8, 2)]
    assert [g.fill_colour for g in layout.grids] == [
        colour_for_prime(2), COMPOSITE_COLOUR, COMPOSITE_COLOUR,
    ]
    assert all(block.marker is None for block in layout.blocks)
    assert [block.label.text for block in layout.blocks] == ["2 × 8", "4 × 4", "8 × 2"]


def test_render_sixteen_label_sides():
    first = render(16).blocks[0].label
    assert first.left.is_prime and first.left.colour == colour_for_prime(2)
    assert not first.right.is_prime and first.right.colour is None


def test_render_seventeen():
    layout = render(17)
    assert layout.mode == LayoutMode.PRIME
    assert len(layout.blocks) == 1
    block = layout.blocks[0]
    assert (block.grid.columns, block.grid.rows) == (17, 1)
    assert block.grid.fill_colour == "#EC4899"
    assert block.grid.cell_size == cell_size(17)
    assert block.marker.value == 17
    assert block.marker.colour == "#EC4899"
    assert block.label is None


def test_render_prime_outside_table_uses_default_colour():
    layout = render(23)
    assert layout.mode == LayoutMode.PRIME
    assert len(layout.blocks) == 1
    block = layout.blocks[0]
    assert (block.grid.columns, block.grid.rows) == (23, 1)
    assert block.grid.fill_colour == DEFAULT_PRIME_COLOUR
    assert block.marker.value == 23
    assert block.marker.colour == DEFAULT_PRIME_COLOUR
    assert block.label is None


def test_render_known_prime_uses_its_colour():
    block = render(7).blocks[0]
    assert block.grid.fill_colour == colour_for_prime(7)
    assert block.marker.colour == colour_for_prime(7)


def test_label_sides_colour_both_primes():
    label = render(15).blocks[0].label
    assert label.text == "3 × 5"
    assert (label.left.colour, label.right.colour) == (colour_for_prime(3), colour_for_prime(5))


def test_cell_size_follows_columns():
    layout = render(60)
    for grid in layout.grids:
        assert grid.cell_size == cell_size(grid.columns)


def test_scroll_hint_for_wide_grids():
    layout = render(40)
    hints = {g.columns: g.scrollable for g in layout.grids}
    assert hints[8] is False
    assert hints[10] is True
    assert hints[20] is True


def test_render_is_fresh_every_time():
    assert render(36) == render(36)
    assert render(36) is not render(36)


@pytest.mark.parametrize("bad", [0, 1, -5])
def test_render_rejects_numbers_below_two(bad):
    with pytest.raises(ValueError):
        render(bad)


@pytest.mark.parametrize("bad", [2.5, "12", None, True])
def test_render_rejects_non_integers(bad):
    with pytest.raises(ValueError):
        render(bad)


def test_render_accepts_numpy_integers():
    assert render(np.int64(12)).pairs == [(2, 6), (3, 4), (4, 3), (6, 2)]


def test_cell_rects_row_major():
    grid = GridDescriptor(columns=3, rows=2, cell_size=10.0, fill_colour="#000000")
    rects = grid.cell_rects()
    assert rects.shape == (6, 4)
    np.testing.assert_allclose(rects[:, 0], [0, 10, 20, 0, 10, 20])
    np.testing.assert_allclose(rects[:, 1], [0, 0, 0, 10, 10, 10])
    assert np.all(rects[:, 2:] == 10.0)
    assert (grid.width, grid.height) == (30.0, 20.0)
