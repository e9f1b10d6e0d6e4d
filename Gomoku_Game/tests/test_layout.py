"""Pixel-to-intersection mapping used by the pygame renderer."""

import pytest

from Gomoku_Game.gui.layout import BoardLayout


@pytest.fixture
def layout():
    # 620px canvas with 30px padding leaves 560px for 14 gaps: 40px per cell.
    return BoardLayout(board_size=15, canvas_size=620, padding=30)


def test_cell_size(layout):
    assert layout.cell_size == 40
    assert layout.grid_end() == 590
    assert layout.stone_radius() == 16


def test_to_pixel(layout):
    assert layout.to_pixel(0, 0) == (30, 30)
    assert layout.to_pixel(7, 7) == (310, 310)
    # x follows the column, y follows the row
    assert layout.to_pixel(1, 3) == (150, 70)


def test_intersections_map_back(layout):
    for row, col in [(0, 0), (7, 7), (14, 14), (2, 11)]:
        assert layout.to_cell(*layout.to_pixel(row, col)) == (row, col)


def test_near_click_snaps_to_intersection(layout):
    assert layout.to_cell(329, 310) == (7, 7)
    assert layout.to_cell(15, 30) == (0, 0)
    assert layout.to_cell(605, 30) == (0, 14)


def test_click_between_intersections_ignored(layout):
    # Equidistant-ish from four intersections: farther than half a cell from all.
    assert layout.to_cell(330, 330) is None


def test_click_outside_board_ignored(layout):
    assert layout.to_cell(5, 5) is None
    assert layout.to_cell(300, -40) is None
    assert layout.to_cell(610, 30) is None
    assert layout.to_cell(700, 700) is None


def test_star_points():
    assert (7, 7) in BoardLayout(15, 620).star_points()
    assert len(BoardLayout(15, 620).star_points()) == 9
    assert (9, 9) in BoardLayout(19, 620).star_points()
    assert BoardLayout(9, 620).star_points() == []


def test_single_cell_board():
    layout = BoardLayout(board_size=1, canvas_size=100, padding=30)
    assert layout.cell_size == 40
    assert layout.to_cell(30, 30) == (0, 0)


def test_padding_must_fit():
    with pytest.raises(ValueError):
        BoardLayout(board_size=15, canvas_size=60, padding=30)
