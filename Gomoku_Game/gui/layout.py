"""Pixel geometry for the board canvas: intersections, hit-testing, star points."""

from __future__ import annotations

import math

STAR_POINTS = {
    15: [(3, 3), (3, 7), (3, 11), (7, 3), (7, 7), (7, 11), (11, 3), (11, 7), (11, 11)],
    19: [(3, 3), (3, 9), (3, 15), (9, 3), (9, 9), (9, 15), (15, 3), (15, 9), (15, 15)],
}


class BoardLayout:
    def __init__(self, board_size: int, canvas_size: float, padding: float = 30):
        if canvas_size <= 2 * padding:
            raise ValueError("canvas_size must leave room for the padding on both sides")
        self.board_size = board_size
        self.canvas_size = canvas_size
        self.padding = padding
        span = canvas_size - 2 * padding
        # A 1x1 board has a single intersection; give its stone the whole span.
        self.cell_size = span / (board_size - 1) if board_size > 1 else span

    def to_pixel(self, row: int, col: int) -> tuple[float, float]:
        """Canvas (x, y) of the intersection at (row, col)."""
        return self.padding + col * self.cell_size, self.padding + row * self.cell_size

    def to_cell(self, x: float, y: float) -> tuple[int, int] | None:
        """Nearest intersection to (x, y), or None if the point is not close enough to one."""
        col = round((x - self.padding) / self.cell_size)
        row = round((y - self.padding) / self.cell_size)
        if not (0 <= row < self.board_size and 0 <= col < self.board_size):
            return None
        ix, iy = self.to_pixel(row, col)
        if math.hypot(x - ix, y - iy) < self.cell_size * 0.5:
            return row, col
        return None

    def grid_end(self) -> float:
        return self.padding + (self.board_size - 1) * self.cell_size

    def stone_radius(self) -> float:
        return self.cell_size * 0.4

    def star_points(self) -> list[tuple[int, int]]:
        return list(STAR_POINTS.get(self.board_size, []))
