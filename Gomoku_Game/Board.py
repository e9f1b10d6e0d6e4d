"""Board state container and line counting (five-or-more rule)."""

import operator
from enum import IntEnum

DIRECTIONS = [(0, 1), (1, 0), (1, 1), (1, -1)]


class Piece(IntEnum):
    # Same encoding as the stone values: -1 (black), 0 (empty), 1 (white)
    BLACK = -1
    EMPTY = 0
    WHITE = 1

    @property
    def opponent(self):
        if self is Piece.EMPTY:
            raise ValueError("empty cell has no opponent")
        return Piece(-self.value)


class Board:
    def __init__(self, size=15):
        self.size = size
        self.cells = [[Piece.EMPTY] * size for _ in range(size)]
        self.move_count = 0

    def in_bounds(self, row, col):
        try:
            row, col = operator.index(row), operator.index(col)
        except TypeError:
            return False
        return 0 <= row < self.size and 0 <= col < self.size

    def is_empty(self, row, col):
        return self.in_bounds(row, col) and self.cells[row][col] is Piece.EMPTY

    def is_full(self):
        return self.move_count >= self.size * self.size

    def get(self, row, col):
        if not self.in_bounds(row, col):
            return Piece.EMPTY
        return self.cells[row][col]

    def place(self, row, col, piece):
        """Place a stone; raise if out of bounds or occupied."""
        if piece not in (Piece.BLACK, Piece.WHITE):
            raise ValueError("piece must be Piece.BLACK or Piece.WHITE")
        if not self.in_bounds(row, col):
            raise ValueError("move out of bounds")
        if self.cells[row][col] is not Piece.EMPTY:
            raise ValueError("cell already occupied")
        self.cells[row][col] = piece
        self.move_count += 1

    def clear(self):
        self.cells = [[Piece.EMPTY] * self.size for _ in range(self.size)]
        self.move_count = 0

    def snapshot(self):
        return [row[:] for row in self.cells]

    def has_five_or_more(self, row, col):
        """Check for 5+ in any direction through (row, col)."""
        piece = self.get(row, col)
        if piece is Piece.EMPTY:
            return False
        for dr, dc in DIRECTIONS:
            forward = self._count_dir(row, col, dr, dc, piece)
            backward = self._count_dir(row, col, -dr, -dc, piece)
            if 1 + forward + backward >= 5:
                return True
        return False

    def _count_dir(self, row, col, dr, dc, piece):
        """Count contiguous stones of piece from (row, col) (exclusive) in (dr, dc)."""
        count = 0
        r, c = row + dr, col + dc
        while self.in_bounds(r, c) and self.cells[r][c] is piece:
            count += 1
            r += dr
            c += dc
        return count
