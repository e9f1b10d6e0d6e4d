"""Move validation: the ordered legality checks behind every placement."""

from enum import Enum


class MoveRejection(Enum):
    GAME_OVER = "game already over"
    OUT_OF_BOUNDS = "move out of bounds"
    OCCUPIED = "cell already occupied"


def rejection_reason(game, row, col):
    """
    Return why placing at (row, col) would be refused, or None if it is legal.
    Checks run in the same order place_piece applies them.
    """
    if game.is_over:
        return MoveRejection.GAME_OVER
    if not game.board.in_bounds(row, col):
        return MoveRejection.OUT_OF_BOUNDS
    if not game.board.is_empty(row, col):
        return MoveRejection.OCCUPIED
    return None

