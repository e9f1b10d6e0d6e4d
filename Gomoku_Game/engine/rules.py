"""Freestyle rule set: five or more in a row wins, nothing is forbidden."""

WIN_LENGTH = 5
MIN_PLAYABLE_SIZE = WIN_LENGTH


def is_win_after_move(board, row, col):
    """True if the stone just played at (row, col) sits on a line of WIN_LENGTH or more.

    Overlines count; only the lines through the new stone are examined.
    """
    return board.has_five_or_more(row, col)


def can_be_won(board_size):
    return board_size >= MIN_PLAYABLE_SIZE
