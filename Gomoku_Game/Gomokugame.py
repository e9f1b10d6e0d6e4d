"""Game session: turn management, win/draw detection, and reset."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .Board import Board, Piece
from .engine import referee, rules

LOGGER = logging.getLogger(__name__)


class GamePhase(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


@dataclass(frozen=True)
class GameState:
    current_player: Piece
    winner: Piece | None
    is_over: bool

    @property
    def phase(self) -> GamePhase:
        if not self.is_over:
            return GamePhase.IN_PROGRESS
        return GamePhase.WON if self.winner is not None else GamePhase.DRAWN


class GomokuGame:
    """
    Single game session on an N x N board. Black always moves first.

    Illegal placements (game over, out of bounds, occupied) are refused by
    returning False and never raise; only construction can fail.
    """

    def __init__(self, board_size: int = 15):
        if isinstance(board_size, bool) or not isinstance(board_size, int):
            raise ValueError(f"board_size must be an integer, got {board_size!r}")
        if board_size < 1:
            raise ValueError(f"board_size must be positive, got {board_size}")
        if not rules.can_be_won(board_size):
            LOGGER.warning(
                "Board size %d is below %d; games can only end in a draw",
                board_size,
                rules.WIN_LENGTH,
            )
        self.board = Board(size=board_size)
        self.current_player = Piece.BLACK
        self.winner: Piece | None = None
        self.is_over = False

    def get_board_size(self) -> int:
        return self.board.size

    def get_piece(self, row: int, col: int) -> Piece:
        return self.board.get(row, col)

    def get_current_player(self) -> Piece:
        return self.current_player

    def get_game_state(self) -> GameState:
        return GameState(
            current_player=self.current_player,
            winner=self.winner,
            is_over=self.is_over,
        )

    def get_board(self) -> list[list[Piece]]:
        """Independent copy of the grid; mutating it does not touch the game."""
        return self.board.snapshot()

    def place_piece(self, row: int, col: int) -> bool:
        reason = referee.rejection_reason(self, row, col)
        if reason is not None:
            LOGGER.debug("Rejected %s at (%s, %s): %s", self.current_player.name, row, col, reason.value)
            return False

        mover = self.current_player
        self.board.place(row, col, mover)

        if rules.is_win_after_move(self.board, row, col):
            self.winner = mover
            self.is_over = True
            LOGGER.info("%s wins at (%d, %d)", mover.name, row, col)
        elif self.board.is_full():
            self.is_over = True
            LOGGER.info("Board full after %d moves; draw", self.board.move_count)
        else:
            self.current_player = mover.opponent
        return True

    def reset(self) -> None:
        self.board.clear()
        self.current_player = Piece.BLACK
        self.winner = None
        self.is_over = False
        LOGGER.debug("Game reset (%dx%d)", self.board.size, self.board.size)
