"""Routes user input to the game session and reports what happened."""

from .Board import Piece
from .engine import referee
from .utils.logger import log_event

PLAYER_NAMES = {Piece.BLACK: "Black", Piece.WHITE: "White"}


def status_message(state):
    """Status line for a GameState: whose turn, who won, or draw."""
    if state.is_over:
        if state.winner is not None:
            return f"{PLAYER_NAMES[state.winner]} wins!"
        return "Draw!"
    return f"{PLAYER_NAMES[state.current_player]} to move"


class GameController:
    def __init__(self, game, layout=None, logger=log_event):
        self.game = game
        self.layout = layout
        self.logger = logger
        self.move_index = 0
        self.last_rejection = None

    def play(self, row, col):
        """Forward a move to the game. Returns True if it was applied."""
        mover = self.game.get_current_player()
        reason = referee.rejection_reason(self.game, row, col)
        if not self.game.place_piece(row, col):
            self.last_rejection = reason
            self.logger(f"Rejected: {PLAYER_NAMES[mover]} ({row}, {col}) - {reason.value}")
            return False

        self.last_rejection = None
        self.move_index += 1
        self.logger(f"Move {self.move_index}: {'B' if mover is Piece.BLACK else 'W'} ({row}, {col})")

        state = self.game.get_game_state()
        if state.is_over:
            if state.winner is not None:
                self.logger(f"Winner: {PLAYER_NAMES[state.winner]}")
            else:
                self.logger("Result: Draw (board full)")
        return True

    def click(self, x, y):
        """Play the intersection under canvas point (x, y), if any."""
        if self.layout is None:
            raise RuntimeError("click() needs a BoardLayout")
        cell = self.layout.to_cell(x, y)
        if cell is None:
            return False
        return self.play(*cell)

    def restart(self):
        self.game.reset()
        self.move_index = 0
        self.last_rejection = None
        self.logger("New game")

    def status_message(self):
        return status_message(self.game.get_game_state())
