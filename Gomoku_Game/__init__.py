"""Gomoku_Game package exports."""

from .Board import Board, Piece
from .Gomokugame import GameState, GamePhase, GomokuGame
from .controller import GameController, status_message
from .console import ConsoleView

# Subpackages for the rule engine, GUI, and helpers
from . import engine, gui, utils

__all__ = [
    "Board",
    "Piece",
    "GameState",
    "GamePhase",
    "GomokuGame",
    "GameController",
    "status_message",
    "ConsoleView",
    "engine",
    "gui",
    "utils",
]
