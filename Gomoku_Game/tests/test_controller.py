"""GameController routing and status text."""

from Gomoku_Game.Board import Piece
from Gomoku_Game.Gomokugame import GameState, GomokuGame
from Gomoku_Game.controller import GameController, status_message
from Gomoku_Game.engine.referee import MoveRejection
from Gomoku_Game.gui.layout import BoardLayout


def make_controller(size=15, layout=None):
    events = []
    controller = GameController(GomokuGame(size), layout=layout, logger=events.append)
    return controller, events


def test_status_messages():
    assert status_message(GameState(Piece.BLACK, None, False)) == "Black to move"
    assert status_message(GameState(Piece.WHITE, None, False)) == "White to move"
    assert status_message(GameState(Piece.WHITE, Piece.WHITE, True)) == "White wins!"
    assert status_message(GameState(Piece.BLACK, None, True)) == "Draw!"


def test_play_logs_moves():
    controller, events = make_controller()
    assert controller.play(7, 7)
    assert controller.play(7, 8)
    assert events == ["Move 1: B (7, 7)", "Move 2: W (7, 8)"]
    assert controller.status_message() == "Black to move"


def test_rejected_move_records_reason():
    controller, events = make_controller()
    controller.play(7, 7)
    assert controller.play(7, 7) is False
    assert controller.last_rejection is MoveRejection.OCCUPIED
    assert events[-1] == "Rejected: White (7, 7) - cell already occupied"
    assert controller.play(20, 0) is False
    assert controller.last_rejection is MoveRejection.OUT_OF_BOUNDS
    assert controller.play(0, 0)
    assert controller.last_rejection is None


def test_win_is_logged_and_shown():
    controller, events = make_controller(size=5)
    for col in range(5):
        controller.play(0, col)
        if col < 4:
            controller.play(1, col)
    assert events[-1] == "Winner: Black"
    assert controller.status_message() == "Black wins!"
    assert controller.play(4, 4) is False
    assert controller.last_rejection is MoveRejection.GAME_OVER


def test_draw_is_logged():
    controller, events = make_controller(size=2)
    for move in [(0, 0), (0, 1), (1, 0), (1, 1)]:
        controller.play(*move)
    assert events[-1] == "Result: Draw (board full)"
    assert controller.status_message() == "Draw!"


def test_click_maps_through_layout():
    layout = BoardLayout(board_size=15, canvas_size=620, padding=30)
    controller, _ = make_controller(layout=layout)
    assert controller.click(310, 312)
    assert controller.game.get_piece(7, 7) is Piece.BLACK
    assert controller.click(330, 330) is False
    assert controller.game.get_current_player() is Piece.WHITE


def test_restart_resets_game_and_counter():
    controller, events = make_controller()
    controller.play(7, 7)
    controller.restart()
    assert events[-1] == "New game"
    assert controller.game.get_piece(7, 7) is Piece.EMPTY
    controller.play(3, 3)
    assert events[-1] == "Move 1: B (3, 3)"
