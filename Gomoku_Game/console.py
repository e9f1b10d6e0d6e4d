"""Text front-end: prints the board and reads moves as 'row col'."""

from .Board import Piece

SYMBOLS = {Piece.EMPTY: ".", Piece.BLACK: "X", Piece.WHITE: "O"}
HELP = "Commands: 'row col' to place a stone (0-indexed), 'r' to restart, 'q' to quit."


def format_board(board):
    size = len(board)
    width = len(str(size - 1))
    header = " " * (width + 1) + " ".join(str(c).rjust(width) for c in range(size))
    lines = [header]
    for r, row in enumerate(board):
        cells = " ".join(SYMBOLS[p].rjust(width) for p in row)
        lines.append(f"{str(r).rjust(width)} {cells}")
    return "\n".join(lines)


def parse_move(raw):
    """Parse 'row col' into two ints; raise ValueError on anything else."""
    try:
        row_str, col_str = raw.replace(",", " ").split()
        return int(row_str), int(col_str)
    except ValueError as exc:
        raise ValueError("Invalid input format; expected two integers") from exc


class ConsoleView:
    def __init__(self, controller, input_fn=None, output_fn=None):
        self.controller = controller
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print

    def render(self):
        self.output_fn(format_board(self.controller.game.get_board()))
        self.output_fn(self.controller.status_message())

    def handle_command(self, raw):
        """Apply one line of input. Returns False when the player asked to quit."""
        command = raw.strip().lower()
        if command in ("q", "quit", "exit"):
            return False
        if command in ("r", "restart"):
            self.controller.restart()
            return True
        if command in ("h", "help", "?"):
            self.output_fn(HELP)
            return True

        try:
            row, col = parse_move(command)
        except ValueError as exc:
            self.output_fn(str(exc))
            return True

        if not self.controller.play(row, col):
            reason = self.controller.last_rejection
            self.output_fn(f"Move rejected: {reason.value}")
        return True

    def run(self):
        self.output_fn(HELP)
        while True:
            self.render()
            try:
                raw = self.input_fn("> ")
            except EOFError:
                break
            if not self.handle_command(raw):
                break
