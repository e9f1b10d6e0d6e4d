"""Entry point for Gomoku. Load config, build the game, start the chosen front-end."""

import yaml
from pathlib import Path

from Gomoku_Game.console import ConsoleView
from Gomoku_Game.controller import GameController
from Gomoku_Game.Gomokugame import GomokuGame
from Gomoku_Game.utils.cli import parse_args
from Gomoku_Game.utils.logger import configure_logging, log_event


PROJECT_DIR = Path(__file__).resolve().parent

DEFAULT_SETTINGS = {
    "board_size": 15,
    "window_size": 640,
    "padding": 30,
    "interface": "gui",
    "log_level": "INFO",
}


def resolve_project_path(path: str | Path) -> Path:
    """Resolve a package-relative path when invoked from outside `Gomoku_Game/`."""
    p = Path(path)
    if p.is_absolute() or p.exists():
        return p
    candidate = PROJECT_DIR / p
    return candidate if candidate.exists() else p


def load_settings(path):
    """Read settings YAML over the defaults; a missing file yields the defaults."""
    path = resolve_project_path(path)
    settings = dict(DEFAULT_SETTINGS)
    try:
        with open(path, "r", encoding="utf-8") as f:
            settings.update(yaml.safe_load(f) or {})
    except FileNotFoundError:
        log_event(f"Warning: settings file not found at {path}; using defaults.")
    return settings


def resolve_options(args, settings):
    return {
        "board_size": args.board_size if args.board_size is not None else settings["board_size"],
        "window_size": args.window_size if args.window_size is not None else settings["window_size"],
        "padding": args.padding if args.padding is not None else settings["padding"],
        "interface": args.interface or settings["interface"],
        "log_level": args.log_level or settings["log_level"],
    }


def main(argv=None):
    args = parse_args(argv)
    options = resolve_options(args, load_settings(args.settings))
    configure_logging(options["log_level"])

    game = GomokuGame(board_size=options["board_size"])
    controller = GameController(game, logger=log_event)

    if options["interface"] == "gui":
        from Gomoku_Game.gui.pygame_view import PygameView

        view = PygameView(controller, window_size=options["window_size"], padding=options["padding"])
    elif options["interface"] == "console":
        view = ConsoleView(controller)
    else:
        raise ValueError(f"Unsupported interface: {options['interface']}")

    view.run()
    log_event(f"Final: {controller.status_message()}")


if __name__ == "__main__":
    main()
