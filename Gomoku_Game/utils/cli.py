"""CLI options for selecting the interface, board size, and config paths."""


def parse_args(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="Gomoku (five in a row, freestyle rules)")
    parser.add_argument("--board-size", type=int, help="Board size (default from settings, usually 15)")
    parser.add_argument("--window-size", type=int, help="Window width/height in pixels for the GUI")
    parser.add_argument("--padding", type=int, help="Pixels between the window edge and the outer grid lines")
    parser.add_argument(
        "--interface",
        choices=["gui", "console"],
        default=None,
        help="Front-end to play with (default from settings or gui)",
    )
    parser.add_argument("--settings", default="config/settings.yaml", help="Path to settings YAML")
    parser.add_argument("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser.parse_args(argv)
