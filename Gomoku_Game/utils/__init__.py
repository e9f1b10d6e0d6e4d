"""Helpers: command-line parsing and match logging."""

from . import cli, logger

__all__ = ["cli", "logger"]
