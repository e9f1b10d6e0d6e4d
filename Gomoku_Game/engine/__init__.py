"""Rule engine: win detection and move validation."""

from . import referee, rules

__all__ = ["referee", "rules"]
