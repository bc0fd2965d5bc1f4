"""Core engine for the Tiny Towns placement board."""

from .engine.board import Board, empty_board, legend
from .engine.config import RulesConfig
from .engine.patterns import Pattern, orientations, pattern, placements
from .engine.types import Building, Cube, PlacementError, Resource, Structure, TinyTownsError
from .engine import rules

__all__ = [
    "Board",
    "empty_board",
    "legend",
    "RulesConfig",
    "Pattern",
    "orientations",
    "pattern",
    "placements",
    "Building",
    "Cube",
    "PlacementError",
    "Resource",
    "Structure",
    "TinyTownsError",
    "rules",
]
