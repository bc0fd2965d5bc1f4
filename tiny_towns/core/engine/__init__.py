"""Board, pattern catalog and placement rules."""

from .board import BOARD_HEIGHT, BOARD_WIDTH, Board, board_index, empty_board, in_bounds, legend
from .config import RulesConfig
from .patterns import Pattern, Placement, orientations, pattern, placements
from .rules import Match, buildable, find_match, find_matches
from .types import Building, Cube, Piece, PlacementError, Resource, Structure, TinyTownsError

__all__ = [
    "BOARD_HEIGHT",
    "BOARD_WIDTH",
    "Board",
    "board_index",
    "empty_board",
    "in_bounds",
    "legend",
    "RulesConfig",
    "Pattern",
    "Placement",
    "orientations",
    "pattern",
    "placements",
    "Match",
    "buildable",
    "find_match",
    "find_matches",
    "Building",
    "Cube",
    "Piece",
    "PlacementError",
    "Resource",
    "Structure",
    "TinyTownsError",
]
