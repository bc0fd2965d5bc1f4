"""
Tiny Towns Placement Board
==========================

A 4x4 board holding resource cubes and buildings, with placement rules and
the pattern matching that turns clusters of cubes into buildings.
"""

__version__ = "0.1.0"

from . import core
from .core import (
    Board,
    Building,
    Cube,
    PlacementError,
    Resource,
    RulesConfig,
    Structure,
    TinyTownsError,
    empty_board,
    pattern,
)

__all__ = [
    "core",
    "__version__",
    "Board",
    "Building",
    "Cube",
    "PlacementError",
    "Resource",
    "RulesConfig",
    "Structure",
    "TinyTownsError",
    "empty_board",
    "pattern",
]
