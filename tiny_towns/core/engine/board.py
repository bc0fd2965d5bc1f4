"""Tiny Towns placement board.

Cells are addressed by ``(x, y)`` where ``x`` picks the row and ``y`` the
column, stored in a flat list at ``x * BOARD_WIDTH + y``::

    + --- + --- + --- + --- +
    | 0,0 | 0,1 | 0,2 | 0,3 |
    | 0   | 1   | 2   | 3   |
    + --- + --- + --- + --- +
    | 1,0 | 1,1 | 1,2 | 1,3 |
    | 4   | 5   | 6   | 7   |
    + --- + --- + --- + --- +
    | 2,0 | 2,1 | 2,2 | 2,3 |
    | 8   | 9   | 10  | 11  |
    + --- + --- + --- + --- +
    | 3,0 | 3,1 | 3,2 | 3,3 |
    | 12  | 13  | 14  | 15  |
    + --- + --- + --- + --- +
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, List, Optional, Tuple

import numpy as np

from .config import DEFAULT_RULES, RulesConfig
from .types import (
    Building,
    Coord,
    Cube,
    Piece,
    PlacementError,
    Resource,
    Structure,
    TinyTownsError,
)

if TYPE_CHECKING:
    from .rules import Match

BOARD_WIDTH = 4
BOARD_HEIGHT = 4
BOARD_SIZE = BOARD_WIDTH * BOARD_HEIGHT


def in_bounds(x: int, y: int) -> bool:
    if isinstance(x, bool) or isinstance(y, bool):
        return False
    if not isinstance(x, numbers.Integral) or not isinstance(y, numbers.Integral):
        return False
    return 0 <= x < BOARD_HEIGHT and 0 <= y < BOARD_WIDTH


def board_index(x: int, y: int) -> int:
    """Checked conversion of a coordinate into its slot in the flat grid."""
    if not in_bounds(x, y):
        raise PlacementError(TinyTownsError.OUT_OF_BOUNDS, (x, y))
    return x * BOARD_WIDTH + y


def _empty_cells() -> List[Optional[Piece]]:
    return [None] * BOARD_SIZE


def _cell_label(piece: Optional[Piece]) -> str:
    if piece is None:
        return "."
    if isinstance(piece, Cube):
        return piece.resource.code
    return piece.building.value[:2].upper()


@dataclass
class Board:
    cells: List[Optional[Piece]] = field(default_factory=_empty_cells)
    config: RulesConfig = DEFAULT_RULES

    def __post_init__(self) -> None:
        if len(self.cells) != BOARD_SIZE:
            raise ValueError(f"Board expects {BOARD_SIZE} cells, got {len(self.cells)}")

    def coords(self) -> Iterable[Coord]:
        for x in range(BOARD_HEIGHT):
            for y in range(BOARD_WIDTH):
                yield (x, y)

    def get_piece(self, x: int, y: int) -> Optional[Piece]:
        return self.cells[board_index(x, y)]

    def occupied(self) -> List[Tuple[Coord, Piece]]:
        result: List[Tuple[Coord, Piece]] = []
        for coord in self.coords():
            piece = self.get_piece(*coord)
            if piece is not None:
                result.append((coord, piece))
        return result

    def is_full(self) -> bool:
        return all(piece is not None for piece in self.cells)

    def placement_error(self, x: int, y: int) -> Optional[TinyTownsError]:
        if not in_bounds(x, y):
            return TinyTownsError.OUT_OF_BOUNDS
        if self.cells[board_index(x, y)] is not None:
            return TinyTownsError.OCCUPIED
        return None

    def _store(self, x: int, y: int, piece: Piece) -> None:
        error = self.placement_error(x, y)
        if error is not None:
            raise PlacementError(error, (x, y))
        self.cells[board_index(x, y)] = piece

    def place_piece(self, x: int, y: int, resource: Resource) -> None:
        self._store(x, y, Cube(Resource(resource)))

    def place_brick(self, x: int, y: int) -> None:
        self.place_piece(x, y, Resource.BRICK)

    def place_glass(self, x: int, y: int) -> None:
        self.place_piece(x, y, Resource.GLASS)

    def place_stone(self, x: int, y: int) -> None:
        self.place_piece(x, y, Resource.STONE)

    def place_wheat(self, x: int, y: int) -> None:
        self.place_piece(x, y, Resource.WHEAT)

    def place_wood(self, x: int, y: int) -> None:
        self.place_piece(x, y, Resource.WOOD)

    def place_building(self, x: int, y: int, building: Building) -> None:
        """Mark a single cell as holding ``building`` without checking its pattern."""
        self._store(x, y, Structure(Building(building)))

    def remove_piece(self, x: int, y: int) -> Optional[Piece]:
        index = board_index(x, y)
        piece = self.cells[index]
        self.cells[index] = None
        return piece

    def check_building(self, x: int, y: int, building: Building) -> Optional["Match"]:
        """Find a pattern match for ``building`` that covers ``(x, y)``, or None."""
        from .rules import find_match

        return find_match(self, building, x, y, self.config)

    def construct_building(self, x: int, y: int, building: Building) -> "Match":
        """Replace a matched cluster of cubes with ``building`` standing at ``(x, y)``."""
        match = self.check_building(x, y, building)
        if match is None:
            raise PlacementError(TinyTownsError.PATTERN_MISMATCH, (x, y))
        for coord in match.cells():
            self.remove_piece(*coord)
        self.place_building(x, y, building)
        return match

    def as_array(self) -> np.ndarray:
        arr = np.empty((BOARD_HEIGHT, BOARD_WIDTH), dtype=object)
        for x, y in self.coords():
            arr[x, y] = self.get_piece(x, y)
        return arr

    def pretty(self) -> str:
        lines: List[str] = []
        for x in range(BOARD_HEIGHT):
            row = [_cell_label(self.get_piece(x, y)).ljust(2) for y in range(BOARD_WIDTH)]
            lines.append(" ".join(row).rstrip())
        return "\n".join(lines)


def empty_board(config: RulesConfig | None = None) -> Board:
    if config is None:
        config = DEFAULT_RULES
    return Board(config=config)


def legend() -> str:
    border = "+" + " --- +" * BOARD_WIDTH
    header = "y:  " + "     ".join(str(y) for y in range(BOARD_WIDTH))
    lines = [header, "x " + border]
    for x in range(BOARD_HEIGHT):
        coords = " | ".join(f"{x},{y}" for y in range(BOARD_WIDTH))
        indices = " | ".join(str(x * BOARD_WIDTH + y).ljust(3) for y in range(BOARD_WIDTH))
        lines.append(f"  | {coords} |")
        lines.append(f"{x} | {indices} |")
        lines.append("  " + border)
    return "\n".join(lines)
