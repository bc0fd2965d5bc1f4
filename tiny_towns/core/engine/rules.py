from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .board import Board, board_index
from .config import RulesConfig
from .patterns import Pattern, Placement, placements
from .types import Building, Coord, Cube


@dataclass(frozen=True)
class Match:
    building: Building
    origin: Coord
    pattern: Pattern
    requirements: Tuple[Tuple[Coord, Cube], ...]

    def cells(self) -> Tuple[Coord, ...]:
        return tuple(coord for coord, _ in self.requirements)


def placement_satisfied(board: Board, placement: Placement) -> bool:
    for (x, y), resource in placement.requirements:
        if board.get_piece(x, y) != Cube(resource):
            return False
    return True


def _as_match(placement: Placement) -> Match:
    return Match(
        building=placement.building,
        origin=placement.origin,
        pattern=placement.pattern,
        requirements=tuple((coord, Cube(resource)) for coord, resource in placement.requirements),
    )


def find_matches(
    board: Board, building: Building, config: RulesConfig | None = None
) -> List[Match]:
    if config is None:
        config = board.config
    return [
        _as_match(placement)
        for placement in placements(building, config)
        if placement_satisfied(board, placement)
    ]


def find_match(
    board: Board,
    building: Building,
    x: int,
    y: int,
    config: RulesConfig | None = None,
) -> Optional[Match]:
    board_index(x, y)  # rejects coordinates off the board
    for match in find_matches(board, building, config):
        if (x, y) in match.cells():
            return match
    return None


def buildable(board: Board, config: RulesConfig | None = None) -> Dict[Building, List[Match]]:
    available: Dict[Building, List[Match]] = {}
    for building in Building:
        matches = find_matches(board, building, config)
        if matches:
            available[building] = matches
    return available
