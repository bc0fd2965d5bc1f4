from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

Coord = Tuple[int, int]


class Resource(str, Enum):
    BRICK = "brick"
    GLASS = "glass"
    STONE = "stone"
    WHEAT = "wheat"
    WOOD = "wood"

    @property
    def code(self) -> str:
        return RESOURCE_CODES[self]


RESOURCE_CODES = {
    Resource.BRICK: "Bk",
    Resource.GLASS: "Gs",
    Resource.STONE: "St",
    Resource.WHEAT: "Wt",
    Resource.WOOD: "Wd",
}


class Building(str, Enum):
    WELL = "well"
    THEATER = "theater"
    TRADING_POST = "trading_post"


class TinyTownsError(str, Enum):
    """Reasons a board operation is rejected."""

    OCCUPIED = "occupied"
    OUT_OF_BOUNDS = "out_of_bounds"
    PATTERN_MISMATCH = "pattern_mismatch"


class PlacementError(ValueError):
    def __init__(self, error: TinyTownsError, coord: Coord):
        self.error = error
        self.coord = coord
        super().__init__(f"{error.value} at {coord}")


@dataclass(frozen=True)
class Cube:
    resource: Resource


@dataclass(frozen=True)
class Structure:
    building: Building


Piece = Union[Cube, Structure]
