from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .board import BOARD_HEIGHT, BOARD_WIDTH
from .config import DEFAULT_RULES, RulesConfig
from .types import Building, Coord, Resource

Slot = Optional[Resource]


@dataclass(frozen=True)
class Pattern:
    """Resource layout a building needs, stored row-major inside its bounding box.

    A ``None`` slot places no requirement on the cell at that offset, which is
    how non-rectangular shapes are described.
    """

    width: int
    height: int
    slots: Tuple[Slot, ...]  # length == width * height

    def __post_init__(self) -> None:
        if len(self.slots) != self.width * self.height:
            raise ValueError(
                f"Pattern expects {self.width * self.height} slots, got {len(self.slots)}"
            )

    def __len__(self) -> int:
        return len(self.slots)

    def __iter__(self) -> Iterator[Slot]:
        return iter(self.slots)

    def __getitem__(self, index: int) -> Slot:
        return self.slots[index]

    def at(self, row: int, col: int) -> Slot:
        return self.slots[row * self.width + col]

    def rows(self) -> List[Tuple[Slot, ...]]:
        return [self.slots[r * self.width:(r + 1) * self.width] for r in range(self.height)]

    def requirements(self) -> List[Tuple[int, int, Resource]]:
        """Offsets (row, col) that must hold a given resource."""
        required: List[Tuple[int, int, Resource]] = []
        for r in range(self.height):
            for c in range(self.width):
                slot = self.at(r, c)
                if slot is not None:
                    required.append((r, c, slot))
        return required

    def as_array(self) -> np.ndarray:
        arr = np.empty((self.height, self.width), dtype=object)
        for r in range(self.height):
            for c in range(self.width):
                arr[r, c] = self.at(r, c)
        return arr

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Slot]]) -> "Pattern":
        if not rows:
            raise ValueError("Pattern needs at least one row")
        width = max(len(row) for row in rows)
        slots: List[Slot] = []
        for row in rows:
            slots.extend(row)
            slots.extend([None] * (width - len(row)))
        return cls(width=width, height=len(rows), slots=tuple(slots))

    @classmethod
    def from_array(cls, arr: np.ndarray) -> "Pattern":
        if arr.ndim != 2:
            raise ValueError(f"Pattern expects a 2D array, got shape {arr.shape}")
        height, width = arr.shape
        return cls(width=int(width), height=int(height), slots=tuple(arr.flat))

    def pretty(self) -> str:
        lines = []
        for row in self.rows():
            lines.append(" ".join(slot.code if slot is not None else ".." for slot in row))
        return "\n".join(lines)


@dataclass(frozen=True)
class Placement:
    """An oriented pattern anchored with its top-left slot at ``origin``."""

    building: Building
    pattern: Pattern
    origin: Coord
    requirements: Tuple[Tuple[Coord, Resource], ...]

    def cells(self) -> Tuple[Coord, ...]:
        return tuple(coord for coord, _ in self.requirements)


PATTERNS: Dict[Building, Pattern] = {
    # Wd St
    Building.WELL: Pattern.from_rows([[Resource.WOOD, Resource.STONE]]),
    #    St
    # Wd Gs Wd
    Building.THEATER: Pattern.from_rows(
        [
            [None, Resource.STONE, None],
            [Resource.WOOD, Resource.GLASS, Resource.WOOD],
        ]
    ),
    # St Wd
    # St Wd Bk
    Building.TRADING_POST: Pattern.from_rows(
        [
            [Resource.STONE, Resource.WOOD, None],
            [Resource.STONE, Resource.WOOD, Resource.BRICK],
        ]
    ),
}


def pattern(building: Building) -> Pattern:
    return PATTERNS[Building(building)]


def _candidate_arrays(arr: np.ndarray, config: RulesConfig) -> List[np.ndarray]:
    if not config.allow_rotations:
        candidates = [arr]
        if config.allow_mirrors:
            candidates.extend([np.fliplr(arr), np.flipud(arr), np.flipud(np.fliplr(arr))])
        return candidates

    candidates = []
    for turns in range(4):
        rotated = np.rot90(arr, turns)
        candidates.append(rotated)
        if config.allow_mirrors:
            candidates.append(np.fliplr(rotated))
    return candidates


def orientations(building: Building, config: RulesConfig | None = None) -> List[Pattern]:
    """Distinct layouts of a building's pattern, identity first."""
    if config is None:
        config = DEFAULT_RULES

    base = pattern(building)
    seen = set()
    unique: List[Pattern] = []
    for candidate in _candidate_arrays(base.as_array(), config):
        oriented = Pattern.from_array(candidate)
        if oriented in seen:
            continue
        seen.add(oriented)
        unique.append(oriented)
    return unique


def placements(building: Building, config: RulesConfig | None = None) -> List[Placement]:
    """Every orientation of the pattern at every origin where it fits on the board."""
    building = Building(building)
    result: List[Placement] = []
    for oriented in orientations(building, config):
        for x in range(BOARD_HEIGHT - oriented.height + 1):
            for y in range(BOARD_WIDTH - oriented.width + 1):
                requirements = tuple(
                    ((x + r, y + c), resource) for r, c, resource in oriented.requirements()
                )
                result.append(
                    Placement(
                        building=building,
                        pattern=oriented,
                        origin=(x, y),
                        requirements=requirements,
                    )
                )
    return result
