"""Shared constants and enumerations for the word search engine."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import Tuple


ALPHABET = string.ascii_uppercase


class Difficulty(str, Enum):
    """Round difficulty tiers."""

    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


class Direction(str, Enum):
    """Directions a word may be written in when it is placed."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"
    DIAGONAL_DOWN_RIGHT = "DIAGONAL_DOWN_RIGHT"
    DIAGONAL_DOWN_LEFT = "DIAGONAL_DOWN_LEFT"

    @property
    def step(self) -> Tuple[int, int]:
        return PLACEMENT_STEPS[self]


class CellStatus(str, Enum):
    """Visual states the consumer toggles on top of the letter grid."""

    HIGHLIGHT = "HIGHLIGHT"
    FOUND = "FOUND"
    ERROR = "ERROR"


PLACEMENT_STEPS = {
    Direction.ACROSS: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.DIAGONAL_DOWN_RIGHT: (1, 1),
    Direction.DIAGONAL_DOWN_LEFT: (1, -1),
}
PLACEMENT_DIRECTIONS: Tuple[Direction, ...] = tuple(PLACEMENT_STEPS)


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
