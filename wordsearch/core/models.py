"""Data models supporting the word search engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Tuple

from .constants import Direction


class Coordinate(NamedTuple):
    """A (row, col) position on the grid."""

    row: int
    col: int


@dataclass(frozen=True)
class Cell:
    """A single lettered grid cell. Identity is its coordinate."""

    letter: str
    row: int
    col: int

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.row, self.col)


@dataclass(frozen=True)
class Placement:
    """A word written from ``start`` along ``direction``."""

    word: str
    start: Coordinate
    direction: Direction
    _cells: Optional[Tuple[Coordinate, ...]] = field(default=None, repr=False, compare=False)

    @property
    def length(self) -> int:
        return len(self.word)

    @property
    def cells(self) -> Tuple[Coordinate, ...]:
        if self._cells is None:
            dr, dc = self.direction.step
            cells = tuple(
                Coordinate(self.start.row + i * dr, self.start.col + i * dc)
                for i in range(self.length)
            )
            object.__setattr__(self, "_cells", cells)
        return self._cells  # type: ignore[return-value]

    @property
    def end(self) -> Coordinate:
        return self.cells[-1]


@dataclass
class TargetWord:
    """A word the player still has to find, or already found."""

    word: str
    found: bool = False


@dataclass(frozen=True)
class Selection:
    """A resolved drag: anchor, release point and the traced cells."""

    start: Coordinate
    end: Coordinate
    cells: Tuple[Coordinate, ...]

    @property
    def is_single_cell(self) -> bool:
        return len(self.cells) == 1


@dataclass
class DragOutcome:
    """What the round reports back once a drag is released."""

    selection: Selection
    word: str
    matched: Optional[str] = None
    score_delta: int = 0
    errored_cells: List[Coordinate] = field(default_factory=list)

    @property
    def is_match(self) -> bool:
        return self.matched is not None
