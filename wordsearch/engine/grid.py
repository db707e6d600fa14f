"""Immutable letter grid produced by the builder."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from ..core.constants import ALPHABET, Bounds
from ..core.models import Cell, Coordinate

# Every straight direction a word can be read in, including reversed ones.
READING_STEPS: Tuple[Tuple[int, int], ...] = (
    (0, 1), (1, 0), (1, 1), (1, -1),
    (0, -1), (-1, 0), (-1, -1), (-1, 1),
)


class LetterGrid:
    """A square matrix of uppercase letters.

    Shape and letters never change after construction. Per-cell visual
    state (found, error, highlight) lives in :class:`CellOverlay`, not here.
    """

    __slots__ = ("_letters", "bounds")

    def __init__(self, letters: Sequence[Sequence[str]]) -> None:
        size = len(letters)
        if any(len(row) != size for row in letters):
            raise ValueError("LetterGrid requires a square matrix")
        self._letters: Tuple[Tuple[str, ...], ...] = tuple(tuple(row) for row in letters)
        self.bounds = Bounds(rows=size, cols=size)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "LetterGrid":
        """Build a grid from strings such as ``["CAT", "XYZ", "QRS"]``."""

        return cls([list(row.upper()) for row in rows])

    @property
    def size(self) -> int:
        return self.bounds.rows

    def letter(self, row: int, col: int) -> str:
        if row < 0 or col < 0:
            # Negative indices would silently wrap around on tuples.
            raise IndexError(f"Coordinate {(row, col)} outside grid")
        return self._letters[row][col]

    def cell(self, row: int, col: int) -> Cell:
        return Cell(letter=self.letter(row, col), row=row, col=col)

    def cells(self) -> Iterator[Cell]:
        for r, row in enumerate(self._letters):
            for c, letter in enumerate(row):
                yield Cell(letter=letter, row=r, col=c)

    def rows(self) -> List[str]:
        return ["".join(row) for row in self._letters]

    def is_complete(self) -> bool:
        """True when every cell holds a letter from the alphabet."""

        return all(cell.letter in ALPHABET and len(cell.letter) == 1 for cell in self.cells())

    def locate(self, word: str) -> Optional[Tuple[Coordinate, Tuple[int, int]]]:
        """Return the first (start, step) where ``word`` reads as a straight run."""

        word = word.upper()
        if not word:
            return None
        for cell in self.cells():
            if cell.letter != word[0]:
                continue
            for dr, dc in READING_STEPS:
                end_r = cell.row + dr * (len(word) - 1)
                end_c = cell.col + dc * (len(word) - 1)
                if not self.bounds.contains(end_r, end_c):
                    continue
                if all(
                    self._letters[cell.row + i * dr][cell.col + i * dc] == ch
                    for i, ch in enumerate(word)
                ):
                    return cell.coordinate, (dr, dc)
        return None

    def to_jsonable(self) -> List[List[str]]:
        return [list(row) for row in self._letters]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LetterGrid):
            return NotImplemented
        return self._letters == other._letters

    def __hash__(self) -> int:
        return hash(self._letters)

    def __repr__(self) -> str:
        return f"LetterGrid(size={self.size})"
