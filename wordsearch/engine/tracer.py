"""Straight-line selection tracing.

A drag from an anchor cell to the current cell selects every cell on the
horizontal, vertical or 45 degree diagonal line between them. Both live
highlighting and the final word lookup go through :func:`trace_line`, so the
two can never disagree about which cells a drag covers.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple

from ..core.models import Coordinate, TargetWord
from .grid import LetterGrid


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def line_step(start: Tuple[int, int], end: Tuple[int, int]) -> Optional[Tuple[int, int]]:
    """Return the unit step from ``start`` towards ``end``.

    ``None`` means the two points are not on a shared row, column or
    diagonal. Identical points give ``(0, 0)``.
    """

    d_row = end[0] - start[0]
    d_col = end[1] - start[1]
    if d_row == 0 and d_col == 0:
        return (0, 0)
    if d_row == 0:
        return (0, _sign(d_col))
    if d_col == 0:
        return (_sign(d_row), 0)
    if abs(d_row) == abs(d_col):
        return (_sign(d_row), _sign(d_col))
    return None


def is_straight(start: Tuple[int, int], end: Tuple[int, int]) -> bool:
    return line_step(start, end) is not None


def trace_line(start: Tuple[int, int], end: Tuple[int, int]) -> Tuple[Coordinate, ...]:
    """Cells from ``start`` to ``end`` inclusive, in drag order.

    A drag that is not a straight line collapses to the anchor cell alone.
    Bounds are not checked here; callers pass coordinates taken from the grid.
    """

    anchor = Coordinate(*start)
    step = line_step(start, end)
    if step is None:
        return (anchor,)
    steps = max(abs(end[0] - start[0]), abs(end[1] - start[1]))
    dr, dc = step
    return tuple(Coordinate(anchor.row + i * dr, anchor.col + i * dc) for i in range(steps + 1))


def read_word(grid: LetterGrid, cells: Iterable[Tuple[int, int]]) -> str:
    """Concatenate the letters under ``cells`` in the given order."""

    return "".join(grid.letter(row, col) for row, col in cells)


def resolve_match(targets: Sequence[TargetWord], selected_word: str) -> Optional[int]:
    """Index of the first unfound target spelled exactly ``selected_word``.

    Order of ``targets`` decides ties. Found targets are never matched again,
    and a backwards reading only matches a target spelled that way.
    """

    for index, target in enumerate(targets):
        if not target.found and target.word == selected_word:
            return index
    return None
