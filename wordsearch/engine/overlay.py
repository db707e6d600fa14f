"""Per-cell visual state kept apart from the letter grid."""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Set, Tuple

from ..core.constants import CellStatus
from ..core.models import Coordinate


class CellOverlay:
    """Status flags (highlight, found, error) keyed by coordinate."""

    def __init__(self) -> None:
        self._flags: Dict[Coordinate, Set[CellStatus]] = defaultdict(set)

    def mark(self, cells: Iterable[Tuple[int, int]], status: CellStatus) -> None:
        for row, col in cells:
            self._flags[Coordinate(row, col)].add(status)

    def replace(self, cells: Iterable[Tuple[int, int]], status: CellStatus) -> None:
        """Clear ``status`` everywhere, then set it on ``cells``."""

        self.clear(status)
        self.mark(cells, status)

    def clear(self, status: Optional[CellStatus] = None) -> None:
        if status is None:
            self._flags.clear()
            return
        for coordinate in list(self._flags):
            flags = self._flags[coordinate]
            flags.discard(status)
            if not flags:
                del self._flags[coordinate]

    def statuses(self, row: int, col: int) -> Set[CellStatus]:
        return set(self._flags.get(Coordinate(row, col), ()))

    def has(self, row: int, col: int, status: CellStatus) -> bool:
        return status in self._flags.get(Coordinate(row, col), ())

    def cells_with(self, status: CellStatus) -> List[Coordinate]:
        return sorted(coord for coord, flags in self._flags.items() if status in flags)

    def to_jsonable(self) -> Dict[str, List[List[int]]]:
        return {
            status.value: [[c.row, c.col] for c in self.cells_with(status)]
            for status in CellStatus
        }
