"""Deterministic integrity checks for built grids."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from ..core.constants import ALPHABET
from ..core.exceptions import ValidationError
from ..core.models import Placement
from ..utils.logger import get_logger
from .grid import LetterGrid


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Runs deterministic validation over a finished grid and its placements."""

    def validate(self, grid: LetterGrid, placements: Sequence[Placement] = ()) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_full_coverage(grid)
            self._check_placements(grid, placements)
            self._check_no_duplicate_words(placements)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_full_coverage(self, grid: LetterGrid) -> None:
        for cell in grid.cells():
            if len(cell.letter) != 1 or cell.letter not in ALPHABET:
                raise ValidationError(
                    f"Invalid letter '{cell.letter}' at ({cell.row},{cell.col})"
                )

    def _check_placements(self, grid: LetterGrid, placements: Sequence[Placement]) -> None:
        for placement in placements:
            for (row, col), expected in zip(placement.cells, placement.word):
                if not grid.bounds.contains(row, col):
                    raise ValidationError(
                        f"Word '{placement.word}' runs outside the grid at ({row},{col})"
                    )
                actual = grid.letter(row, col)
                if actual != expected:
                    raise ValidationError(
                        f"Word '{placement.word}' expects '{expected}' at ({row},{col}), found '{actual}'"
                    )

    def _check_no_duplicate_words(self, placements: Sequence[Placement]) -> None:
        seen = set()
        for placement in placements:
            if placement.word in seen:
                raise ValidationError(f"Duplicate word '{placement.word}' placed twice")
            seen.add(placement.word)
