"""Word search grid construction.

Words are placed greedily, longest first, by sampling a random direction and
start cell until the word fits or the attempt budget runs out. Whatever is
left empty is filled with random letters.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..core.constants import ALPHABET, PLACEMENT_DIRECTIONS, Bounds, Direction
from ..core.exceptions import GridBuildError
from ..core.models import Coordinate, Placement
from ..utils.logger import get_logger
from .grid import LetterGrid
from .solver import solve_placements


LOGGER = get_logger(__name__)

Board = List[List[Optional[str]]]


@dataclass
class BuilderConfig:
    """Configuration values driving grid construction."""

    size: int
    max_attempts: int = 100
    rng_seed: Optional[int] = None
    strict: bool = False
    solver_timeout: float = 5.0

    def bounds(self) -> Bounds:
        return Bounds(rows=self.size, cols=self.size)


@dataclass
class BuildResult:
    grid: LetterGrid
    placements: List[Placement] = field(default_factory=list)
    unplaced: List[str] = field(default_factory=list)
    seed: Optional[int] = None

    @property
    def placed_words(self) -> List[str]:
        return [placement.word for placement in self.placements]


class GridBuilder:
    """Places a round's words into a square grid."""

    def __init__(self, config: BuilderConfig, rng: Optional[random.Random] = None) -> None:
        if config.size <= 0:
            raise GridBuildError(f"Grid size must be positive, got {config.size}")
        if config.max_attempts <= 0:
            raise GridBuildError(f"max_attempts must be positive, got {config.max_attempts}")
        self.config = config
        self.bounds = config.bounds()
        self.rng = rng or random.Random(config.rng_seed)

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def build(self, words: Sequence[str]) -> BuildResult:
        ordered = sorted((w for w in words if w), key=len, reverse=True)
        board = self._empty_board()
        placements: List[Placement] = []
        unplaced: List[str] = []

        for word in ordered:
            placement = self._place_word(board, word)
            if placement is None:
                unplaced.append(word)
            else:
                placements.append(placement)

        if unplaced and self.config.strict:
            solved = solve_placements(
                self.config.size,
                ordered,
                timeout=self.config.solver_timeout,
                seed=self.rng.randint(0, 1_000_000),
            )
            if solved is not None:
                LOGGER.info("Solver placed all %s words after random placement missed %s", len(solved), unplaced)
                board = self._empty_board()
                for placement in solved:
                    self._write(board, placement)
                placements, unplaced = solved, []

        for word in unplaced:
            LOGGER.warning(
                "Could not place '%s' in %sx%s grid after %s attempts; it will be missing",
                word,
                self.config.size,
                self.config.size,
                self.config.max_attempts,
            )

        self._fill_empty(board)
        LOGGER.info(
            "Built %sx%s grid with %s/%s words placed",
            self.config.size,
            self.config.size,
            len(placements),
            len(ordered),
        )
        return BuildResult(
            grid=LetterGrid(board),
            placements=placements,
            unplaced=unplaced,
            seed=self.config.rng_seed,
        )

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def sample_candidate(self) -> Tuple[Direction, int, int]:
        """Draw a direction and a start cell, each uniformly at random."""

        direction = self.rng.choice(PLACEMENT_DIRECTIONS)
        row = self.rng.randrange(self.config.size)
        col = self.rng.randrange(self.config.size)
        return direction, row, col

    def _place_word(self, board: Board, word: str) -> Optional[Placement]:
        for attempt in range(1, self.config.max_attempts + 1):
            direction, row, col = self.sample_candidate()
            if not self.can_place(board, word, row, col, direction):
                continue
            placement = Placement(word=word, start=Coordinate(row, col), direction=direction)
            self._write(board, placement)
            LOGGER.debug(
                "Placed '%s' at (%s,%s) %s on attempt %s",
                word,
                row,
                col,
                direction.value,
                attempt,
            )
            return placement
        return None

    def can_place(self, board: Board, word: str, row: int, col: int, direction: Direction) -> bool:
        dr, dc = direction.step
        last = len(word) - 1
        if not self.bounds.contains(row, col):
            return False
        if not self.bounds.contains(row + dr * last, col + dc * last):
            return False
        for i, ch in enumerate(word):
            existing = board[row + i * dr][col + i * dc]
            if existing is not None and existing != ch:
                return False
        return True

    # ------------------------------------------------------------------
    # Board helpers
    # ------------------------------------------------------------------
    def _empty_board(self) -> Board:
        return [[None for _ in range(self.bounds.cols)] for _ in range(self.bounds.rows)]

    @staticmethod
    def _write(board: Board, placement: Placement) -> None:
        for (row, col), ch in zip(placement.cells, placement.word):
            existing = board[row][col]
            if existing is not None and existing != ch:
                # can_place rules this out; reaching it means a caller skipped the check.
                raise GridBuildError(
                    f"Placing '{placement.word}' would overwrite '{existing}' at {(row, col)}"
                )
            board[row][col] = ch

    def _fill_empty(self, board: Board) -> None:
        filler = 0
        for row in board:
            for c, letter in enumerate(row):
                if letter is None:
                    row[c] = self.rng.choice(ALPHABET)
                    filler += 1
        LOGGER.debug("Filled %s empty cells with random letters", filler)


def build_grid(
    size: int,
    words: Sequence[str],
    rng: Optional[random.Random] = None,
    max_attempts: int = 100,
) -> LetterGrid:
    """Return a fully lettered ``size`` x ``size`` grid containing ``words``.

    Words that do not fit within ``max_attempts`` random tries are left out
    without raising. Use :class:`GridBuilder` to find out which ones.
    """

    builder = GridBuilder(BuilderConfig(size=size, max_attempts=max_attempts), rng=rng)
    return builder.build(words).grid
