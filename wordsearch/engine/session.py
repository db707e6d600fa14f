"""One round of play: target words, grid, drag handling and score.

The round is the consumer of the builder and the tracer. It owns every piece
of mutable state a round has (unfound words, cell overlay, score and the
drag anchor) so the grid itself stays untouched after it is built.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..core.constants import CellStatus, Difficulty
from ..core.exceptions import SelectionError
from ..core.models import Coordinate, DragOutcome, Placement, Selection, TargetWord
from ..data.vocabulary import (
    SCORE_PER_WORD,
    WORDS_PER_GAME,
    VocabularySampler,
    grid_size_for,
    parse_difficulty,
    prepare_words,
)
from ..utils.logger import get_logger
from .builder import BuilderConfig, BuildResult, GridBuilder
from .grid import LetterGrid
from .overlay import CellOverlay
from .tracer import is_straight, read_word, resolve_match, trace_line


LOGGER = get_logger(__name__)


@dataclass
class RoundConfig:
    difficulty: Difficulty = Difficulty.EASY
    words_per_round: int = WORDS_PER_GAME
    grid_size: Optional[int] = None
    seed: Optional[int] = None
    strict: bool = False
    max_attempts: int = 100
    score_per_word: int = SCORE_PER_WORD

    def resolved_grid_size(self) -> int:
        return self.grid_size if self.grid_size is not None else grid_size_for(self.difficulty)


class GameRound:
    """Drives a single round from grid construction to the last found word."""

    def __init__(
        self,
        config: RoundConfig,
        sampler: Optional[VocabularySampler] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config
        self.config.difficulty = parse_difficulty(config.difficulty)
        self.rng = rng or random.Random(config.seed)
        self.sampler = sampler or VocabularySampler(rng=self.rng)
        self.grid: Optional[LetterGrid] = None
        self.build_result: Optional[BuildResult] = None
        self.targets: List[TargetWord] = []
        self.overlay = CellOverlay()
        self.score = 0
        self._anchor: Optional[Coordinate] = None
        self._current: Optional[Coordinate] = None

    # ------------------------------------------------------------------
    # Round lifecycle
    # ------------------------------------------------------------------
    def start(self, words: Optional[Sequence[str]] = None) -> LetterGrid:
        """Build a fresh grid. Without ``words`` a new set is sampled."""

        if words is None:
            words = self.sampler.sample(self.config.difficulty, self.config.words_per_round)
        else:
            words = prepare_words(words)
        builder = GridBuilder(
            BuilderConfig(
                size=self.config.resolved_grid_size(),
                max_attempts=self.config.max_attempts,
                rng_seed=self.config.seed,
                strict=self.config.strict,
            ),
            rng=self.rng,
        )
        self.build_result = builder.build(words)
        self.grid = self.build_result.grid
        self.targets = [TargetWord(word=word) for word in words]
        self.overlay = CellOverlay()
        self.score = 0
        self._anchor = None
        self._current = None
        LOGGER.info(
            "Round started: %s, %sx%s grid, %s words",
            self.config.difficulty.value,
            self.grid.size,
            self.grid.size,
            len(self.targets),
        )
        return self.grid

    def shuffle(self) -> LetterGrid:
        """Discard the round and start over with newly sampled words."""

        return self.start()

    @property
    def placements(self) -> List[Placement]:
        return list(self.build_result.placements) if self.build_result else []

    @property
    def remaining_words(self) -> List[str]:
        return [target.word for target in self.targets if not target.found]

    @property
    def found_words(self) -> List[str]:
        return [target.word for target in self.targets if target.found]

    @property
    def is_complete(self) -> bool:
        return bool(self.targets) and all(target.found for target in self.targets)

    # ------------------------------------------------------------------
    # Drag handling
    # ------------------------------------------------------------------
    def begin_drag(self, row: int, col: int) -> Selection:
        anchor = self._checked(row, col)
        self._anchor = anchor
        self._current = anchor
        return self._highlight()

    def move_drag(self, row: int, col: int) -> Selection:
        if self._anchor is None:
            raise SelectionError("move_drag called without an active drag")
        self._current = self._checked(row, col)
        return self._highlight()

    def end_drag(self) -> DragOutcome:
        if self._anchor is None or self._current is None:
            raise SelectionError("end_drag called without an active drag")
        anchor, current = self._anchor, self._current
        self._anchor = None
        self._current = None
        self.overlay.clear(CellStatus.HIGHLIGHT)

        selection = self.select(anchor, current)
        word = read_word(self._require_grid(), selection.cells)
        if not is_straight(anchor, current):
            LOGGER.debug("Discarding crooked drag %s -> %s", anchor, current)
            return DragOutcome(selection=selection, word=word)

        index = resolve_match(self.targets, word)
        if index is None:
            self.overlay.mark(selection.cells, CellStatus.ERROR)
            LOGGER.debug("No target matches '%s'", word)
            return DragOutcome(selection=selection, word=word, errored_cells=list(selection.cells))

        target = self.targets[index]
        target.found = True
        self.score += self.config.score_per_word
        self.overlay.mark(selection.cells, CellStatus.FOUND)
        LOGGER.info("Found '%s' (%s/%s)", target.word, len(self.found_words), len(self.targets))
        return DragOutcome(
            selection=selection,
            word=word,
            matched=target.word,
            score_delta=self.config.score_per_word,
        )

    def clear_errors(self) -> None:
        self.overlay.clear(CellStatus.ERROR)

    def select(self, start: Tuple[int, int], end: Tuple[int, int]) -> Selection:
        return Selection(start=Coordinate(*start), end=Coordinate(*end), cells=trace_line(start, end))

    def drag(self, start: Tuple[int, int], end: Tuple[int, int]) -> DragOutcome:
        """Convenience for a full press, move and release."""

        self.begin_drag(*start)
        self.move_drag(*end)
        return self.end_drag()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _highlight(self) -> Selection:
        assert self._anchor is not None and self._current is not None
        selection = self.select(self._anchor, self._current)
        self.overlay.replace(selection.cells, CellStatus.HIGHLIGHT)
        return selection

    def _checked(self, row: int, col: int) -> Coordinate:
        grid = self._require_grid()
        if not grid.bounds.contains(row, col):
            raise SelectionError(f"Cell {(row, col)} is outside the {grid.size}x{grid.size} grid")
        return Coordinate(row, col)

    def _require_grid(self) -> LetterGrid:
        if self.grid is None:
            raise SelectionError("Round has not been started")
        return self.grid
