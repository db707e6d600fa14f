"""Word search puzzle generator and line-selection engine.

This package exposes the public API surface via:

- ``wordsearch.engine.builder``: ``build_grid`` and ``GridBuilder`` place a
  round's words into a square letter grid.
- ``wordsearch.engine.tracer``: ``trace_line`` turns a drag into the cells of
  a straight line, ``resolve_match`` checks the spelled word.
- ``wordsearch.engine.session.GameRound``: ties both together for one round.
"""

from .engine.builder import BuilderConfig, BuildResult, GridBuilder, build_grid
from .engine.grid import LetterGrid
from .engine.session import GameRound, RoundConfig
from .engine.tracer import read_word, resolve_match, trace_line
from .data.vocabulary import VocabularySampler

__all__ = [
    "BuilderConfig",
    "BuildResult",
    "GridBuilder",
    "build_grid",
    "LetterGrid",
    "GameRound",
    "RoundConfig",
    "read_word",
    "resolve_match",
    "trace_line",
    "VocabularySampler",
]

__version__ = "0.1.0"
