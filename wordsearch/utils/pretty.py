"""Pretty-print helpers for word search grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, Optional

from ..core.constants import CellStatus

if TYPE_CHECKING:
    from ..engine.grid import LetterGrid
    from ..engine.overlay import CellOverlay
    from ..engine.session import GameRound


def cell_symbol(letter: str, overlay: Optional[CellOverlay], row: int, col: int) -> str:
    if overlay is None:
        return letter
    if overlay.has(row, col, CellStatus.ERROR):
        return "!"
    if overlay.has(row, col, CellStatus.FOUND):
        return letter.lower()
    return letter


def format_grid(grid: LetterGrid, overlay: Optional[CellOverlay] = None) -> str:
    """Render the grid with row/column headers.

    Found cells are shown in lowercase and errored cells as ``!``.
    """

    width = grid.size
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r in range(width):
        row_cells = [cell_symbol(grid.letter(r, c), overlay, r, c) for c in range(width)]
        row_render = " ".join(f"{symbol:>2}" for symbol in row_cells)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def pretty_print_grid(
    grid: LetterGrid,
    overlay: Optional[CellOverlay] = None,
    *,
    label: str | None = None,
    stream=None,
) -> None:
    """Print the grid in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid, overlay), file=stream)


def print_round_stats(game: GameRound, *, stream=None) -> None:
    """Print grid + word list + placement stats for a round."""

    stream = stream or sys.stdout
    if game.grid is None:
        print("(round not started)", file=stream)
        return
    print(format_grid(game.grid, game.overlay), file=stream)

    # --- Words ---
    lengths = [len(target.word) for target in game.targets]
    print(file=stream)
    print("--- Words ---", file=stream)
    for target in game.targets:
        mark = "x" if target.found else " "
        print(f"  [{mark}] {target.word}", file=stream)
    if lengths:
        dist_parts = [f"{l}:{c}" for l, c in sorted(Counter(lengths).items())]
        print(f"  Length range:  {min(lengths)}-{max(lengths)}", file=stream)
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)

    # --- Placement ---
    result = game.build_result
    if result is not None:
        directions = Counter(p.direction.value for p in result.placements)
        print(file=stream)
        print("--- Placement ---", file=stream)
        print(f"  Placed:        {len(result.placements)}/{len(game.targets)}", file=stream)
        for name, count in sorted(directions.items()):
            print(f"  {name:<20} {count}", file=stream)
        if result.unplaced:
            print(f"  Missing:       {', '.join(result.unplaced)}", file=stream)

    print(file=stream)
    print(f"Score: {game.score}", file=stream)
    if game.config.seed is not None:
        print(f"Seed: {game.config.seed}", file=stream)
