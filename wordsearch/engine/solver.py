"""CP-SAT joint word placement using OR-Tools.

Only used by the builder's strict mode, when random placement has left some
words out. The model picks exactly one straight-line position per word and
allows two words to share a cell only when they agree on its letter.
"""

from __future__ import annotations

import random
from collections import defaultdict
from typing import Dict, List, Optional, Sequence, Tuple

from ortools.sat.python import cp_model

from ..core.constants import PLACEMENT_DIRECTIONS, Bounds
from ..core.models import Coordinate, Placement
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)


def enumerate_candidates(size: int, word: str) -> List[Placement]:
    """Every in-bounds placement of ``word`` on an empty ``size`` grid."""

    bounds = Bounds(rows=size, cols=size)
    last = len(word) - 1
    candidates: List[Placement] = []
    for direction in PLACEMENT_DIRECTIONS:
        dr, dc = direction.step
        for row in range(size):
            for col in range(size):
                if bounds.contains(row + dr * last, col + dc * last):
                    candidates.append(Placement(word=word, start=Coordinate(row, col), direction=direction))
    return candidates


def solve_placements(
    size: int,
    words: Sequence[str],
    timeout: float = 5.0,
    seed: Optional[int] = None,
) -> Optional[List[Placement]]:
    """Place all ``words`` at once on an empty grid.

    Args:
        size: Grid side length.
        words: Words to place; order is kept in the result.
        timeout: Solver time limit in seconds.
        seed: Shuffles the candidate order and seeds the search so repeated
            calls with the same seed return the same layout.

    Returns:
        One placement per word, or None if no joint layout exists within the
        time limit.
    """
    if not words:
        return []

    rng = random.Random(seed)
    model = cp_model.CpModel()

    # ------------------------------------------------------------------
    # Step 1: One boolean per candidate placement, exactly one per word
    # ------------------------------------------------------------------
    word_choices: List[List[Tuple[Placement, cp_model.IntVar]]] = []
    for w_index, word in enumerate(words):
        candidates = enumerate_candidates(size, word)
        if not candidates:
            LOGGER.warning("CP-SAT: '%s' cannot fit in a %sx%s grid", word, size, size)
            return None
        rng.shuffle(candidates)
        choices = [
            (placement, model.new_bool_var(f"P_{w_index}_{k}"))
            for k, placement in enumerate(candidates)
        ]
        model.add_exactly_one([var for _, var in choices])
        word_choices.append(choices)

    # ------------------------------------------------------------------
    # Step 2: Cell letters, at most one letter per cell
    # ------------------------------------------------------------------
    letter_vars: Dict[Tuple[int, int, str], cp_model.IntVar] = {}
    by_cell: Dict[Tuple[int, int], List[cp_model.IntVar]] = defaultdict(list)

    def letter_var(row: int, col: int, letter: str) -> cp_model.IntVar:
        key = (row, col, letter)
        if key not in letter_vars:
            var = model.new_bool_var(f"L_{row}_{col}_{letter}")
            letter_vars[key] = var
            by_cell[(row, col)].append(var)
        return letter_vars[key]

    for choices in word_choices:
        for placement, chosen in choices:
            for (row, col), letter in zip(placement.cells, placement.word):
                model.add_implication(chosen, letter_var(row, col, letter))

    for cell_letters in by_cell.values():
        if len(cell_letters) > 1:
            model.add_at_most_one(cell_letters)

    # ------------------------------------------------------------------
    # Step 3: Solve
    # ------------------------------------------------------------------
    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = timeout
    # A single worker keeps seeded runs reproducible.
    solver.parameters.num_workers = 1
    if seed is not None:
        solver.parameters.random_seed = seed % (2**31)

    LOGGER.info(
        "CP-SAT: %d words, %d placement vars, solving (timeout=%0.1fs)...",
        len(words),
        sum(len(choices) for choices in word_choices),
        timeout,
    )
    status = solver.solve(model)
    if status not in (cp_model.OPTIMAL, cp_model.FEASIBLE):
        LOGGER.warning("CP-SAT: no layout found (status=%s)", solver.status_name(status))
        return None

    LOGGER.info("CP-SAT: layout found in %.2fs", solver.wall_time)

    # ------------------------------------------------------------------
    # Step 4: Extract solution
    # ------------------------------------------------------------------
    result: List[Placement] = []
    for choices in word_choices:
        for placement, chosen in choices:
            if solver.value(chosen):
                result.append(placement)
                break
    return result
