"""CLI entrypoint for the word search generator."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List, Tuple

from wordsearch.core.constants import Difficulty
from wordsearch.core.exceptions import WordSearchError
from wordsearch.data.vocabulary import WORDS_PER_GAME, load_word_pool
from wordsearch.engine.session import GameRound, RoundConfig
from wordsearch.engine.validator import GridValidator
from wordsearch.utils.logger import configure_logging, get_logger, level_from_name
from wordsearch.utils.pretty import print_round_stats


def parse_drag(value: str) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    """Parse ``R,C:R,C`` into a (start, end) pair of coordinates."""
    try:
        start_text, end_text = value.split(":")
        start_row, start_col = (int(part) for part in start_text.split(","))
        end_row, end_col = (int(part) for part in end_text.split(","))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"expected ROW,COL:ROW,COL, got '{value}'"
        ) from exc
    return (start_row, start_col), (end_row, end_col)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate word search grids and resolve straight-line selections",
    )
    parser.add_argument(
        "--difficulty",
        type=str,
        choices=[d.value for d in Difficulty],
        default=Difficulty.EASY.value,
        help="Difficulty tier; picks the grid size and word pool",
    )
    parser.add_argument("--size", type=int, help="Override the grid size for the tier")
    parser.add_argument(
        "--count",
        type=int,
        default=WORDS_PER_GAME,
        help=f"Words per round when sampling from the pool (default {WORDS_PER_GAME})",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Explicit round words instead of sampling",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one word per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--max-attempts",
        type=int,
        default=100,
        help="Random placement attempts per word before giving up",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Ask the CP-SAT solver for a full layout when random placement misses words",
    )
    parser.add_argument(
        "--select",
        type=parse_drag,
        action="append",
        default=[],
        metavar="R,C:R,C",
        help="Resolve a drag from one cell to another (repeatable)",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of the text grid")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def round_payload(game: GameRound, drags: List[Dict[str, Any]]) -> Dict[str, Any]:
    assert game.grid is not None
    return {
        "size": game.grid.size,
        "seed": game.config.seed,
        "difficulty": game.config.difficulty.value,
        "grid": game.grid.to_jsonable(),
        "words": [{"word": t.word, "found": t.found} for t in game.targets],
        "placements": [
            {
                "word": p.word,
                "start": [p.start.row, p.start.col],
                "direction": p.direction.value,
            }
            for p in game.placements
        ],
        "unplaced": list(game.build_result.unplaced) if game.build_result else [],
        "selections": drags,
        "overlay": game.overlay.to_jsonable(),
        "score": game.score,
    }


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level_from_name(args.log_level))

    if args.size is not None and args.size <= 0:
        parser.error("--size must be positive")

    user_words: List[str] = []
    if args.words:
        user_words.extend(args.words)
    if args.words_file:
        try:
            user_words.extend(load_word_pool(args.words_file))
        except WordSearchError as exc:
            parser.error(str(exc))

    config = RoundConfig(
        difficulty=Difficulty(args.difficulty),
        words_per_round=args.count,
        grid_size=args.size,
        seed=args.seed,
        strict=args.strict,
        max_attempts=args.max_attempts,
    )
    game = GameRound(config)
    try:
        game.start(user_words or None)
    except WordSearchError as exc:
        parser.error(str(exc))

    assert game.grid is not None and game.build_result is not None
    validation = GridValidator().validate(game.grid, game.build_result.placements)
    if not validation.ok:
        get_logger(__name__).error("Generated grid failed validation: %s", validation.messages)

    drags: List[Dict[str, Any]] = []
    for start, end in args.select:
        try:
            outcome = game.drag(start, end)
        except WordSearchError as exc:
            parser.error(str(exc))
        drags.append(
            {
                "start": list(start),
                "end": list(end),
                "word": outcome.word,
                "matched": outcome.matched,
            }
        )

    payload = round_payload(game, drags)
    output_text = json.dumps(payload, ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    if args.json:
        print(output_text)
    elif not args.output:
        print_round_stats(game)
        for drag in drags:
            verdict = f"matched {drag['matched']}" if drag["matched"] else "no match"
            print(f"{tuple(drag['start'])} -> {tuple(drag['end'])}: {drag['word']} ({verdict})")


if __name__ == "__main__":  # pragma: no cover
    main()
