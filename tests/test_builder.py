import random
import unittest
from unittest.mock import patch

from wordsearch.core.constants import ALPHABET, Direction
from wordsearch.core.exceptions import GridBuildError
from wordsearch.core.models import Coordinate
from wordsearch.data.vocabulary import VocabularySampler
from wordsearch.engine.builder import BuilderConfig, GridBuilder, build_grid
from wordsearch.engine.tracer import read_word, trace_line
from wordsearch.engine.validator import GridValidator


def scripted(builder: GridBuilder, candidates):
    """Patch the builder so placement tries the given candidates in order."""
    return patch.object(builder, "sample_candidate", side_effect=list(candidates))


class ScriptedPlacementTests(unittest.TestCase):
    def test_cat_across_round_trips_through_tracer(self) -> None:
        builder = GridBuilder(BuilderConfig(size=3, rng_seed=1))
        with scripted(builder, [(Direction.ACROSS, 0, 0)]):
            result = builder.build(["CAT"])
        self.assertEqual(read_word(result.grid, trace_line((0, 0), (0, 2))), "CAT")
        self.assertEqual(result.placements[0].start, Coordinate(0, 0))
        self.assertEqual(result.placements[0].direction, Direction.ACROSS)

    def test_crossing_words_share_matching_letter(self) -> None:
        builder = GridBuilder(BuilderConfig(size=5, rng_seed=1))
        with scripted(builder, [(Direction.ACROSS, 0, 0), (Direction.DOWN, 0, 2)]):
            result = builder.build(["CAT", "TOP"])
        self.assertEqual(result.unplaced, [])
        self.assertEqual(read_word(result.grid, trace_line((0, 2), (2, 2))), "TOP")
        self.assertEqual(read_word(result.grid, trace_line((0, 0), (0, 2))), "CAT")

    def test_conflicting_candidate_is_retried(self) -> None:
        builder = GridBuilder(BuilderConfig(size=5, rng_seed=1))
        candidates = [
            (Direction.ACROSS, 0, 0),          # CAT
            (Direction.DOWN, 0, 0),            # DOG over C: rejected
            (Direction.DIAGONAL_DOWN_LEFT, 0, 1),  # runs off the left edge: rejected
            (Direction.DIAGONAL_DOWN_RIGHT, 1, 1),
        ]
        with scripted(builder, candidates) as sampler:
            result = builder.build(["CAT", "DOG"])
        self.assertEqual(sampler.call_count, 4)
        self.assertEqual(result.grid.letter(0, 0), "C")
        self.assertEqual(read_word(result.grid, trace_line((1, 1), (3, 3))), "DOG")

    def test_longest_word_is_placed_first(self) -> None:
        builder = GridBuilder(BuilderConfig(size=6, rng_seed=1))
        with scripted(builder, [(Direction.ACROSS, 0, 0), (Direction.ACROSS, 1, 0), (Direction.ACROSS, 2, 0)]):
            result = builder.build(["AB", "ABCDE", "ABC"])
        self.assertEqual(result.placed_words, ["ABCDE", "ABC", "AB"])
        self.assertEqual(result.grid.rows()[0][:5], "ABCDE")

    def test_can_place_rejects_out_of_bounds(self) -> None:
        builder = GridBuilder(BuilderConfig(size=4))
        board = builder._empty_board()
        self.assertFalse(builder.can_place(board, "ABCDE", 0, 0, Direction.ACROSS))
        self.assertFalse(builder.can_place(board, "AB", 0, 0, Direction.DIAGONAL_DOWN_LEFT))
        self.assertTrue(builder.can_place(board, "AB", 0, 1, Direction.DIAGONAL_DOWN_LEFT))
        self.assertTrue(builder.can_place(board, "ABCD", 0, 3, Direction.DOWN))


class UnplacedWordTests(unittest.TestCase):
    def test_oversized_word_is_skipped_silently(self) -> None:
        builder = GridBuilder(BuilderConfig(size=3, rng_seed=5))
        with self.assertLogs("wordsearch.engine.builder", level="WARNING") as logs:
            result = builder.build(["ELEPHANT", "CAT"])
        self.assertEqual(result.unplaced, ["ELEPHANT"])
        self.assertEqual(result.placed_words, ["CAT"])
        self.assertTrue(result.grid.is_complete())
        self.assertTrue(any("ELEPHANT" in line for line in logs.output))

    def test_attempt_budget_is_respected(self) -> None:
        builder = GridBuilder(BuilderConfig(size=3, max_attempts=7, rng_seed=5))
        with patch.object(builder, "sample_candidate", return_value=(Direction.ACROSS, 0, 2)) as sampler:
            result = builder.build(["CAT"])
        self.assertEqual(sampler.call_count, 7)
        self.assertEqual(result.unplaced, ["CAT"])


class RandomBuildTests(unittest.TestCase):
    def test_invalid_size_raises(self) -> None:
        with self.assertRaises(GridBuildError):
            build_grid(0, ["CAT"])

    def test_full_coverage_and_valid_placements(self) -> None:
        validator = GridValidator()
        for seed in range(25):
            with self.subTest(seed=seed):
                words = VocabularySampler(seed=seed).sample("MEDIUM", 10)
                result = GridBuilder(BuilderConfig(size=12, rng_seed=seed)).build(words)
                self.assertEqual(result.grid.size, 12)
                self.assertTrue(all(letter in ALPHABET for row in result.grid.rows() for letter in row))
                self.assertTrue(validator.validate(result.grid, result.placements).ok)
                for placement in result.placements:
                    self.assertEqual(read_word(result.grid, placement.cells), placement.word)
                self.assertEqual(
                    sorted(result.placed_words + result.unplaced),
                    sorted(words),
                )

    def test_same_seed_same_grid(self) -> None:
        words = ["CAT", "DOG", "BIRD", "HORSE"]
        first = build_grid(10, words, rng=random.Random(42))
        second = build_grid(10, words, rng=random.Random(42))
        self.assertEqual(first, second)

    def test_build_grid_returns_letter_grid_only(self) -> None:
        grid = build_grid(10, ["CAT", "DOG"], rng=random.Random(3))
        self.assertEqual(grid.size, 10)
        self.assertIsNotNone(grid.locate("CAT"))
        self.assertIsNotNone(grid.locate("DOG"))


class StrictModeTests(unittest.TestCase):
    def test_strict_mode_falls_back_to_solver(self) -> None:
        builder = GridBuilder(BuilderConfig(size=4, max_attempts=3, rng_seed=9, strict=True))
        # Every random candidate runs off the grid, so only the solver can place the words.
        with patch.object(builder, "sample_candidate", return_value=(Direction.ACROSS, 3, 3)):
            result = builder.build(["ABCD", "EFGH"])
        self.assertEqual(result.unplaced, [])
        self.assertEqual(sorted(result.placed_words), ["ABCD", "EFGH"])
        self.assertTrue(GridValidator().validate(result.grid, result.placements).ok)

    def test_strict_mode_keeps_random_result_when_solver_fails(self) -> None:
        builder = GridBuilder(BuilderConfig(size=3, max_attempts=3, rng_seed=9, strict=True))
        result = builder.build(["ELEPHANT"])
        self.assertEqual(result.unplaced, ["ELEPHANT"])
        self.assertTrue(result.grid.is_complete())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
