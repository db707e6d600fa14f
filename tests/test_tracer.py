import unittest

from wordsearch.core.models import Coordinate, TargetWord
from wordsearch.engine.grid import LetterGrid
from wordsearch.engine.tracer import is_straight, line_step, read_word, resolve_match, trace_line


class TraceLineTests(unittest.TestCase):
    def test_horizontal_left_to_right(self) -> None:
        self.assertEqual(
            trace_line((0, 0), (0, 3)),
            ((0, 0), (0, 1), (0, 2), (0, 3)),
        )

    def test_diagonal_up_left(self) -> None:
        self.assertEqual(trace_line((2, 2), (0, 0)), ((2, 2), (1, 1), (0, 0)))

    def test_non_collinear_collapses_to_anchor(self) -> None:
        self.assertEqual(trace_line((1, 1), (3, 0)), ((1, 1),))

    def test_all_eight_directions(self) -> None:
        cases = {
            (2, 4): [(2, 2), (2, 3), (2, 4)],
            (2, 0): [(2, 2), (2, 1), (2, 0)],
            (4, 2): [(2, 2), (3, 2), (4, 2)],
            (0, 2): [(2, 2), (1, 2), (0, 2)],
            (4, 4): [(2, 2), (3, 3), (4, 4)],
            (4, 0): [(2, 2), (3, 1), (4, 0)],
            (0, 4): [(2, 2), (1, 3), (0, 4)],
            (0, 0): [(2, 2), (1, 1), (0, 0)],
        }
        for end, expected in cases.items():
            with self.subTest(end=end):
                self.assertEqual(list(trace_line((2, 2), end)), expected)

    def test_same_cell_is_single_cell(self) -> None:
        self.assertEqual(trace_line((3, 3), (3, 3)), ((3, 3),))

    def test_length_is_max_delta_plus_one(self) -> None:
        self.assertEqual(len(trace_line((0, 5), (5, 0))), 6)
        self.assertEqual(len(trace_line((7, 1), (7, 9))), 9)

    def test_returns_coordinates(self) -> None:
        cells = trace_line((0, 0), (1, 1))
        self.assertIsInstance(cells[0], Coordinate)
        self.assertEqual(cells[1].row, 1)
        self.assertEqual(cells[1].col, 1)

    def test_repeated_calls_agree(self) -> None:
        first = trace_line((4, 1), (1, 4))
        for _ in range(5):
            self.assertEqual(trace_line((4, 1), (1, 4)), first)


class LineStepTests(unittest.TestCase):
    def test_steps(self) -> None:
        self.assertEqual(line_step((0, 0), (0, 5)), (0, 1))
        self.assertEqual(line_step((5, 0), (0, 0)), (-1, 0))
        self.assertEqual(line_step((0, 3), (3, 0)), (1, -1))
        self.assertEqual(line_step((1, 1), (1, 1)), (0, 0))
        self.assertIsNone(line_step((0, 0), (2, 1)))

    def test_is_straight(self) -> None:
        self.assertTrue(is_straight((0, 0), (4, 4)))
        self.assertFalse(is_straight((0, 0), (1, 3)))


class ReadWordTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = LetterGrid.from_rows(["CAT", "XOY", "ZQG"])

    def test_round_trip_horizontal(self) -> None:
        self.assertEqual(read_word(self.grid, trace_line((0, 0), (0, 2))), "CAT")

    def test_reverse_reading_is_literal(self) -> None:
        self.assertEqual(read_word(self.grid, trace_line((0, 2), (0, 0))), "TAC")

    def test_diagonal(self) -> None:
        self.assertEqual(read_word(self.grid, trace_line((0, 0), (2, 2))), "COG")

    def test_out_of_bounds_raises(self) -> None:
        with self.assertRaises(IndexError):
            read_word(self.grid, trace_line((0, 0), (0, 3)))
        with self.assertRaises(IndexError):
            read_word(self.grid, trace_line((0, 0), (-1, 0)))


class ResolveMatchTests(unittest.TestCase):
    def test_first_unfound_match_wins(self) -> None:
        targets = [TargetWord("DOG"), TargetWord("CAT"), TargetWord("CAT")]
        self.assertEqual(resolve_match(targets, "CAT"), 1)
        targets[1].found = True
        self.assertEqual(resolve_match(targets, "CAT"), 2)
        targets[2].found = True
        self.assertIsNone(resolve_match(targets, "CAT"))

    def test_no_reverse_normalization(self) -> None:
        targets = [TargetWord("CAT")]
        self.assertIsNone(resolve_match(targets, "TAC"))

    def test_palindrome_matches_either_way(self) -> None:
        targets = [TargetWord("LEVEL")]
        self.assertEqual(resolve_match(targets, "LEVEL"[::-1]), 0)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
