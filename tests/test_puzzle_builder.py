# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""Unit tests for puzzle_builder, models and validator modules."""

import os
import random
import string
import sys
import unittest

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from models import Grid, GenerationSession, GridKind, NotYetGeneratedError
from puzzle_builder import build, PuzzleBuilder
from validator import validate_puzzle


class TestBuild(unittest.TestCase):
    """Tests for the build function."""

    def test_words_without_padding(self):
        """Test equal-length words need no filler."""
        puzzle, solution = build(["cat", "dog"])

        self.assertEqual(puzzle.shape, (2, 3))
        self.assertEqual(solution.shape, (2, 3))
        self.assertEqual(solution.to_lists(), [['C', 'A', 'T'], ['D', 'O', 'G']])
        self.assertEqual(puzzle.to_lists(), [['C', 'A', 'T'], ['D', 'O', 'G']])

    def test_short_word_is_padded(self):
        """Test shorter rows get the filler marker in the solution."""
        puzzle, solution = build(["a", "bb"])

        self.assertEqual(solution.to_lists(), [['A', 'X'], ['B', 'B']])
        self.assertEqual(puzzle.get_cell(0, 0), 'A')
        self.assertIn(puzzle.get_cell(0, 1), string.ascii_uppercase)
        self.assertEqual(puzzle.rows[1], ('B', 'B'))

    def test_grid_properties_for_random_words(self):
        """Test shape and cell rules hold for arbitrary word lists."""
        rng = random.Random(1234)
        for _ in range(25):
            words = [
                "".join(rng.choice(string.ascii_lowercase)
                        for _ in range(rng.randint(1, 12)))
                for _ in range(rng.randint(1, 10))
            ]
            puzzle, solution = build(words, rng=rng)
            max_len = max(len(w) for w in words)

            self.assertEqual(puzzle.shape, (len(words), max_len))
            self.assertEqual(solution.shape, puzzle.shape)

            for i, word in enumerate(words):
                for j in range(max_len):
                    if j < len(word):
                        self.assertEqual(puzzle.get_cell(i, j), word[j].upper())
                        self.assertEqual(solution.get_cell(i, j), word[j].upper())
                    else:
                        self.assertEqual(solution.get_cell(i, j), 'X')
                        self.assertIn(puzzle.get_cell(i, j), string.ascii_uppercase)

    def test_empty_word_list(self):
        """Test an empty word list builds empty grids."""
        puzzle, solution = build([])

        self.assertEqual(puzzle.shape, (0, 0))
        self.assertEqual(solution.shape, (0, 0))

    def test_filler_is_fixed(self):
        """Test padding is always 'X' in the solution and A-Z in the puzzle."""
        puzzle, solution = build(["abc", "d"], rng=random.Random(2))

        self.assertEqual(solution.rows[1], ('D', 'X', 'X'))
        for cell in puzzle.rows[1][1:]:
            self.assertIn(cell, string.ascii_uppercase)


class TestPuzzleBuilder(unittest.TestCase):
    """Tests for PuzzleBuilder class."""

    def test_seed_is_reproducible(self):
        """Test the same seed gives the same filler letters."""
        words = ["alpha", "be", "c"]

        first = PuzzleBuilder(seed=7).build(words)
        second = PuzzleBuilder(seed=7).build(words)

        self.assertEqual(first, second)

    def test_generate_replaces_session(self):
        """Test generate stores both grids together."""
        session = GenerationSession()
        builder = PuzzleBuilder(seed=1)

        builder.generate(["one", "three"], session)
        first_solution = session.solution
        builder.generate(["cat", "dog"], session)

        self.assertEqual(session.generation_count, 2)
        self.assertEqual(session.words, ("CAT", "DOG"))
        self.assertIsNot(session.solution, first_solution)
        self.assertEqual(session.puzzle.shape, session.solution.shape)

    def test_stats(self):
        """Test builder counts builds and filler cells."""
        builder = PuzzleBuilder(seed=3)
        builder.build(["a", "bb", "ccc"])

        self.assertEqual(builder.stats['builds'], 1)
        self.assertEqual(builder.stats['filler_cells'], 3)


class TestGridModel(unittest.TestCase):
    """Tests for Grid and GenerationSession."""

    def test_ragged_rows_rejected(self):
        """Test rows of different length raise ValueError."""
        with self.assertRaises(ValueError):
            Grid.from_rows(["AB", "C"])

    def test_multi_character_cell_rejected(self):
        with self.assertRaises(ValueError):
            Grid.from_rows([["AB"]])

    def test_from_strings(self):
        grid = Grid.from_rows(["AB", "CD"])

        self.assertEqual(grid.shape, (2, 2))
        self.assertEqual(grid.get_cell(1, 0), 'C')
        self.assertTrue(grid.is_valid_position(1, 1))
        self.assertFalse(grid.is_valid_position(2, 0))

    def test_require_before_generation(self):
        """Test require raises until a puzzle exists."""
        session = GenerationSession()

        self.assertFalse(session.has_puzzle())
        with self.assertRaises(NotYetGeneratedError):
            session.require(GridKind.SOLUTION)

    def test_replace_rejects_mismatched_shapes(self):
        session = GenerationSession()

        with self.assertRaises(ValueError):
            session.replace(
                ["AB"], Grid.from_rows(["AB"]), Grid.from_rows(["AB", "XX"])
            )
        self.assertIsNone(session.puzzle)


class TestValidator(unittest.TestCase):
    """Tests for puzzle validation."""

    def test_valid_puzzle(self):
        words = ["ant", "b"]
        puzzle, solution = build(words)

        result = validate_puzzle(words, puzzle, solution)

        self.assertTrue(result.valid)
        self.assertEqual(result.stats['filler_cells'], 2)
        self.assertEqual(result.stats['rows'], 2)
        self.assertEqual(result.stats['columns'], 3)

    def test_shape_mismatch(self):
        puzzle = Grid.from_rows(["AB"])
        solution = Grid.from_rows(["AB", "XX"])

        result = validate_puzzle(["AB"], puzzle, solution)

        self.assertFalse(result.valid)
        self.assertTrue(any("shape" in e for e in result.errors))

    def test_bad_solution_padding(self):
        puzzle = Grid.from_rows(["AB", "CQ"])
        solution = Grid.from_rows(["AB", "CZ"])

        result = validate_puzzle(["AB", "C"], puzzle, solution)

        self.assertFalse(result.valid)
        self.assertTrue(any("filler marker" in e for e in result.errors))

    def test_word_list_warnings(self):
        """Test duplicates and odd characters only produce warnings."""
        words = ["cat", "cat", "c-3"]
        puzzle, solution = build(words)

        result = validate_puzzle(words, puzzle, solution)

        self.assertTrue(result.valid)
        self.assertTrue(any("Duplicate" in w for w in result.warnings))
        self.assertTrue(any("outside A-Z" in w for w in result.warnings))
        self.assertIn("VALID", str(result))


if __name__ == '__main__':
    unittest.main()
