# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Puzzle builder for the word search generator.

Each word occupies its own row. Rows shorter than the longest word are
padded with random A-Z letters in the puzzle grid and with 'X' in the
solution grid.
"""

import logging
import random
from typing import List, Optional, Sequence, Tuple

from models import Grid, GenerationSession, FILLER_MARKER, FILLER_LETTERS
from validator import validate_puzzle

logger = logging.getLogger(__name__)


def build(
    words: Sequence[str],
    rng: Optional[random.Random] = None,
) -> Tuple[Grid, Grid]:
    """
    Build the puzzle and solution grids for a word list.

    Args:
        words: Words to place, one per row
        rng: Random source for filler letters (fresh Random if None)

    Returns:
        (puzzle, solution) grids of shape len(words) x longest word
    """
    rng = rng or random.Random()
    words = [word.upper() for word in words]
    max_len = max((len(word) for word in words), default=0)

    puzzle_rows: List[List[str]] = []
    solution_rows: List[List[str]] = []
    for word in words:
        puzzle_row = []
        solution_row = []
        for j in range(max_len):
            if j < len(word):
                puzzle_row.append(word[j])
                solution_row.append(word[j])
            else:
                puzzle_row.append(rng.choice(FILLER_LETTERS))
                solution_row.append(FILLER_MARKER)
        puzzle_rows.append(puzzle_row)
        solution_rows.append(solution_row)

    return Grid.from_rows(puzzle_rows), Grid.from_rows(solution_rows)


class PuzzleBuilder:
    """
    Builds puzzles from a seeded random source and stores them in a session.
    """

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)
        self.stats = {'builds': 0, 'filler_cells': 0}

    def build(self, words: Sequence[str]) -> Tuple[Grid, Grid]:
        puzzle, solution = build(words, rng=self.rng)

        validation = validate_puzzle(words, puzzle, solution)
        for warning in validation.warnings:
            logger.warning(warning)
        if not validation.valid:
            # Only reachable through a builder bug
            raise ValueError(
                "Built puzzle is inconsistent: " + "; ".join(validation.errors)
            )

        self.stats['builds'] += 1
        self.stats['filler_cells'] += validation.stats['filler_cells']
        logger.info(
            f"Built {puzzle.height}x{puzzle.width} puzzle "
            f"({validation.stats['filler_cells']} filler cells)"
        )
        return puzzle, solution

    def generate(self, words: Sequence[str], session: GenerationSession):
        """Build a puzzle and replace both session grids with it."""
        puzzle, solution = self.build(words)
        session.replace([word.upper() for word in words], puzzle, solution)
        return puzzle, solution
