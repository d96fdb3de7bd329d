# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Word Search Puzzle Validator

Checks that a puzzle/solution pair is consistent with the word list it was
built from:
1. Both grids have the same shape (one row per word, longest word wide)
2. Word letters appear in both grids at their row positions
3. Padding cells hold a letter (puzzle) or the filler marker (solution)

Word list quirks (duplicates, non-letter characters) are reported as
warnings only; they never block generation.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from models import Grid, FILLER_MARKER, FILLER_LETTERS


@dataclass
class ValidationResult:
    """Result of puzzle validation."""
    valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    stats: Dict = field(default_factory=dict)

    def __str__(self):
        status = "✅ VALID" if self.valid else "❌ INVALID"

        lines = [f"Structure: {status}"]

        if self.errors:
            lines.append("\nErrors:")
            for e in self.errors:
                lines.append(f"  ❌ {e}")

        if self.warnings:
            lines.append("\nWarnings:")
            for w in self.warnings:
                lines.append(f"  ⚠️ {w}")

        if self.stats:
            lines.append("\nStats:")
            for k, v in self.stats.items():
                lines.append(f"  {k}: {v}")

        return "\n".join(lines)


class PuzzleValidator:
    """
    Validates a built puzzle against its word list.
    """

    def __init__(self, words: Sequence[str]):
        """
        Initialize validator.

        Args:
            words: Words the puzzle was built from
        """
        self.words = [w.upper() for w in words]

    def validate(self, puzzle: Grid, solution: Grid) -> ValidationResult:
        result = ValidationResult(valid=True)

        self._check_words(result)
        self._check_shape(puzzle, solution, result)
        if not result.errors:
            self._check_cells(puzzle, solution, result)

        result.valid = len(result.errors) == 0
        return result

    def _check_words(self, result: ValidationResult):
        """Collect warnings about the word list itself."""
        duplicates = sorted(w for w, n in Counter(self.words).items() if n > 1)
        if duplicates:
            result.warnings.append(f"Duplicate words: {', '.join(duplicates)}")

        odd = [w for w in self.words if not all(c in FILLER_LETTERS for c in w)]
        if odd:
            result.warnings.append(
                f"Words with characters outside A-Z: {', '.join(odd)}"
            )

        marked = [w for w in self.words if FILLER_MARKER in w]
        if marked:
            result.warnings.append(
                f"Words containing the filler marker '{FILLER_MARKER}': "
                f"{', '.join(marked)}"
            )

    def _check_shape(self, puzzle: Grid, solution: Grid, result: ValidationResult):
        max_len = max((len(w) for w in self.words), default=0)
        expected = (len(self.words), max_len) if self.words else (0, 0)

        result.stats["rows"] = puzzle.height
        result.stats["columns"] = puzzle.width
        result.stats["word_count"] = len(self.words)

        if puzzle.shape != solution.shape:
            result.errors.append(
                f"Puzzle shape {puzzle.shape} differs from solution shape "
                f"{solution.shape}"
            )
        if puzzle.shape != expected:
            result.errors.append(
                f"Puzzle shape {puzzle.shape} does not match word list "
                f"(expected {expected})"
            )

    def _check_cells(self, puzzle: Grid, solution: Grid, result: ValidationResult):
        filler_cells = 0
        for i, word in enumerate(self.words):
            for j in range(puzzle.width):
                p = puzzle.get_cell(i, j)
                s = solution.get_cell(i, j)
                if j < len(word):
                    if p != word[j] or s != word[j]:
                        result.errors.append(
                            f"Cell ({i}, {j}) should be '{word[j]}' "
                            f"(puzzle '{p}', solution '{s}')"
                        )
                    continue

                filler_cells += 1
                if s != FILLER_MARKER:
                    result.errors.append(
                        f"Solution cell ({i}, {j}) is '{s}', "
                        f"expected filler marker '{FILLER_MARKER}'"
                    )
                if p not in FILLER_LETTERS:
                    result.errors.append(
                        f"Puzzle cell ({i}, {j}) is '{p}', not a filler letter"
                    )

        result.stats["filler_cells"] = filler_cells


def validate_puzzle(
    words: Sequence[str],
    puzzle: Grid,
    solution: Grid,
) -> ValidationResult:
    """
    Convenience function to validate a puzzle.

    Args:
        words: Words the puzzle was built from
        puzzle: Puzzle grid
        solution: Solution grid

    Returns:
        ValidationResult
    """
    validator = PuzzleValidator(words)
    return validator.validate(puzzle, solution)
