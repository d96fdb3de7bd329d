# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Data models for the word search generator.
"""

import string
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Optional, Sequence, Tuple


FILLER_MARKER = "X"
FILLER_LETTERS = string.ascii_uppercase


class GridKind(Enum):
    PUZZLE = "puzzle"
    SOLUTION = "solution"


class NotYetGeneratedError(Exception):
    """Raised when a grid is requested before any puzzle was generated."""

    def __init__(self, kind: GridKind):
        super().__init__(f"No {kind.value} grid has been generated yet")
        self.kind = kind


@dataclass(frozen=True)
class Grid:
    """
    Rectangular grid of single-character cells.

    Stored as an ordered sequence of fixed-length rows. Every row must have
    the same length, so the shape is always (len(rows), len(rows[0])).
    """
    rows: Tuple[Tuple[str, ...], ...] = ()

    def __post_init__(self):
        rows = tuple(tuple(row) for row in self.rows)
        if rows:
            width = len(rows[0])
            for index, row in enumerate(rows):
                if len(row) != width:
                    raise ValueError(
                        f"Row {index} has {len(row)} cells, expected {width}"
                    )
                for cell in row:
                    if not isinstance(cell, str) or len(cell) != 1:
                        raise ValueError(
                            f"Row {index} contains invalid cell {cell!r}"
                        )
        object.__setattr__(self, "rows", rows)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[str]]) -> 'Grid':
        """Build a grid from any iterable of row sequences (strings work)."""
        return cls(rows=tuple(tuple(row) for row in rows))

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.height, self.width)

    def get_cell(self, row: int, col: int) -> str:
        """Get cell at position."""
        return self.rows[row][col]

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.height and 0 <= col < self.width

    def to_lists(self) -> list:
        """Mutable copy as a list of lists."""
        return [list(row) for row in self.rows]

    def __iter__(self) -> Iterator[Tuple[str, ...]]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)


@dataclass
class GenerationSession:
    """
    Holder of the current puzzle and solution grids.

    Both grids are None until the first generation and are always replaced
    together.
    """
    puzzle: Optional[Grid] = None
    solution: Optional[Grid] = None
    words: Tuple[str, ...] = field(default_factory=tuple)
    generation_count: int = 0

    def has_puzzle(self) -> bool:
        return self.puzzle is not None and self.solution is not None

    def replace(self, words: Sequence[str], puzzle: Grid, solution: Grid):
        """Swap in a freshly built puzzle/solution pair."""
        if puzzle.shape != solution.shape:
            raise ValueError(
                f"Puzzle shape {puzzle.shape} does not match "
                f"solution shape {solution.shape}"
            )
        self.words = tuple(words)
        self.puzzle = puzzle
        self.solution = solution
        self.generation_count += 1

    def get(self, kind: GridKind) -> Optional[Grid]:
        if kind == GridKind.PUZZLE:
            return self.puzzle
        return self.solution

    def require(self, kind: GridKind) -> Grid:
        """Return the requested grid or raise NotYetGeneratedError."""
        grid = self.get(kind)
        if grid is None:
            raise NotYetGeneratedError(kind)
        return grid
