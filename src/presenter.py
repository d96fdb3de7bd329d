# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Console rendering for word search grids and menu banners.
"""

import sys
from typing import Optional, TextIO

from models import Grid, GenerationSession, GridKind

BOX_WIDTH = 41
RULE = "|" + "_" * BOX_WIDTH + "|"
HEAVY_RULE = "|" + "=" * BOX_WIDTH + "|"
GENERATE_FIRST = "Please generate a word search first"


def box_line(text: str = "") -> str:
    """Center text inside the menu box borders."""
    return "|" + text.center(BOX_WIDTH) + "|"


def write_box(output: TextIO, *lines: str, rule: bool = False):
    """Write one or more boxed lines, optionally closed by a rule."""
    for line in lines:
        output.write(box_line(line) + "\n")
    if rule:
        output.write(RULE + "\n")


def write_notice(output: TextIO, message: str):
    """Write a boxed notice followed by a closing rule."""
    write_box(output, message, rule=True)


def render(grid: Grid) -> str:
    """
    Render a grid as text.

    Each cell is followed by a single space and each row ends with a
    newline. An empty grid renders as an empty string.
    """
    return "".join(
        "".join(f"{cell} " for cell in row) + "\n"
        for row in grid
    )


def show(
    session: GenerationSession,
    kind: GridKind,
    output: Optional[TextIO] = None,
) -> bool:
    """
    Write the requested grid, or the generate-first notice if it is absent.

    Returns:
        True if a grid was written
    """
    output = output or sys.stdout
    grid = session.get(kind)
    if grid is None:
        output.write(RULE + "\n")
        write_box(output, GENERATE_FIRST)
        return False
    output.write(render(grid))
    return True


def show_puzzle(session: GenerationSession, output: Optional[TextIO] = None) -> bool:
    return show(session, GridKind.PUZZLE, output)


def show_solution(session: GenerationSession, output: Optional[TextIO] = None) -> bool:
    return show(session, GridKind.SOLUTION, output)
