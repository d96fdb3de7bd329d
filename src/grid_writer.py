# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Plain-text persistence for word search grids.

File format: one grid row per line, every cell followed by a single space.
There is no header; the shape is the line count and the cells per line.
"""

import logging
import os
import stat
import tempfile
from pathlib import Path

from models import Grid, GenerationSession, GridKind
from presenter import render

logger = logging.getLogger(__name__)


def _target_mode(target: Path) -> int:
    """Permission bits for the saved file: the existing file's, else 0666 less umask."""
    try:
        return stat.S_IMODE(os.stat(target).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


class GridWriteError(Exception):
    """Raised when a grid cannot be written to the requested path."""
    pass


class GridReadError(Exception):
    """Raised when a saved grid file cannot be read back."""
    pass


def save_grid(path: str, grid: Grid) -> str:
    """
    Write a grid to a file, replacing any existing content.

    The text goes to a temporary file next to the destination which is then
    renamed over it, so a failed write leaves an existing file intact. A
    symlinked destination is resolved and its target replaced; the existing
    file's permission bits are kept. Other hard links to the old file keep
    the old content.

    Args:
        path: Output file path (its directory must already exist)
        grid: Grid to write

    Returns:
        Path to saved file

    Raises:
        GridWriteError: If the path cannot be written
    """
    path = Path(path)
    content = render(grid)
    tmp_path = None
    try:
        target = Path(os.path.realpath(path))
        fd, tmp_path = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
        )
        with os.fdopen(fd, 'w', encoding='utf-8', newline='\n') as f:
            f.write(content)
        # mkstemp creates files as 0600
        os.chmod(tmp_path, _target_mode(target))
        os.replace(tmp_path, target)
    except (OSError, ValueError) as e:
        if tmp_path and os.path.exists(tmp_path):
            os.unlink(tmp_path)
        logger.error(f"Could not save grid to {path}: {e}")
        raise GridWriteError(f"Could not save grid to {path}: {e}")

    logger.info(f"Saved {grid.height}x{grid.width} grid to {path}")
    return str(path)


def save(session: GenerationSession, kind: GridKind, path: str) -> str:
    """
    Save the session's puzzle or solution grid.

    Raises:
        NotYetGeneratedError: If no grid has been generated, before any
            file is touched
        GridWriteError: If the path cannot be written
    """
    grid = session.require(kind)
    return save_grid(path, grid)


def parse_grid(text: str) -> Grid:
    """
    Parse grid text in the saved format back into a Grid.

    Rows are separated by "\n" only; any other character, including other
    Unicode line breaks, is a cell.

    Raises:
        GridReadError: If a line is not cell/space pairs or rows are ragged
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    rows = []
    for number, line in enumerate(lines, start=1):
        if len(line) % 2 != 0 or any(sep != " " for sep in line[1::2]):
            raise GridReadError(f"Line {number} is not in 'cell space' format")
        rows.append(line[0::2])

    try:
        return Grid.from_rows(rows)
    except ValueError as e:
        raise GridReadError(f"Invalid grid: {e}")


def read_grid(path: str) -> Grid:
    """
    Load a grid previously written by save_grid.

    Raises:
        GridReadError: If the file is missing, unreadable or malformed
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise GridReadError(f"Could not read grid file {path}: {e}")

    return parse_grid(text)
