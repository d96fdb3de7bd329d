# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Word input for the word search generator.

Words come either from interactive prompts or from the first line of a
text file.
"""

import logging
from pathlib import Path
from typing import List, TextIO

from commands import TokenReader
from presenter import write_box

logger = logging.getLogger(__name__)


class WordInputError(Exception):
    """Base class for word collection failures."""
    pass


class EmptyWordListError(WordInputError):
    """Raised when no words were supplied."""
    pass


class WordFileNotFoundError(WordInputError, FileNotFoundError):
    """Raised when the word-list file does not exist."""
    pass


class WordFileReadError(WordInputError):
    """Raised when the word-list file exists but cannot be read."""
    pass


def collect_manual(reader: TokenReader, output: TextIO) -> List[str]:
    """
    Prompt for a word count, then for that many words.

    Args:
        reader: Token source for the answers
        output: Stream the prompts are written to

    Returns:
        Uppercased words in the order entered

    Raises:
        CommandParseError: If the count is not a whole number
        EmptyWordListError: If the count is zero or negative
    """
    write_box(output, "How many words would you like to enter?")
    count = reader.read_int()
    if count <= 0:
        raise EmptyWordListError(f"Word count must be positive, got {count}")

    words = []
    for number in range(1, count + 1):
        write_box(output, f"Please enter word number {number}")
        words.append(reader.read_word().upper())

    logger.debug(f"Collected {len(words)} words manually")
    return words


def parse_word_line(line: str) -> List[str]:
    """Split one line of a word-list file into uppercased words."""
    line = line.rstrip("\r\n")
    return [token.upper() for token in line.split(" ") if token]


def collect_from_file(path: str) -> List[str]:
    """
    Read words from the first line of a file.

    Args:
        path: Path to the word-list file

    Returns:
        Uppercased words from the first line

    Raises:
        WordFileNotFoundError: If the file does not exist
        WordFileReadError: If the file cannot be read
        EmptyWordListError: If the first line holds no words
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            first_line = f.readline()
    except FileNotFoundError:
        logger.error(f"Word file not found: {path}")
        raise WordFileNotFoundError(f"Word file not found: {path}")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Could not read word file {path}: {e}")
        raise WordFileReadError(f"Could not read word file {path}: {e}")

    words = parse_word_line(first_line)
    if not words:
        raise EmptyWordListError(f"No words found in {path}")

    logger.debug(f"Read {len(words)} words from {path}")
    return words
