# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Command parsing for the interactive menu.

Splits the input stream into whitespace-delimited tokens and turns them into
typed values (menu commands, word sources, counts, words).
"""

from enum import Enum
from typing import List, Optional, TextIO


class CommandParseError(Exception):
    """Raised when a token cannot be read as the requested type."""
    pass


class InvalidMenuOptionError(CommandParseError):
    """Raised when a token does not name a known menu option."""

    def __init__(self, token: str):
        super().__init__(f"Invalid menu option: {token!r}")
        self.token = token


class EndOfInput(Exception):
    """Raised when the input stream is exhausted."""
    pass


class MenuCommand(Enum):
    GENERATE = "g"
    PRINT_PUZZLE = "p"
    SHOW_SOLUTION = "s"
    SAVE_PUZZLE = "w"
    SAVE_SOLUTION = "x"
    QUIT = "q"


class WordSource(Enum):
    MANUAL = "m"
    FILE = "f"


class TokenReader:
    """
    Reads whitespace-delimited tokens from a text stream.

    Lines are read lazily, so several tokens typed on one line are handed out
    by successive calls before the next line is requested.

    Usage:
        reader = TokenReader(sys.stdin)
        option = reader.read_char()
        count = reader.read_int()
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self._pending: List[str] = []

    def _fill(self) -> bool:
        while not self._pending:
            line = self.stream.readline()
            if not line:
                return False
            self._pending = line.split()
        return True

    def next_token(self) -> str:
        """Return the next token, raising EndOfInput at end of stream."""
        if not self._fill():
            raise EndOfInput("No more input")
        return self._pending.pop(0)

    def read_char(self) -> str:
        """First character of the next token."""
        return self.next_token()[0]

    def read_int(self) -> int:
        token = self.next_token()
        try:
            return int(token)
        except ValueError:
            raise CommandParseError(f"Expected a whole number, got {token!r}")

    def read_word(self) -> str:
        return self.next_token()


def _parse_option(token: str, options: type) -> Optional[Enum]:
    if not token:
        return None
    for option in options:
        if option.value == token[0]:
            return option
    return None


def parse_command(token: str) -> MenuCommand:
    """
    Map a menu token to a MenuCommand.

    Only the first character is significant, so 'generate' selects
    GENERATE just like 'g'.

    Raises:
        InvalidMenuOptionError: If the token names no command
    """
    command = _parse_option(token, MenuCommand)
    if command is None:
        raise InvalidMenuOptionError(token)
    return command


def parse_word_source(token: str) -> WordSource:
    """Map a sub-menu token to a WordSource."""
    source = _parse_option(token, WordSource)
    if source is None:
        raise InvalidMenuOptionError(token)
    return source
