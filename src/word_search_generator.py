#!/usr/bin/env python3
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Interactive Word Search Generator

Menu-driven console program that:
1. Collects words by prompting or from the first line of a file
2. Builds a puzzle grid (one word per row, random letter padding)
   and a matching solution grid (padding shown as 'X')
3. Prints either grid
4. Saves either grid to a plain-text file

Usage:
    python word_search_generator.py
    python word_search_generator.py --seed 42 --log-dir ./logs
"""

import logging
import os
import sys
from typing import List, Optional, TextIO

# Add src to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from models import GenerationSession, GridKind
from commands import (
    TokenReader, MenuCommand, WordSource, CommandParseError,
    InvalidMenuOptionError, EndOfInput, parse_command, parse_word_source
)
from word_input import (
    collect_manual, collect_from_file, EmptyWordListError,
    WordFileNotFoundError, WordFileReadError
)
from puzzle_builder import PuzzleBuilder
from presenter import (
    show, write_box, write_notice, RULE, HEAVY_RULE, GENERATE_FIRST
)
from grid_writer import save, GridWriteError
from config import (
    GeneratorConfig, create_argument_parser, load_config, ConfigValidationError
)
from logging_config import setup_logging, get_logger

INVALID_OPTION = "Invalid option. Please try again."

MAIN_MENU = [
    HEAVY_RULE,
    "|      Please select an option below      |",
    RULE,
    "|    Generate a new word search----(g)    |",
    "|    Print out your word search----(p)    |",
    "|    Show the solution words-------(s)    |",
    "|    Quit the program--------------(q)    |",
    "|                                         |",
    "|SAVE OPTIONS:____________________________|",
    "|    Save word search to file------(w)    |",
    "|    Save solution to a file-------(x)    |",
    RULE,
    "",
]

SOURCE_MENU = [
    "| How would you like to select the words? |",
    "|-----------------------------------------|",
    "|    Input words manually----------(m)    |",
    "|    Read from a file--------------(f)    |",
    RULE,
]

INTRO = [
    RULE,
    "|  Welcome to my word search generator!   |",
    "|  This program will allow you to         |",
    "|  generate your own word search puzzle.  |",
]


class WordSearchGenerator:
    """
    Interactive menu controller.

    Reads one command per iteration and dispatches it against the current
    GenerationSession until 'q' or end of input.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        input_stream: Optional[TextIO] = None,
        output_stream: Optional[TextIO] = None,
        session: Optional[GenerationSession] = None,
    ):
        self.config = config or GeneratorConfig()
        self.reader = TokenReader(input_stream or sys.stdin)
        self.output = output_stream or sys.stdout
        self.session = session or GenerationSession()
        self.builder = PuzzleBuilder(seed=self.config.puzzle.seed)
        self.logger = get_logger(__name__)
        self.running = False

    def _write_lines(self, lines: List[str]):
        for line in lines:
            self.output.write(line + "\n")

    def run(self) -> int:
        """
        Run the menu loop.

        Returns:
            Process exit status
        """
        self._write_lines(INTRO)
        self.running = True

        while self.running:
            self._write_lines(MAIN_MENU)
            try:
                token = self.reader.next_token()
            except EndOfInput:
                self.logger.info("Input exhausted, leaving menu")
                break
            try:
                self.handle(token)
            except EndOfInput:
                self.logger.info("Input exhausted mid-command, leaving menu")
                break

        self.running = False
        self.logger.info(f"Session ended after {self.session.generation_count} generations")
        return 0

    def handle(self, token: str):
        """Dispatch a single menu token."""
        try:
            command = parse_command(token)
        except InvalidMenuOptionError:
            self.logger.debug(f"Invalid menu option: {token!r}")
            write_notice(self.output, INVALID_OPTION)
            return

        self.logger.debug(f"Menu command: {command.name}")

        if command == MenuCommand.GENERATE:
            self.generate()
        elif command == MenuCommand.PRINT_PUZZLE:
            show(self.session, GridKind.PUZZLE, self.output)
        elif command == MenuCommand.SHOW_SOLUTION:
            show(self.session, GridKind.SOLUTION, self.output)
        elif command == MenuCommand.SAVE_PUZZLE:
            self.save_to_file(GridKind.PUZZLE)
        elif command == MenuCommand.SAVE_SOLUTION:
            self.save_to_file(GridKind.SOLUTION)
        elif command == MenuCommand.QUIT:
            write_notice(self.output, "Exiting the program.")
            self.running = False

    def generate(self):
        """Ask for a word source, collect words and build a new puzzle."""
        self._write_lines(SOURCE_MENU)
        try:
            source = parse_word_source(self.reader.next_token())
        except InvalidMenuOptionError:
            write_notice(self.output, INVALID_OPTION)
            return

        try:
            if source == WordSource.MANUAL:
                words = collect_manual(self.reader, self.output)
            else:
                self.output.write(RULE + "\n")
                write_box(self.output, "Enter the file path:")
                words = collect_from_file(self.reader.read_word())
        except WordFileNotFoundError:
            write_notice(self.output, "File not found!")
            return
        except WordFileReadError:
            write_notice(self.output, "Unable to read the file!")
            return
        except EmptyWordListError as e:
            self.logger.warning(str(e))
            write_notice(self.output, "No words to generate from.")
            return
        except CommandParseError as e:
            self.logger.warning(str(e))
            write_notice(self.output, "Please enter a whole number.")
            return

        self.builder.generate(words, self.session)
        write_notice(self.output, "Word Search Generated!")

    def save_to_file(self, kind: GridKind):
        """Prompt for an output path and save the puzzle or solution."""
        if self.session.get(kind) is None:
            self.output.write(RULE + "\n")
            write_box(self.output, GENERATE_FIRST)
            return

        self.output.write(RULE + "\n")
        write_box(self.output, "Enter the output file path:")
        path = self.reader.read_word()

        try:
            save(self.session, kind, path)
        except GridWriteError:
            write_notice(self.output, "Unable to save the file!")
            return

        write_notice(self.output, "File saved successfully!")


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the word-search-generator command."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args)
    except ConfigValidationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    setup_logging(
        output_dir=config.logging.directory,
        log_level=config.logging.log_level,
        log_file_prefix=config.logging.log_file_prefix,
        enable_console=config.logging.enable_console,
    )
    logging.getLogger(__name__).info("Starting word search generator")

    generator = WordSearchGenerator(config)
    return generator.run()


if __name__ == "__main__":
    sys.exit(main())
