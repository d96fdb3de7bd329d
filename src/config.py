# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Configuration module for word search generator.

Handles loading configuration from YAML files and command-line arguments,
with proper merging and validation. With no file and no arguments the
defaults reproduce the plain interactive program.
"""

import argparse
import logging
from pathlib import Path
from dataclasses import dataclass, field, asdict
from typing import Optional, List, Dict, Any

import yaml


VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


@dataclass
class PuzzleSettings:
    """Configuration for puzzle building."""
    seed: Optional[int] = None


@dataclass
class LoggingSettings:
    """Configuration for diagnostic logging."""
    directory: Optional[str] = None
    log_level: str = "INFO"
    log_file_prefix: str = "word_search_generator"
    enable_console: bool = False


@dataclass
class GeneratorConfig:
    """Complete configuration for the word search generator."""
    puzzle: PuzzleSettings = field(default_factory=PuzzleSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    def __post_init__(self):
        """Convert dicts to dataclass instances if needed."""
        if isinstance(self.puzzle, dict):
            self.puzzle = PuzzleSettings(**self.puzzle)
        if isinstance(self.logging, dict):
            self.logging = LoggingSettings(**self.logging)

    @classmethod
    def from_yaml(cls, path: str) -> 'GeneratorConfig':
        """
        Load configuration from a YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            GeneratorConfig instance

        Raises:
            ConfigValidationError: If file doesn't exist or is invalid
        """
        path = Path(path)
        if not path.exists():
            raise ConfigValidationError(f"Configuration file not found: {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(f"Invalid YAML in {path}: {e}")

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigValidationError(
                f"Configuration file must contain a YAML mapping, got {type(data)}"
            )

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> 'GeneratorConfig':
        """Create GeneratorConfig from dictionary."""
        config = cls()

        if 'puzzle' in data:
            puzzle_data = data['puzzle'] or {}
            config.puzzle = PuzzleSettings(
                seed=puzzle_data.get('seed', config.puzzle.seed),
            )

        if 'logging' in data:
            log_data = data['logging'] or {}
            config.logging = LoggingSettings(
                directory=log_data.get('directory', config.logging.directory),
                log_level=log_data.get('log_level', config.logging.log_level),
                log_file_prefix=log_data.get(
                    'log_file_prefix', config.logging.log_file_prefix
                ),
                enable_console=log_data.get(
                    'enable_console', config.logging.enable_console
                ),
            )

        return config

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> 'GeneratorConfig':
        """
        Create configuration from command-line arguments.

        Args:
            args: Parsed command-line arguments

        Returns:
            GeneratorConfig instance
        """
        config = cls()

        if getattr(args, 'seed', None) is not None:
            config.puzzle.seed = args.seed
        if getattr(args, 'log_dir', None):
            config.logging.directory = args.log_dir
        if getattr(args, 'log_level', None):
            config.logging.log_level = args.log_level
        if getattr(args, 'verbose', False):
            config.logging.enable_console = True
            if not getattr(args, 'log_level', None):
                config.logging.log_level = "DEBUG"

        return config

    @classmethod
    def merge(
        cls,
        yaml_config: 'GeneratorConfig',
        cli_config: 'GeneratorConfig'
    ) -> 'GeneratorConfig':
        """
        Merge configurations with CLI taking precedence over YAML.

        Args:
            yaml_config: Configuration loaded from YAML file
            cli_config: Configuration from command-line arguments

        Returns:
            Merged GeneratorConfig instance
        """
        merged = GeneratorConfig(
            puzzle=PuzzleSettings(**asdict(yaml_config.puzzle)),
            logging=LoggingSettings(**asdict(yaml_config.logging)),
        )

        # Override with CLI values (non-default values)
        default = cls()

        if cli_config.puzzle.seed != default.puzzle.seed:
            merged.puzzle.seed = cli_config.puzzle.seed
        if cli_config.logging.directory != default.logging.directory:
            merged.logging.directory = cli_config.logging.directory
        if cli_config.logging.log_level != default.logging.log_level:
            merged.logging.log_level = cli_config.logging.log_level
        if cli_config.logging.enable_console != default.logging.enable_console:
            merged.logging.enable_console = cli_config.logging.enable_console

        return merged

    def validate(self) -> List[str]:
        """
        Validate configuration values.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        seed = self.puzzle.seed
        if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
            errors.append(f"seed must be an integer, got {seed!r}")

        if str(self.logging.log_level).upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"Invalid log level '{self.logging.log_level}'. "
                f"Must be one of: {VALID_LOG_LEVELS}"
            )

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            'puzzle': asdict(self.puzzle),
            'logging': asdict(self.logging),
        }


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Interactive word search puzzle generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Plain interactive session
  word-search-generator

  # Reproducible filler letters
  word-search-generator --seed 42

  # YAML configuration with a debug log file
  word-search-generator --config word_search.yaml --log-dir ./logs --log-level DEBUG
"""
    )

    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        help="YAML configuration file"
    )
    parser.add_argument(
        "--seed",
        type=int,
        metavar="INT",
        help="Random seed for filler letters"
    )
    parser.add_argument(
        "--log-dir",
        metavar="PATH",
        help="Directory for the diagnostic log file"
    )
    parser.add_argument(
        "--log-level",
        choices=VALID_LOG_LEVELS,
        help="Logging level (default: INFO)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Also log to stderr"
    )

    return parser


def load_config(args: Optional[argparse.Namespace] = None) -> GeneratorConfig:
    """
    Load configuration from command-line and/or YAML file.

    Args:
        args: Parsed command-line arguments (if None, parses sys.argv)

    Returns:
        Fully resolved GeneratorConfig

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    if args is None:
        parser = create_argument_parser()
        args = parser.parse_args()

    yaml_config = None
    if getattr(args, 'config', None):
        yaml_config = GeneratorConfig.from_yaml(args.config)

    cli_config = GeneratorConfig.from_args(args)

    if yaml_config:
        config = GeneratorConfig.merge(yaml_config, cli_config)
    else:
        config = cli_config

    errors = config.validate()
    if errors:
        raise ConfigValidationError(
            "Configuration validation failed:\n" +
            "\n".join(f"  - {e}" for e in errors)
        )

    logging.getLogger(__name__).debug(f"Resolved configuration: {config.to_dict()}")
    return config
