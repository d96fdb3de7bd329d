#!/usr/bin/env python3
# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Setup script for word search generator package.
"""

from setuptools import setup
from pathlib import Path

# Read the README file
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text()

setup(
    name="word-search-generator",
    version="1.0.0",
    author="TrailLensCo",
    description="Interactive word search puzzle generator with plain-text export",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/TrailLensCo/wordsearchgenerator",
    package_dir={"": "src"},
    py_modules=[
        "commands",
        "config",
        "grid_writer",
        "logging_config",
        "models",
        "presenter",
        "puzzle_builder",
        "validator",
        "word_input",
        "word_search_generator",
    ],
    python_requires=">=3.10",
    install_requires=[
        "pyyaml>=6.0.2",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "black>=23.0.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "word-search-generator=word_search_generator:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: End Users/Desktop",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Topic :: Games/Entertainment :: Puzzle Games",
    ],
)
