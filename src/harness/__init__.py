"""
Input harness shared by the Advent of Code 2020 puzzle programs.

Modules:
- aoc: adventofcode.com input client (session cookie auth)
- cache: on-disk per-puzzle input cache with atomic writes
- config: environment-driven settings
- errors: harness error hierarchy
- log: console logging setup
- models: puzzle identifier and resolved input models
- resolver: example-or-remote input resolution
- session: session credential file lookup
"""

from .errors import ConfigError, HarnessError, MissingExampleError, RetrievalError
from .models import PuzzleId, PuzzleInput
from .resolver import InputResolver

__all__ = [
    "ConfigError",
    "HarnessError",
    "InputResolver",
    "MissingExampleError",
    "PuzzleId",
    "PuzzleInput",
    "RetrievalError",
]
