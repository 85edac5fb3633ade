"""
Command-line entry points for the puzzle programs.

Modules:
- registry: day number to puzzle program lookup
- cli: `aoc2020 run DAY` and `aoc2020 check`
"""

__all__ = [
    "cli",
    "registry",
]
