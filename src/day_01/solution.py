from __future__ import annotations

from itertools import combinations
from math import prod
from typing import Any, Dict, List, Optional, Sequence, Tuple

from harness import InputResolver, PuzzleId


PUZZLE = PuzzleId(year=2020, day=1)
TARGET = 2020

EXAMPLE = """1721
979
366
299
675
1456
"""

EXPECTED: Dict[str, Any] = {"part1": 514579, "part2": 241861950}


def parse(text: str) -> List[int]:
    values: List[int] = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        try:
            values.append(int(line))
        except ValueError as exc:
            raise ValueError(f"Expense report contains a non-number: {line!r}") from exc
    return values


def find_entries(values: Sequence[int], count: int, target: int = TARGET) -> Optional[Tuple[int, ...]]:
    """Return the first `count` distinct entries summing to `target`, or None."""
    for combo in combinations(values, count):
        if sum(combo) == target:
            return combo
    return None


def _product_of(values: Sequence[int], count: int) -> Optional[int]:
    entries = find_entries(values, count)
    return prod(entries) if entries is not None else None


def solve(text: str) -> Dict[str, Any]:
    values = parse(text)
    return {"part1": _product_of(values, 2), "part2": _product_of(values, 3)}


def run_once(resolver: Optional[InputResolver] = None) -> Dict[str, Any]:
    resolver = resolver or InputResolver.from_env({PUZZLE: EXAMPLE})
    data = resolver.resolve(PUZZLE)
    return {"puzzle": str(PUZZLE), "source": data.source, **solve(data.text)}
