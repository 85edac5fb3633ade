from __future__ import annotations

from math import prod
from typing import Any, Dict, List, Optional, Sequence, Tuple

from harness import InputResolver, PuzzleId


PUZZLE = PuzzleId(year=2020, day=3)

EXAMPLE = """..##.......
#...#...#..
.#....#..#.
..#.#...#.#
.#...##..#.
..#.##.....
.#.#.#....#
.#........#
#.##...#...
#...##....#
.#..#...#.#
"""

EXPECTED: Dict[str, Any] = {"part1": 7, "part2": 336}

TREE = "#"
PART1_SLOPE: Tuple[int, int] = (3, 1)
PART2_SLOPES: Tuple[Tuple[int, int], ...] = ((1, 1), (3, 1), (5, 1), (7, 1), (1, 2))


class TreeMap:
    """
    Tree layout of the slope; repeats infinitely to the right.

    Rows are stored as strings; (x, y) is column, row from the top-left.
    """

    def __init__(self, rows: Sequence[str]) -> None:
        if not rows:
            raise ValueError("Map is empty")
        width = len(rows[0])
        for row in rows:
            if len(row) != width:
                raise ValueError(f"Map row has width {len(row)}, expected {width}: {row!r}")
        self._rows = list(rows)
        self._width = width

    @classmethod
    def from_text(cls, text: str) -> "TreeMap":
        return cls([line.strip() for line in text.splitlines() if line.strip()])

    @property
    def height(self) -> int:
        return len(self._rows)

    def is_tree(self, x: int, y: int) -> bool:
        return self._rows[y][x % self._width] == TREE

    def count_trees(self, right: int, down: int) -> int:
        """Trees hit moving `right`, `down` per step from the top-left until past the bottom."""
        if down <= 0:
            raise ValueError("down must be > 0")
        return sum(
            1
            for step, y in enumerate(range(0, self.height, down))
            if self.is_tree(step * right, y)
        )


def parse(text: str) -> TreeMap:
    return TreeMap.from_text(text)


def solve(text: str) -> Dict[str, Any]:
    tree_map = parse(text)
    counts: List[int] = [tree_map.count_trees(r, d) for r, d in PART2_SLOPES]
    return {"part1": tree_map.count_trees(*PART1_SLOPE), "part2": prod(counts)}


def run_once(resolver: Optional[InputResolver] = None) -> Dict[str, Any]:
    resolver = resolver or InputResolver.from_env({PUZZLE: EXAMPLE})
    data = resolver.resolve(PUZZLE)
    return {"puzzle": str(PUZZLE), "source": data.source, **solve(data.text)}
