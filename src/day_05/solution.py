from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from harness import InputResolver, PuzzleId


PUZZLE = PuzzleId(year=2020, day=5)

EXAMPLE = """FBFBBFFRLR
BFFFBBFRRR
FFFBBBFRRR
BBFFBBFRLL
"""

# The example passes are not neighbours, so there is no free seat to find
EXPECTED: Dict[str, Any] = {"part1": 820, "part2": None}

_PASS_RE = re.compile(r"^[FB]{7}[LR]{3}$")
_TO_BITS = str.maketrans("FBLR", "0101")


@dataclass(frozen=True, order=True)
class Seat:
    """A decoded boarding pass. Ordering follows the seat id."""

    id: int
    row: int
    column: int

    @classmethod
    def from_pass(cls, code: str) -> "Seat":
        """Decode a 10-letter boarding pass; F/L select the lower half, B/R the upper."""
        code = code.strip()
        if not _PASS_RE.match(code):
            raise ValueError(f"Malformed boarding pass: {code!r}")
        seat_id = int(code.translate(_TO_BITS), 2)
        return cls(id=seat_id, row=seat_id >> 3, column=seat_id & 0b111)


def parse(text: str) -> List[Seat]:
    return [Seat.from_pass(line) for line in text.splitlines() if line.strip()]


def find_free_seat(seats: Sequence[Seat]) -> Optional[int]:
    """Return the id missing between two taken seats whose ids differ by exactly 2."""
    ids = sorted(s.id for s in seats)
    for prev, curr in zip(ids, ids[1:]):
        if curr - prev == 2:
            return prev + 1
    return None


def solve(text: str) -> Dict[str, Any]:
    seats = parse(text)
    return {
        "part1": max(s.id for s in seats) if seats else None,
        "part2": find_free_seat(seats),
    }


def run_once(resolver: Optional[InputResolver] = None) -> Dict[str, Any]:
    resolver = resolver or InputResolver.from_env({PUZZLE: EXAMPLE})
    data = resolver.resolve(PUZZLE)
    return {"puzzle": str(PUZZLE), "source": data.source, **solve(data.text)}
