from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from harness import InputResolver, PuzzleId


PUZZLE = PuzzleId(year=2020, day=2)

EXAMPLE = """1-3 a: abcde
1-3 b: cdefg
2-9 c: ccccccccc
"""

EXPECTED: Dict[str, Any] = {"part1": 2, "part2": 1}

_ENTRY_RE = re.compile(r"^\s*(\d+)-(\d+)\s+([a-zA-Z]):\s*(\S+)\s*$")


@dataclass(frozen=True)
class PasswordEntry:
    """One line of the password database: a policy and the password it guards.

    Attributes
    - low, high: the two numbers of the policy ("1-3")
    - letter: the letter the policy is about
    - password: the stored password
    """

    low: int
    high: int
    letter: str
    password: str

    @classmethod
    def from_line(cls, line: str) -> "PasswordEntry":
        m = _ENTRY_RE.match(line)
        if not m:
            raise ValueError(f"Malformed password entry: {line!r}")
        return cls(low=int(m.group(1)), high=int(m.group(2)), letter=m.group(3), password=m.group(4))

    def valid_by_count(self) -> bool:
        """Sled rental policy: letter occurs between low and high times."""
        return self.low <= self.password.count(self.letter) <= self.high

    def valid_by_position(self) -> bool:
        """Toboggan policy: letter at exactly one of the 1-based positions."""
        return self._letter_at(self.low) != self._letter_at(self.high)

    def _letter_at(self, position: int) -> bool:
        index = position - 1
        return 0 <= index < len(self.password) and self.password[index] == self.letter


def parse(text: str) -> List[PasswordEntry]:
    return [PasswordEntry.from_line(line) for line in text.splitlines() if line.strip()]


def solve(text: str) -> Dict[str, Any]:
    entries = parse(text)
    return {
        "part1": sum(1 for e in entries if e.valid_by_count()),
        "part2": sum(1 for e in entries if e.valid_by_position()),
    }


def run_once(resolver: Optional[InputResolver] = None) -> Dict[str, Any]:
    resolver = resolver or InputResolver.from_env({PUZZLE: EXAMPLE})
    data = resolver.resolve(PUZZLE)
    return {"puzzle": str(PUZZLE), "source": data.source, **solve(data.text)}
