from __future__ import annotations

import importlib
from types import ModuleType
from typing import Dict, Iterable, List

from harness import PuzzleId


# Day number -> module holding PUZZLE, EXAMPLE, EXPECTED, solve() and run_once()
DAYS: Dict[int, str] = {
    1: "day_01.solution",
    2: "day_02.solution",
    3: "day_03.solution",
    4: "day_04.solution",
    5: "day_05.solution",
}


def load_day(day: int) -> ModuleType:
    try:
        name = DAYS[day]
    except KeyError:
        raise KeyError(f"No puzzle program for day {day}; available: {sorted(DAYS)}") from None
    return importlib.import_module(name)


def load_days(days: Iterable[int]) -> List[ModuleType]:
    return [load_day(d) for d in days]


def bundled_examples() -> Dict[PuzzleId, str]:
    """Every puzzle program's example text keyed by its puzzle id."""
    out: Dict[PuzzleId, str] = {}
    for module in load_days(DAYS):
        out[module.PUZZLE] = module.EXAMPLE
    return out
