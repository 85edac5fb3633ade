from __future__ import annotations

import argparse
import sys
from types import ModuleType
from typing import Any, Dict, List, Optional, Sequence

from harness import ConfigError, InputResolver, PuzzleId, RetrievalError
from harness.config import log_level_from_env
from harness.log import configure_logging, get_logger
from harness.models import DEFAULT_YEAR
from harness.resolver import ExampleSource

from .registry import DAYS, bundled_examples, load_day


logger = get_logger(__name__)

PARTS = ("part1", "part2")


def _fmt_answer(value: Any) -> str:
    return "n/a" if value is None else str(value)


def _day_from_arg(raw: str) -> int:
    try:
        puzzle = PuzzleId.parse(raw)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    if puzzle.year != DEFAULT_YEAR:
        raise argparse.ArgumentTypeError(f"only {DEFAULT_YEAR} puzzles are available, got {puzzle.year}")
    if puzzle.day not in DAYS:
        raise argparse.ArgumentTypeError(f"no puzzle program for day {puzzle.day}; available: {sorted(DAYS)}")
    return puzzle.day


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="aoc2020", description="Advent of Code 2020 puzzle programs")
    parser.add_argument(
        "--log-level",
        default=log_level_from_env(),
        help="Logging level (default: $AOC_LOG_LEVEL or WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_run = sub.add_parser("run", help="Solve one day with real input if a session file exists, else example data")
    p_run.add_argument("day", type=_day_from_arg, help="Day number, e.g. 1 or 2020/1")

    p_check = sub.add_parser("check", help="Solve the bundled examples and compare with the expected answers")
    p_check.add_argument("days", nargs="*", type=_day_from_arg, help="Days to check (default: all)")
    return parser


def run_day(day: int, *, resolver: Optional[InputResolver] = None) -> Dict[str, Any]:
    """Resolve and solve one day, printing its answers."""
    module = load_day(day)
    resolver = resolver or InputResolver.from_env(bundled_examples())
    print(f"Advent of Code 2020 - Day {day:02d}")
    result = module.run_once(resolver)
    print(f"Input: {result['source']}")
    for i, part in enumerate(PARTS, start=1):
        print(f"Part {i}: {_fmt_answer(result.get(part))}")
    return result


def check_day(module: ModuleType) -> List[str]:
    """Return mismatch descriptions for one program's example run (empty when all match)."""
    data = ExampleSource(examples={module.PUZZLE: module.EXAMPLE}).load(module.PUZZLE)
    answers = module.solve(data.text)
    problems: List[str] = []
    for part in PARTS:
        expected = module.EXPECTED.get(part)
        got = answers.get(part)
        if got != expected:
            problems.append(f"{part}: expected {_fmt_answer(expected)}, got {_fmt_answer(got)}")
    return problems


def check_days(days: Sequence[int]) -> bool:
    ok = True
    for day in days:
        problems = check_day(load_day(day))
        if problems:
            ok = False
            print(f"Day {day:02d}: FAILED ({'; '.join(problems)})")
        else:
            print(f"Day {day:02d}: ok")
    return ok


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if args.command == "check":
        days = args.days or sorted(DAYS)
        return 0 if check_days(days) else 1

    try:
        run_day(args.day)
    except (ConfigError, RetrievalError) as exc:
        logger.debug("Run failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
