from __future__ import annotations

from pathlib import Path

import pytest

from day_02 import solution as day02
from harness.cache import InputCache
from harness.models import PuzzleId
from runner import cli
from runner.registry import DAYS, bundled_examples, load_day


def test_check_all_examples_pass(capsys):
    assert cli.main(["check"]) == 0
    out = capsys.readouterr().out
    for day in DAYS:
        assert f"Day {day:02d}: ok" in out


def test_check_reports_mismatch(capsys, monkeypatch):
    monkeypatch.setattr(day02, "EXPECTED", {"part1": 2, "part2": 99})
    assert cli.main(["check", "2"]) == 1
    out = capsys.readouterr().out
    assert "Day 02: FAILED (part2: expected 99, got 1)" in out


def test_check_ignores_session_file(tmp_path, capsys):
    (tmp_path / ".aoc-session").write_text("", encoding="utf-8")
    assert cli.main(["check", "1", "2020/3"]) == 0
    out = capsys.readouterr().out
    assert "Day 01: ok" in out and "Day 03: ok" in out


def test_run_prints_example_answers(capsys):
    assert cli.main(["run", "5"]) == 0
    out = capsys.readouterr().out
    assert "Advent of Code 2020 - Day 05" in out
    assert "Input: example" in out
    assert "Part 1: 820" in out
    assert "Part 2: n/a" in out


def test_run_uses_cache_when_session_present(tmp_path, capsys):
    (tmp_path / ".aoc-session").write_text("abc", encoding="utf-8")
    InputCache(Path(".cache") / "aoc").put(PuzzleId(day=2), "1-3 a: abcde\n")

    assert cli.main(["run", "2"]) == 0
    out = capsys.readouterr().out
    assert "Input: cache" in out
    assert "Part 1: 1" in out


def test_run_retrieval_error_exits_nonzero(tmp_path, capsys):
    # Present but empty session file: real-data mode that cannot authenticate
    (tmp_path / ".aoc-session").write_text("\n", encoding="utf-8")

    assert cli.main(["run", "1"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("error: ")


@pytest.mark.parametrize("arg", ["26", "9", "2019/1", "abc"])
def test_run_rejects_unknown_day(arg):
    with pytest.raises(SystemExit) as ei:
        cli.main(["run", arg])
    assert ei.value.code == 2


def test_registry_examples_cover_every_day():
    examples = bundled_examples()
    assert sorted(p.day for p in examples) == sorted(DAYS)
    assert examples[PuzzleId(day=4)] == load_day(4).EXAMPLE


def test_load_day_unknown():
    with pytest.raises(KeyError):
        load_day(24)


def test_run_bad_timeout_reports_config_error(monkeypatch, capsys):
    monkeypatch.setenv("AOC_TIMEOUT", "abc")

    assert cli.main(["run", "1"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("error: ")
    assert "AOC_TIMEOUT" in err


def test_run_undecodable_cache_exits_nonzero(tmp_path, capsys):
    (tmp_path / ".aoc-session").write_text("abc", encoding="utf-8")
    path = InputCache(Path(".cache") / "aoc").path_for(PuzzleId(day=1))
    path.parent.mkdir(parents=True)
    path.write_bytes(b"\xff\xfe\x00bad")

    assert cli.main(["run", "1"]) == 1
    assert capsys.readouterr().err.startswith("error: ")
