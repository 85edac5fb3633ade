import logging
import os
import sys

import pytest


def pytest_configure():
    # Ensure `src/` is importable as top-level for `harness.*` and `day_*` imports
    root = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    src_path = os.path.join(root, "src")
    if src_path not in sys.path:
        sys.path.insert(0, src_path)


@pytest.fixture(autouse=True)
def _isolated_workdir(tmp_path, monkeypatch):
    # Keep a developer's real .aoc-session, cache and AOC_* settings out of tests
    for name in list(os.environ):
        if name.startswith("AOC_"):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    logger = logging.getLogger("aoc2020")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
