from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Optional

from .config import DEFAULT_CACHE_DIR
from .models import PuzzleId


class InputCache:
    """
    Plain-text cache of downloaded puzzle inputs, one file per puzzle.

    - Layout: {root}/{year}/day_{DD}.txt
    - Writes go to a temporary file in the target directory which then
      atomically replaces the target, so readers never see a partial file.
    - Inputs are immutable once published, so entries never expire.
    """

    def __init__(self, root: Optional[os.PathLike[str] | str] = None) -> None:
        self._root = Path(root) if root else DEFAULT_CACHE_DIR

    @property
    def root(self) -> Path:
        return self._root

    def path_for(self, puzzle: PuzzleId) -> Path:
        return self._root / f"{puzzle.cache_key}.txt"

    def get(self, puzzle: PuzzleId) -> Optional[str]:
        """
        Return cached text, or None when there is no usable entry.

        An empty file counts as a miss. Read errors on an existing file
        propagate as OSError.
        """
        path = self.path_for(puzzle)
        if not path.is_file():
            return None
        with path.open("r", encoding="utf-8", newline="") as f:
            text = f.read()
        return text or None

    def put(self, puzzle: PuzzleId, text: str) -> Path:
        path = self.path_for(puzzle)
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(text)
            os.replace(tmp_name, path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except FileNotFoundError:
                pass
            raise
        return path


__all__ = ["InputCache"]
