from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


DEFAULT_YEAR = 2020

_ID_RE = re.compile(r"^\s*(?:(\d{4})\s*[/-]\s*)?(?:day_?)?(\d{1,2})\s*$", re.IGNORECASE)

InputSource = Literal["example", "cache", "remote"]


class PuzzleId(BaseModel):
    """
    Identifies one Advent of Code puzzle by event year and day.

    Both parts of a day share the same input, so the part is not part of
    the identifier.
    """

    model_config = ConfigDict(frozen=True)

    year: int = Field(default=DEFAULT_YEAR, ge=2015, description="Event year")
    day: int = Field(..., ge=1, le=25, description="Puzzle day (1-25)")

    @classmethod
    def parse(cls, raw: str | int, *, year: int = DEFAULT_YEAR) -> "PuzzleId":
        """Parse "5", "05", "day_05", "2020/5" or "2020-05" into a PuzzleId."""
        if isinstance(raw, int):
            return cls(year=year, day=raw)
        m = _ID_RE.match(raw or "")
        if not m:
            raise ValueError(f"Invalid puzzle identifier: {raw!r}")
        y, d = m.group(1), m.group(2)
        return cls(year=int(y) if y else year, day=int(d))

    @property
    def cache_key(self) -> str:
        return f"{self.year}/day_{self.day:02d}"

    @property
    def input_path(self) -> str:
        return f"/{self.year}/day/{self.day}/input"

    def __str__(self) -> str:
        return f"{self.year}/{self.day:02d}"


class PuzzleInput(BaseModel):
    """Resolved puzzle input text and where it came from."""

    model_config = ConfigDict(frozen=True)

    puzzle: PuzzleId
    text: str
    source: InputSource

    @property
    def is_example(self) -> bool:
        return self.source == "example"


__all__ = ["DEFAULT_YEAR", "InputSource", "PuzzleId", "PuzzleInput"]
