from __future__ import annotations

import re
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from harness import InputResolver, PuzzleId


PUZZLE = PuzzleId(year=2020, day=4)

EXAMPLE = """ecl:gry pid:860033327 eyr:2020 hcl:#fffffd
byr:1937 iyr:2017 cid:147 hgt:183cm

iyr:2013 ecl:amb cid:350 eyr:2023 pid:028048884
hcl:#cfa07d byr:1929

hcl:#ae17e1 iyr:2013
eyr:2024
ecl:brn pid:760753108 byr:1931
hgt:179cm

hcl:#cfa07d eyr:2025 pid:166559648
iyr:2011 ecl:brn hgt:59in
"""

EXPECTED: Dict[str, Any] = {"part1": 2, "part2": 2}

REQUIRED_FIELDS = frozenset({"byr", "iyr", "eyr", "hgt", "hcl", "ecl", "pid"})

_BLANK_LINE_RE = re.compile(r"\r?\n[ \t]*\r?\n")
_YEAR_RE = re.compile(r"^\d{4}$")
_HEIGHT_RE = re.compile(r"^(\d+)(cm|in)$")
_HEIGHT_LIMITS = {"cm": (150, 193), "in": (59, 76)}

Record = Dict[str, str]


class Passport(BaseModel):
    """
    A passport whose fields pass every validation rule.

    Fields
    - byr: birth year, four digits, 1920-2002
    - iyr: issue year, four digits, 2010-2020
    - eyr: expiration year, four digits, 2020-2030
    - hgt: height, 150-193cm or 59-76in
    - hcl: hair colour, "#" and six hex digits
    - ecl: eye colour, one of seven codes
    - pid: passport id, nine digits including leading zeroes
    - cid: country id, ignored
    """

    byr: int = Field(..., ge=1920, le=2002)
    iyr: int = Field(..., ge=2010, le=2020)
    eyr: int = Field(..., ge=2020, le=2030)
    hgt: str
    hcl: str = Field(..., pattern=r"^#[0-9a-f]{6}$")
    ecl: Literal["amb", "blu", "brn", "gry", "grn", "hzl", "oth"]
    pid: str = Field(..., pattern=r"^[0-9]{9}$")
    cid: Optional[str] = None

    @field_validator("byr", "iyr", "eyr", mode="before")
    @classmethod
    def _four_digit_year(cls, v: Any) -> Any:
        if not isinstance(v, str) or not _YEAR_RE.match(v):
            raise ValueError("year must be four digits")
        return v

    @field_validator("hgt")
    @classmethod
    def _height_in_range(cls, v: str) -> str:
        m = _HEIGHT_RE.match(v)
        if not m:
            raise ValueError("height must be a number followed by cm or in")
        low, high = _HEIGHT_LIMITS[m.group(2)]
        if not low <= int(m.group(1)) <= high:
            raise ValueError(f"height must be {low}-{high}{m.group(2)}")
        return v


def parse(text: str) -> List[Record]:
    """Split the batch file into key:value records separated by blank lines."""
    records: List[Record] = []
    for block in _BLANK_LINE_RE.split(text.strip()):
        record: Record = {}
        for token in block.split():
            key, sep, value = token.partition(":")
            if not sep or not key:
                raise ValueError(f"Malformed passport field: {token!r}")
            record[key] = value
        if record:
            records.append(record)
    return records


def has_required_fields(record: Record) -> bool:
    return REQUIRED_FIELDS.issubset(record)


def validate(record: Record) -> Optional[Passport]:
    """Return the validated Passport, or None if any rule fails."""
    try:
        return Passport.model_validate(record)
    except ValidationError:
        return None


def solve(text: str) -> Dict[str, Any]:
    records = parse(text)
    return {
        "part1": sum(1 for r in records if has_required_fields(r)),
        "part2": sum(1 for r in records if validate(r) is not None),
    }


def run_once(resolver: Optional[InputResolver] = None) -> Dict[str, Any]:
    resolver = resolver or InputResolver.from_env({PUZZLE: EXAMPLE})
    data = resolver.resolve(PUZZLE)
    return {"puzzle": str(PUZZLE), "source": data.source, **solve(data.text)}
