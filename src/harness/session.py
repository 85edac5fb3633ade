from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Optional


# Cookie values must be printable ASCII without separators
_TOKEN_RE = re.compile(r"^[!#-+\--:<-\[\]-~]+$")


class SessionFileError(RuntimeError):
    """The session file exists but does not hold a usable token."""


def find_session_file(path: os.PathLike[str] | str) -> Optional[Path]:
    """Return `path` when it is a regular file, else None."""
    p = Path(path)
    return p if p.is_file() else None


def read_session_token(path: os.PathLike[str] | str) -> str:
    """
    Read the session token from `path`.

    The whole file content is the token, trimmed of surrounding whitespace.
    Raises SessionFileError when it is empty, not UTF-8, or holds characters
    a cookie value cannot carry, and OSError when unreadable.
    """
    try:
        token = Path(path).read_text(encoding="utf-8").strip()
    except UnicodeDecodeError as exc:
        raise SessionFileError(f"Session file {str(path)!r} is not valid UTF-8") from exc
    if not token:
        raise SessionFileError(f"Session file {str(path)!r} is empty")
    if not _TOKEN_RE.match(token):
        raise SessionFileError(
            f"Session file {str(path)!r} holds characters not allowed in a cookie value"
        )
    return token


__all__ = ["SessionFileError", "find_session_file", "read_session_token"]
