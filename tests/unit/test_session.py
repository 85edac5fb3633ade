from __future__ import annotations

import pytest

from harness.session import SessionFileError, find_session_file, read_session_token


def test_find_session_file(tmp_path):
    path = tmp_path / ".aoc-session"
    assert find_session_file(path) is None
    path.write_text("abc", encoding="utf-8")
    assert find_session_file(path) == path


def test_token_trimmed(tmp_path):
    path = tmp_path / ".aoc-session"
    path.write_text("\n  53616c7465645f5f  \r\n", encoding="utf-8")
    assert read_session_token(path) == "53616c7465645f5f"


@pytest.mark.parametrize(
    "content",
    [b"", b"  \n", b"\xff\xfeabc", "abcé".encode("utf-8"), b"abc def", b'abc"', b"abc,def", b"a\\b"],
)
def test_unusable_tokens_rejected(tmp_path, content):
    path = tmp_path / ".aoc-session"
    path.write_bytes(content)
    with pytest.raises(SessionFileError):
        read_session_token(path)


def test_missing_file_is_os_error(tmp_path):
    with pytest.raises(OSError):
        read_session_token(tmp_path / "nope")
