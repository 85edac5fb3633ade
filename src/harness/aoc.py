from __future__ import annotations

from typing import Optional

import httpx

from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from .models import PuzzleId


class AocError(RuntimeError):
    """Base error for the Advent of Code client."""


class AocAuthError(AocError):
    """The session cookie was rejected (expired, revoked or malformed)."""


class AocNotFoundError(AocError):
    """The puzzle does not exist or is not unlocked yet."""


class AocApiError(AocError):
    """Unexpected HTTP status or response body."""


class AocClient:
    """
    Minimal adventofcode.com client for downloading personal puzzle input.

    Notes
    - Authenticates with the `session` cookie copied from a logged-in browser.
    - Sends a descriptive User-Agent as the site's automation guidelines ask.
    - Makes exactly one request per fetch. There is no retry loop; callers
      cache results so each input is downloaded once.
    """

    def __init__(
        self,
        session_token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        client: Optional[httpx.Client] = None,
    ) -> None:
        if not session_token:
            raise ValueError("session_token is required")
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=self._timeout)
        self._headers = {
            "Cookie": f"session={session_token}",
            "User-Agent": user_agent,
        }

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "AocClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # --------------- Public API ---------------
    def input_url(self, puzzle: PuzzleId) -> str:
        return f"{self._base_url}{puzzle.input_path}"

    def fetch_input(self, puzzle: PuzzleId) -> str:
        """
        Download the personal input for `puzzle`.

        Returns the response body unchanged (including the trailing newline).
        Raises AocAuthError, AocNotFoundError or AocApiError on HTTP problems
        and AocError on transport failures.
        """
        url = self.input_url(puzzle)
        try:
            resp = self._client.get(url, headers=self._headers)
        except (httpx.TimeoutException, httpx.TransportError) as exc:
            raise AocError(f"Request to {url} failed: {exc}") from exc

        if resp.status_code == 200:
            if not resp.text:
                raise AocApiError(f"Empty input returned from {url}")
            return resp.text
        # AoC answers 400 "Puzzle inputs differ by user. Please log in" for bad cookies
        if resp.status_code in (400, 401, 403):
            raise AocAuthError(
                f"HTTP {resp.status_code} from {url}: session rejected ({resp.text[:200].strip()})"
            )
        if resp.status_code == 404:
            raise AocNotFoundError(f"HTTP 404 from {url}: puzzle not available")
        raise AocApiError(f"HTTP {resp.status_code} from {url}: {resp.text[:200]}")


__all__ = [
    "AocClient",
    "AocError",
    "AocAuthError",
    "AocNotFoundError",
    "AocApiError",
]
