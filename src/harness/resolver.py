"""
Puzzle input resolution.

The presence of the session credential file selects the source for a run:

- no session file: the example text bundled with the puzzle program
  (no network, no cache access);
- session file: the personal input, served from the on-disk cache or
  downloaded once and cached.

A session file is an explicit opt-in to real data. When it exists and the
input cannot be obtained, resolution fails with RetrievalError instead of
quietly falling back to the example.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

import httpx

from .aoc import AocClient, AocError
from .cache import InputCache
from .config import Settings
from .errors import HarnessError, MissingExampleError, RetrievalError
from .log import get_logger
from .models import PuzzleId, PuzzleInput
from .session import SessionFileError, find_session_file, read_session_token


logger = get_logger(__name__)

PuzzleRef = Union[PuzzleId, str, int]

@dataclass(frozen=True)
class ExampleSource:
    examples: Mapping[PuzzleId, str]

    def load(self, puzzle: PuzzleId) -> PuzzleInput:
        text = self.examples.get(puzzle)
        if not text:
            raise MissingExampleError(f"No example input bundled for puzzle {puzzle}")
        logger.info("Using bundled example input for %s", puzzle)
        return PuzzleInput(puzzle=puzzle, text=text, source="example")


@dataclass(frozen=True)
class RemoteSource:
    session_file: Path
    settings: Settings
    cache: InputCache
    client: Optional[httpx.Client] = None

    def load(self, puzzle: PuzzleId) -> PuzzleInput:
        try:
            cached = self.cache.get(puzzle)
        except (OSError, UnicodeDecodeError) as exc:
            raise RetrievalError(
                f"Failed to read cached input {self.cache.path_for(puzzle)}: {exc}"
            ) from exc
        if cached is not None:
            logger.info("Using cached input for %s from %s", puzzle, self.cache.path_for(puzzle))
            return PuzzleInput(puzzle=puzzle, text=cached, source="cache")

        try:
            token = read_session_token(self.session_file)
        except (OSError, UnicodeDecodeError, SessionFileError) as exc:
            raise RetrievalError(f"Cannot use session file {str(self.session_file)!r}: {exc}") from exc

        with AocClient(
            token,
            base_url=self.settings.base_url,
            timeout=self.settings.timeout,
            user_agent=self.settings.user_agent,
            client=self.client,
        ) as aoc:
            url = aoc.input_url(puzzle)
            try:
                text = aoc.fetch_input(puzzle)
            except AocError as exc:
                raise RetrievalError(f"Failed to download input for {puzzle}: {exc}") from exc
        logger.info("Downloaded input for %s from %s", puzzle, url)

        try:
            path = self.cache.put(puzzle, text)
        except OSError as exc:
            # The download itself succeeded; the next run will simply fetch again
            logger.warning("Could not cache input for %s: %s", puzzle, exc)
        else:
            logger.debug("Cached input for %s at %s", puzzle, path)
        return PuzzleInput(puzzle=puzzle, text=text, source="remote")


class InputResolver:
    """
    Resolve puzzle input from the bundled example or the user's real data.

    Usage
    - `examples` maps each puzzle the caller may ask for to its example text.
    - `resolve(puzzle)` returns a `PuzzleInput` whose `source` tells which
      path was taken ("example", "cache" or "remote").
    - `client` lets callers inject an `httpx.Client` (e.g. with a mock
      transport); otherwise each download uses a short-lived client.
    """

    def __init__(
        self,
        examples: Optional[Mapping[PuzzleId, str]] = None,
        *,
        settings: Optional[Settings] = None,
        cache: Optional[InputCache] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self._examples: Dict[PuzzleId, str] = dict(examples or {})
        self._settings = settings or Settings()
        self._cache = cache or InputCache(self._settings.cache_dir)
        self._client = client

    # -------- Construction helpers --------
    @classmethod
    def from_env(
        cls,
        examples: Optional[Mapping[PuzzleId, str]] = None,
        *,
        client: Optional[httpx.Client] = None,
    ) -> "InputResolver":
        return cls(examples, settings=Settings.from_env(), client=client)

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def cache(self) -> InputCache:
        return self._cache

    def add_example(self, puzzle: PuzzleRef, text: str) -> None:
        self._examples[_as_puzzle_id(puzzle)] = text

    # -------- Core operations --------
    def source(self) -> Union[ExampleSource, RemoteSource]:
        """Pick the input source from the current state of the session file."""
        session_file = find_session_file(self._settings.session_file)
        if session_file is None:
            logger.info("Session file %r not found; example data mode", str(self._settings.session_file))
            return ExampleSource(examples=self._examples)
        return RemoteSource(
            session_file=session_file,
            settings=self._settings,
            cache=self._cache,
            client=self._client,
        )

    def resolve(self, puzzle: PuzzleRef) -> PuzzleInput:
        """
        Return the input for `puzzle`.

        Raises:
        - MissingExampleError when running on example data and none is bundled.
        - RetrievalError when a session file exists but neither the cache nor
          the download produced the input.
        """
        return self.source().load(_as_puzzle_id(puzzle))


def _as_puzzle_id(puzzle: PuzzleRef) -> PuzzleId:
    if isinstance(puzzle, PuzzleId):
        return puzzle
    return PuzzleId.parse(puzzle)


def resolve(puzzle: PuzzleRef, examples: Optional[Mapping[PuzzleId, str]] = None) -> PuzzleInput:
    """
    Resolve `puzzle` with settings taken from the environment.

    Without `examples`, every puzzle program's bundled example is available.
    """
    if examples is None:
        # Puzzle programs import harness, so the registry is loaded on demand
        from runner.registry import bundled_examples

        examples = bundled_examples()
    return InputResolver.from_env(examples).resolve(puzzle)


__all__ = [
    "ExampleSource",
    "HarnessError",
    "InputResolver",
    "MissingExampleError",
    "RemoteSource",
    "RetrievalError",
    "resolve",
]
