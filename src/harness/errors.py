from __future__ import annotations


class HarnessError(RuntimeError):
    """Base error for input resolution and harness configuration."""


class ConfigError(HarnessError):
    """An AOC_* environment setting has an unusable value."""


class MissingExampleError(HarnessError):
    """No example text is bundled for the requested puzzle."""


class RetrievalError(HarnessError):
    """A session file is present but the real input could not be obtained."""


__all__ = ["ConfigError", "HarnessError", "MissingExampleError", "RetrievalError"]
