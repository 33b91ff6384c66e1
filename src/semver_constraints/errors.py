"""Error type shared by every parser in the package."""

from __future__ import annotations


class SemverError(ValueError):
    """Raised when a version, pre-release or constraint cannot be parsed or built."""


def ensure(condition: bool, message: str) -> None:
    """Raise ``SemverError`` with ``message`` unless ``condition`` holds."""
    if not condition:
        raise SemverError(message)
