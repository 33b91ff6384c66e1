"""Value types for semantic versions."""

from __future__ import annotations

from .pre_release import DEFAULT_PRE_RELEASE, PreRelease
from .version import MIN_VERSION, Inc, Version

__all__ = [
    "DEFAULT_PRE_RELEASE",
    "Inc",
    "MIN_VERSION",
    "PreRelease",
    "Version",
]
