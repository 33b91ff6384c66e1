"""Comparison helpers over version strings or parsed ``Version`` values.

Strings are parsed strictly; an invalid string raises ``SemverError``.
"""

from __future__ import annotations

from functools import cmp_to_key
from collections.abc import Iterable
from typing import TypeVar

from .constraints.constraint import Constraint
from .models.version import Version

VersionLike = TypeVar("VersionLike", Version, str)


def _coerce(version: Version | str) -> Version:
    return version if isinstance(version, Version) else Version.parse(version)


def compare(v1: Version | str, v2: Version | str) -> int:
    """Return -1, 0 or 1 as ``v1`` sorts before, equal to or after ``v2``."""
    return Version.compare(_coerce(v1), _coerce(v2))


def less_than(v1: Version | str, v2: Version | str) -> bool:
    return compare(v1, v2) < 0


def less_than_or_equal(v1: Version | str, v2: Version | str) -> bool:
    return compare(v1, v2) <= 0


def greater_than(v1: Version | str, v2: Version | str) -> bool:
    return compare(v1, v2) > 0


def greater_than_or_equal(v1: Version | str, v2: Version | str) -> bool:
    return compare(v1, v2) >= 0


def equal(v1: Version | str, v2: Version | str) -> bool:
    return compare(v1, v2) == 0


def not_equal(v1: Version | str, v2: Version | str) -> bool:
    return compare(v1, v2) != 0


def sort(versions: Iterable[VersionLike]) -> list[VersionLike]:
    """Return a new list of the given versions (or version strings) in ascending order."""
    return sorted(versions, key=cmp_to_key(compare))


def rsort(versions: Iterable[VersionLike]) -> list[VersionLike]:
    """Return a new list of the given versions (or version strings) in descending order."""
    return sorted(versions, key=cmp_to_key(compare), reverse=True)


def satisfies(version: Version | str, constraint: Constraint | str) -> bool:
    """Check ``version`` against ``constraint``, parsing whichever is given as text."""
    if not isinstance(constraint, Constraint):
        constraint = Constraint.parse(constraint)
    return _coerce(version).is_satisfying(constraint)
