"""Semantic versions and version constraints.

This package parses SemVer 2.0.0 versions, orders them by SemVer precedence and
checks them against npm-style constraint strings (operators, X-ranges,
caret/tilde ranges, hyphen ranges, AND/OR). It has no I/O of its own, so it can
be used from the bundled CLI or embedded in other tooling.
"""

from .compare import (
    compare,
    equal,
    greater_than,
    greater_than_or_equal,
    less_than,
    less_than_or_equal,
    not_equal,
    rsort,
    satisfies,
    sort,
)
from .constraints import (
    DEFAULT_CONSTRAINT,
    GREATER_THAN_MIN,
    Comparator,
    Condition,
    Constraint,
    Op,
    Range,
    VersionDescriptor,
)
from .errors import SemverError
from .models import DEFAULT_PRE_RELEASE, MIN_VERSION, Inc, PreRelease, Version

__all__ = [
    # Values
    "Inc",
    "MIN_VERSION",
    "DEFAULT_PRE_RELEASE",
    "PreRelease",
    "Version",
    # Constraints
    "Comparator",
    "Condition",
    "Constraint",
    "DEFAULT_CONSTRAINT",
    "GREATER_THAN_MIN",
    "Op",
    "Range",
    "VersionDescriptor",
    # Errors
    "SemverError",
    # Free functions
    "compare",
    "equal",
    "greater_than",
    "greater_than_or_equal",
    "less_than",
    "less_than_or_equal",
    "not_equal",
    "rsort",
    "satisfies",
    "sort",
]
