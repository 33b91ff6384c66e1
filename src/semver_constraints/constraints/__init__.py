"""Constraint grammar: comparators, descriptor resolution and OR-of-AND constraints."""

from __future__ import annotations

from .comparator import GREATER_THAN_MIN, Comparator, Condition, Range
from .constraint import DEFAULT_CONSTRAINT, Constraint
from .descriptor import VersionDescriptor
from .op import Op

__all__ = [
    "Comparator",
    "Condition",
    "Constraint",
    "DEFAULT_CONSTRAINT",
    "GREATER_THAN_MIN",
    "Op",
    "Range",
    "VersionDescriptor",
]
