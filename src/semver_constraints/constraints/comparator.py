"""Version comparators: single conditions and bracketed ranges.

A ``Range`` is what wildcard, caret, tilde and hyphen forms expand into. Its
bounds describe the bracket ``[start, end)`` and its operator says how the
bracket is applied, so ``>1.2.x`` is the ``1.2.x`` bracket read with ``>``
(every version at or above the end bound).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from ..models.version import MIN_VERSION, Version
from .op import Op


@dataclass(frozen=True)
class Condition:
    """A single ``<operator><version>`` check."""

    operator: Op
    version: Version

    def __str__(self) -> str:
        return f"{self.operator.value}{self.version}"

    def is_satisfied_by(self, version: Version) -> bool:
        result = Version.compare(version, self.version)
        if self.operator is Op.EQUAL:
            return result == 0
        if self.operator is Op.NOT_EQUAL:
            return result != 0
        if self.operator is Op.LESS_THAN:
            return result < 0
        if self.operator is Op.LESS_THAN_OR_EQUAL:
            return result <= 0
        if self.operator is Op.GREATER_THAN:
            return result > 0
        return result >= 0

    def opposite(self) -> str:
        """Render the negation of this condition."""
        return f"{self.operator.negate().value}{self.version}"


@dataclass(frozen=True)
class Range:
    """A ``[start, end)`` bracket combined under ``operator``."""

    start: Comparator
    end: Comparator
    operator: Op

    def __str__(self) -> str:
        return self._to_string(self.operator)

    def is_satisfied_by(self, version: Version) -> bool:
        start = self.start.is_satisfied_by(version)
        end = self.end.is_satisfied_by(version)
        if self.operator is Op.EQUAL:
            return start and end
        if self.operator is Op.NOT_EQUAL:
            return not start or not end
        if self.operator is Op.LESS_THAN:
            return not start and end
        if self.operator is Op.LESS_THAN_OR_EQUAL:
            return end
        if self.operator is Op.GREATER_THAN:
            return start and not end
        return start

    def opposite(self) -> str:
        """Render the negation of this range as constraint text."""
        return self._to_string(self.operator.negate())

    def _to_string(self, operator: Op) -> str:
        if operator is Op.EQUAL:
            return f"{self.start} {self.end}"
        if operator is Op.NOT_EQUAL:
            return f"{self.start.opposite()} || {self.end.opposite()}"
        if operator is Op.LESS_THAN:
            return self.start.opposite()
        if operator is Op.LESS_THAN_OR_EQUAL:
            return str(self.end)
        if operator is Op.GREATER_THAN:
            return self.end.opposite()
        return str(self.start)


Comparator: TypeAlias = Condition | Range

# ">=0.0.0", the unrestricted lower bound.
GREATER_THAN_MIN = Condition(Op.GREATER_THAN_OR_EQUAL, MIN_VERSION)
